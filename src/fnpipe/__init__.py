"""Public package surface exposing the pipeline, benchmark, and metadata.

Routes imports through the architectural layers:
- Domain exports: pipeline evaluator, benchmark variants, composition helpers
- Application exports: the showcase use case
- Composition exports: wired configuration loader
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.showcase import run_showcase

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.benchmark import run_benchmark, sum_declarative, sum_iterative
from .domain.functional import and_then, compose
from .domain.pipeline import evaluate

__all__ = [
    "and_then",
    "compose",
    "evaluate",
    "get_config",
    "print_info",
    "run_benchmark",
    "run_showcase",
    "sum_declarative",
    "sum_iterative",
]
