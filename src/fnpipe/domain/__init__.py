"""Domain layer - pure transformation logic with no I/O or framework dependencies.

Contents:
    * :mod:`.functional` - Composition helpers, closures, lazy sequences
    * :mod:`.pipeline` - Filter/normalize/observe/sum evaluator
    * :mod:`.benchmark` - Loop-versus-stream equivalence benchmark
    * :mod:`.enums` - Domain enumerations (OutputFormat, Variant)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .benchmark import (
    DATASET_SIZE,
    WARMUP_ROUNDS,
    BenchmarkReport,
    VariantTiming,
    generate_dataset,
    run_benchmark,
    sum_declarative,
    sum_iterative,
)
from .enums import OutputFormat, Variant
from .errors import ConfigurationError, VariantMismatchError
from .functional import and_then, bind_prefix, compose, identity, iterate, take, trim_to_upper
from .pipeline import evaluate, is_qualifying, normalize

__all__ = [
    # Functional
    "and_then",
    "bind_prefix",
    "compose",
    "identity",
    "iterate",
    "take",
    "trim_to_upper",
    # Pipeline
    "evaluate",
    "is_qualifying",
    "normalize",
    # Benchmark
    "DATASET_SIZE",
    "WARMUP_ROUNDS",
    "BenchmarkReport",
    "VariantTiming",
    "generate_dataset",
    "run_benchmark",
    "sum_declarative",
    "sum_iterative",
    # Enums
    "OutputFormat",
    "Variant",
    # Errors
    "ConfigurationError",
    "VariantMismatchError",
]
