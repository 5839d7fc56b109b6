"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without
importing ``importlib.metadata`` at startup.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by lib_layered_config.
    * :func:`print_info` - Render the metadata block for ``fnpipe info``.
"""

from __future__ import annotations

name = "fnpipe"
title = "Functional value transformation showcase: composition, lazy pipelines and a loop-vs-stream benchmark"
version = "1.0.0"
homepage = "https://pypi.org/project/fnpipe/"
author = "fnpipe maintainers"
author_email = ""
shell_command = "fnpipe"

#: Vendor, application, and slug identifiers used to locate layered config files.
LAYEREDCONF_VENDOR: str = "fnpipe"
LAYEREDCONF_APP: str = "fnpipe"
LAYEREDCONF_SLUG: str = "fnpipe"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        <BLANKLINE>
        Info for fnpipe:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n" + "\n".join(lines))
