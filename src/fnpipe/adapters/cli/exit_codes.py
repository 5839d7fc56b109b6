"""POSIX-conventional exit codes for CLI error paths.

Faults that escape a command (a failing observer, a variant mismatch) are
mapped by ``lib_cli_exit_tools``; the codes below are the ones commands
raise themselves.

Contents:
    * :class:`ExitCode` — IntEnum of the exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h.

    * 0–1: generic success / failure
    * 22: EINVAL, unusable command-line argument
    * 78: EX_CONFIG, invalid configuration

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
