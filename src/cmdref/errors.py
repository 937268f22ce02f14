"""Exceptions raised by cmdref.

Every failure surfaces to the entry point, which reports it and exits with
the error's ``exit_code``. Nothing is recovered locally.
"""


class CmdrefError(Exception):
    """Base exception for cmdref errors."""

    exit_code = 1


class ConfigError(CmdrefError):
    """Raised when the configuration cannot be loaded or is invalid."""

    pass


class CommandLoadError(CmdrefError):
    """Raised when the documented CLI cannot be imported."""

    pass


class RenderError(CmdrefError):
    """Raised when a document cannot be serialized or written."""

    pass


__all__ = ["CmdrefError", "CommandLoadError", "ConfigError", "RenderError"]
