"""cmdtable exception hierarchy.

All cmdtable-specific exceptions inherit from CmdTableError,
so embedding loops can catch library failures in one clause.
"""


class CmdTableError(Exception):
    """Base exception for all cmdtable errors."""


class TableError(CmdTableError):
    """A command table or descriptor is malformed."""


class ArgumentError(CmdTableError, ValueError):
    """A token was present but could not be converted to the requested type."""

    def __init__(self, token: str, kind: str) -> None:
        super().__init__(f"invalid {kind} argument: {token!r}")
        self.token = token
        self.kind = kind


class ConfigError(CmdTableError):
    """Invalid or missing configuration."""
