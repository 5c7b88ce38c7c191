"""Exception hierarchy for zt-hosts."""


class ZtHostsError(Exception):
    """Base class for all zt-hosts errors."""


class ConfigError(ZtHostsError):
    """Configuration file is malformed or a required key is missing."""


class DependencyMissing(ZtHostsError):
    """A required external binary is not installed."""


class PermissionDenied(ZtHostsError):
    """The process lacks the privilege it needs (usually root)."""


class FetchError(ZtHostsError):
    """The membership API could not be reached or returned an error status."""


class ParseError(ZtHostsError):
    """The membership API response was not the expected JSON array."""


class FileAccessError(ZtHostsError):
    """A target file could not be read or written."""

    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


class InterfaceError(ZtHostsError):
    """The WSL network interface has no usable IPv4 address."""
