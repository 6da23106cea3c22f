"""Custom exception types for the aclparser application.

The parser itself never raises for malformed ACL content; these exceptions
cover the layers around it (reading files, loading settings, writing output).
"""


class AclParserError(Exception):
    """Base exception class for all application-specific errors."""

    pass


class SourceError(AclParserError):
    """Raised when an ACL4SSR source file cannot be read or decoded."""

    pass


class ConfigError(AclParserError):
    """Raised for configuration-related errors."""

    pass


class OutputError(AclParserError):
    """Raised when parse results cannot be rendered or written."""

    pass
