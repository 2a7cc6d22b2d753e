"""
redis_stat.errors - Configuration error hierarchy

Every failure while resolving the command line is a ConfigurationError.
The argument parser catches that base class only, prints the message with
the usage text and exits with status 1.
"""


class ConfigurationError(Exception):
    """Base class for command-line resolution failures"""


class FlagError(ConfigurationError):
    """Malformed or environment-incompatible option flag"""


class HostParseError(ConfigurationError):
    """Host specifier that matches neither the URI nor the shorthand grammar"""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class ValidationError(ConfigurationError):
    """Assembled configuration violates an invariant"""
