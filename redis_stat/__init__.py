"""
redis_stat - Redis monitoring tool

Resolves the redis-stat command line into an immutable Configuration
describing which Redis servers to sample, how often and how to present the
results.
"""

__version__ = "0.5.0"
__license__ = "MIT"

from .args import ArgumentParser, Configuration, Defaults, HostDescriptor
from .errors import ConfigurationError, FlagError, HostParseError, ValidationError

__all__ = [
    "ArgumentParser",
    "Configuration",
    "Defaults",
    "HostDescriptor",
    "ConfigurationError",
    "FlagError",
    "HostParseError",
    "ValidationError",
]
