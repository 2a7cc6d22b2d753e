"""
redis_stat.args - Command line resolution module

Provides option parsing, positional classification, host specifier parsing
and validation for redis-stat.
"""

from .base import ArgumentParser
from .hosts import HostAddressParser, ShorthandForm, UriForm
from .models import Configuration, Defaults, ElasticsearchTarget, HostDescriptor
from .positional import PositionalClassifier, Positionals
from .sink import parse_sink_url
from .systems import RuntimeDetector
from .validator import ConfigValidator, ValidationResult

# Primary export
__all__ = [
    "ArgumentParser",       # Main public interface
    "Configuration",
    "Defaults",
    "ElasticsearchTarget",
    "HostDescriptor",
    "HostAddressParser",    # For host specifier handling
    "UriForm",
    "ShorthandForm",
    "PositionalClassifier",
    "Positionals",
    "ConfigValidator",      # For testing/validation
    "ValidationResult",
    "RuntimeDetector",      # For runtime detection
    "parse_sink_url",
]
