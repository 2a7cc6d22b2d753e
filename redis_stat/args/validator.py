"""
Configuration validation module for redis-stat

Runs an ordered list of consistency checks over a resolved Configuration.
Each check returns (is_valid, error_message); validation stops at the first
failing check and reports it through a ValidationResult.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional, Tuple

from ..errors import ValidationError
from .models import SCHEMES, STYLES, Configuration


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a Configuration"""
    config: Optional[Configuration] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Configuration:
        """Return the validated configuration or raise the first failure"""
        if self.error is not None:
            raise self.error
        return self.config


class ConfigValidator:
    """Validates a resolved Configuration"""

    @classmethod
    def validate_interval(cls, interval: Any) -> Tuple[bool, Optional[str]]:
        if not _is_positive_number(interval):
            return False, f"Invalid interval: {interval}"
        return True, None

    @classmethod
    def validate_count(cls, count: Any) -> Tuple[bool, Optional[str]]:
        if count is not None and not _is_positive_number(count):
            return False, f"Invalid count: {count}"
        return True, None

    @classmethod
    def validate_hosts_present(cls, hosts) -> Tuple[bool, Optional[str]]:
        if not hosts:
            return False, "Redis host not given"
        return True, None

    @classmethod
    def validate_schemes(cls, hosts) -> Tuple[bool, Optional[str]]:
        for host in hosts:
            if host.scheme not in SCHEMES:
                return False, f"Invalid scheme '{host.scheme}'"
        return True, None

    @classmethod
    def validate_ports(cls, hosts) -> Tuple[bool, Optional[str]]:
        for host in hosts:
            if host.port is None:
                continue
            if not isinstance(host.port, int) or not 0 < host.port < 65536:
                return False, f"Invalid port: {host.port}"
        return True, None

    @classmethod
    def validate_style(cls, style: Any) -> Tuple[bool, Optional[str]]:
        if style not in STYLES:
            return False, f"Invalid style: {style}"
        return True, None

    @classmethod
    def validate_daemon(cls, daemon: bool, server_port: Optional[int]) -> Tuple[bool, Optional[str]]:
        if daemon and server_port is None:
            return False, "--daemon option must be used with --server option"
        return True, None

    @classmethod
    def validate(cls, config: Configuration) -> ValidationResult:
        """
        Validate a configuration without modifying it

        Args:
            config: Fully assembled configuration

        Returns:
            ValidationResult holding either the configuration or the first error
        """
        checks = (
            lambda: cls.validate_interval(config.interval),
            lambda: cls.validate_count(config.count),
            lambda: cls.validate_hosts_present(config.hosts),
            lambda: cls.validate_schemes(config.hosts),
            lambda: cls.validate_ports(config.hosts),
            lambda: cls.validate_style(config.style),
            lambda: cls.validate_daemon(config.daemon, config.server_port),
        )

        for check in checks:
            valid, error = check()
            if not valid:
                return ValidationResult(error=ValidationError(error))

        return ValidationResult(config=config)
