"""
Data model for resolved redis-stat options

Holds the immutable values produced by argument resolution: host
descriptors, the Elasticsearch target, the baseline defaults and the final
configuration handed to the monitoring loop.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

PLAIN_SCHEME = "redis"
TLS_SCHEME = "rediss"
SCHEMES = (PLAIN_SCHEME, TLS_SCHEME)

STYLES = ("unicode", "ascii")

DEFAULT_SERVER_PORT = 63790
DEFAULT_ES_INDEX = "redis-stat"


@dataclass(frozen=True)
class HostDescriptor:
    """One monitored Redis endpoint"""
    scheme: str
    host: str
    port: Optional[int] = None
    password: Optional[str] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.port is None:
            return f"{self.scheme}://{self.host}"
        return f"{self.scheme}://{self.host}:{self.port}"


@dataclass(frozen=True)
class ElasticsearchTarget:
    """Normalized --es destination"""
    url: str
    index: str = DEFAULT_ES_INDEX


@dataclass(frozen=True)
class Defaults:
    """Baseline values, built fresh for every resolution"""
    hosts: Tuple[str, ...] = ("redis://127.0.0.1:6379",)
    interval: float = 2.0
    count: Optional[float] = None
    style: str = "unicode"
    csv_file: Optional[str] = None
    csv_output: bool = False
    server_port: Optional[int] = None

    def to_configuration(self) -> "Configuration":
        """Seed a configuration; hosts stay empty until specifiers are parsed"""
        return Configuration(
            interval=self.interval,
            count=self.count,
            style=self.style,
            csv_file=self.csv_file,
            csv_output=self.csv_output,
            server_port=self.server_port,
        )


@dataclass(frozen=True)
class Configuration:
    """Fully resolved command line"""
    hosts: Tuple[HostDescriptor, ...] = ()
    interval: float = 2.0
    count: Optional[float] = None
    style: str = "unicode"
    mono: bool = False
    auth: Optional[str] = field(default=None, repr=False)
    key_file: Optional[str] = None
    cert_file: Optional[str] = None
    ca_file: Optional[str] = None
    csv_file: Optional[str] = None
    csv_output: bool = False
    es: Optional[ElasticsearchTarget] = None
    server_port: Optional[int] = None
    daemon: bool = False
    verbose: bool = False
