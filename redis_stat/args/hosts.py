"""
Host specifier parsing module for redis-stat

Converts positional host tokens into HostDescriptor values. Two grammars are
accepted and told apart by prefix:

  redis://[user[:password]@]host[:port]    URI form (also rediss:// for TLS)
  host[:port][/password]                   shorthand form, always plain redis

URI passwords are percent-decoded, shorthand passwords are taken literally.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union
from urllib.parse import urlsplit

from requests.utils import get_auth_from_url

from ..errors import HostParseError
from .models import PLAIN_SCHEME, HostDescriptor

# host[:port] inside a URI authority; IPv6 literals keep their brackets
AUTHORITY_PATTERN = re.compile(r"^(?P<host>\[[0-9A-Fa-f:.]+\]|[^:\[\]]*)(?::(?P<port>[^:]*))?$")
PORT_PATTERN = re.compile(r"^[0-9]+$")


def _parse_port(port: Optional[str], token: str) -> Optional[int]:
    if not port:
        return None
    if not PORT_PATTERN.match(port):
        raise HostParseError(f"Invalid port '{port}' in host specifier: {token}", token)
    return int(port)


@dataclass(frozen=True)
class UriForm:
    """Host specifier written as a redis:// or rediss:// URI"""
    token: str

    def to_descriptor(self) -> HostDescriptor:
        token = self.token
        if any(char.isspace() for char in token):
            raise HostParseError(f"Invalid redis URI: {token}", token)

        try:
            parts = urlsplit(token)
        except ValueError as e:
            raise HostParseError(f"Invalid redis URI: {token} ({e})", token) from e

        if not parts.scheme or not token[len(parts.scheme):].startswith("://"):
            raise HostParseError(f"Invalid redis URI: {token}", token)

        match = AUTHORITY_PATTERN.match(parts.netloc.rpartition("@")[2])
        if not match or not match.group("host"):
            raise HostParseError(f"Host missing in redis URI: {token}", token)

        password = None
        if parts.password is not None:
            password = get_auth_from_url(token)[1]

        return HostDescriptor(
            scheme=parts.scheme,
            host=match.group("host"),
            port=_parse_port(match.group("port"), token),
            password=password,
        )


@dataclass(frozen=True)
class ShorthandForm:
    """Host specifier written as host[:port][/password]"""
    token: str

    def to_descriptor(self) -> HostDescriptor:
        token = self.token
        segments = token.split("/")
        password = segments[1] if len(segments) > 1 and segments[1] else None

        address = segments[0].split(":")
        host = address[0]
        if not host:
            raise HostParseError(f"Host missing in host specifier: {token}", token)

        port = address[1] if len(address) > 1 else None
        return HostDescriptor(
            scheme=PLAIN_SCHEME,
            host=host,
            port=_parse_port(port, token),
            password=password,
        )


HostForm = Union[UriForm, ShorthandForm]


class HostAddressParser:
    """Parses host specifiers into HostDescriptor values"""

    @staticmethod
    def classify(token: str) -> HostForm:
        """Pick the grammar for a token: URI when it starts with the plain scheme name"""
        if token.startswith(PLAIN_SCHEME):
            return UriForm(token)
        return ShorthandForm(token)

    @classmethod
    def parse(cls, token: str) -> HostDescriptor:
        """
        Parse a single host specifier

        Args:
            token: Positional command-line token

        Returns:
            HostDescriptor for the token

        Raises:
            HostParseError: If the token is malformed
        """
        descriptor = cls.classify(token).to_descriptor()
        logging.debug(f"Host specifier '{token}' resolved to {descriptor}")
        return descriptor

    @classmethod
    def parse_all(cls, tokens: Iterable[str]) -> Tuple[HostDescriptor, ...]:
        """Parse host specifiers, keeping their order"""
        return tuple(cls.parse(token) for token in tokens)
