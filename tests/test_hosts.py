"""Tests for host specifier parsing."""

import pytest

from redis_stat.args.hosts import HostAddressParser, ShorthandForm, UriForm
from redis_stat.args.models import HostDescriptor
from redis_stat.errors import HostParseError


class TestClassify:
    def test_redis_prefix_is_uri(self):
        assert isinstance(HostAddressParser.classify("redis://h:1"), UriForm)

    def test_tls_prefix_is_uri(self):
        assert isinstance(HostAddressParser.classify("rediss://h:1"), UriForm)

    def test_plain_host_is_shorthand(self):
        assert isinstance(HostAddressParser.classify("localhost:6379"), ShorthandForm)

    def test_prefix_only_checks_start(self):
        assert isinstance(HostAddressParser.classify("myredis:6379"), ShorthandForm)


class TestShorthand:
    def test_host_port_password(self):
        host = HostAddressParser.parse("cache.local:6380/secret")
        assert host == HostDescriptor("redis", "cache.local", 6380, "secret")

    def test_password_is_not_decoded(self):
        host = HostAddressParser.parse("h:1/p%40ss")
        assert host.password == "p%40ss"

    def test_host_only(self):
        host = HostAddressParser.parse("localhost")
        assert host == HostDescriptor("redis", "localhost", None, None)

    def test_host_and_password_without_port(self):
        host = HostAddressParser.parse("localhost/secret")
        assert host.port is None
        assert host.password == "secret"

    def test_trailing_slash_means_no_password(self):
        assert HostAddressParser.parse("localhost:6379/").password is None

    def test_empty_port_is_absent(self):
        assert HostAddressParser.parse("localhost:").port is None

    def test_out_of_range_port_is_kept_for_validation(self):
        assert HostAddressParser.parse("h:70000").port == 70000

    def test_non_numeric_port(self):
        with pytest.raises(HostParseError) as exc_info:
            HostAddressParser.parse("h:abc")
        assert exc_info.value.token == "h:abc"

    def test_missing_host(self):
        with pytest.raises(HostParseError):
            HostAddressParser.parse(":6379")


class TestUri:
    def test_percent_decoded_password(self):
        host = HostAddressParser.parse("redis://user:p%40ss@h:1234")
        assert host == HostDescriptor("redis", "h", 1234, "p@ss")

    def test_tls_scheme(self):
        host = HostAddressParser.parse("rediss://cache.example.com:6380")
        assert host.scheme == "rediss"
        assert host.host == "cache.example.com"
        assert host.port == 6380

    def test_port_absent(self):
        host = HostAddressParser.parse("redis://localhost")
        assert host.port is None
        assert host.password is None

    def test_password_without_user(self):
        assert HostAddressParser.parse("redis://:secret@h:6379").password == "secret"

    def test_user_without_password(self):
        assert HostAddressParser.parse("redis://admin@h:6379").password is None

    def test_plus_is_not_a_space(self):
        assert HostAddressParser.parse("redis://:a+b@h").password == "a+b"

    def test_path_is_ignored(self):
        host = HostAddressParser.parse("redis://h:6379/0")
        assert (host.host, host.port) == ("h", 6379)

    def test_ipv6_literal(self):
        host = HostAddressParser.parse("redis://[::1]:6379")
        assert host.host == "[::1]"
        assert host.port == 6379

    @pytest.mark.parametrize("token", [
        "redis",
        "redis:localhost",
        "redis://",
        "redis://:6379",
        "redis://h:port",
        "redis://h o:6379",
        "redis://[::1:6379",
        "redisserver:6379",
    ])
    def test_malformed(self, token):
        with pytest.raises(HostParseError) as exc_info:
            HostAddressParser.parse(token)
        assert exc_info.value.token == token
        assert token in str(exc_info.value)


class TestFormatting:
    def test_str_includes_port(self):
        assert str(HostDescriptor("redis", "h", 6379, "secret")) == "redis://h:6379"

    def test_str_without_port(self):
        assert str(HostDescriptor("rediss", "h")) == "rediss://h"

    def test_repr_hides_password(self):
        assert "secret" not in repr(HostDescriptor("redis", "h", 6379, "secret"))

    @pytest.mark.parametrize("descriptor", [
        HostDescriptor("redis", "127.0.0.1", 6379),
        HostDescriptor("rediss", "cache.example.com", 6380),
        HostDescriptor("redis", "localhost"),
        HostDescriptor("redis", "[::1]", 7000),
    ])
    def test_formatted_descriptor_parses_back(self, descriptor):
        assert HostAddressParser.parse(str(descriptor)) == descriptor


class TestParseAll:
    def test_keeps_order(self):
        hosts = HostAddressParser.parse_all(["b:2", "redis://a:1"])
        assert [h.host for h in hosts] == ["b", "a"]

    def test_first_bad_token_aborts(self):
        with pytest.raises(HostParseError):
            HostAddressParser.parse_all(["ok:1", "bad:port"])
