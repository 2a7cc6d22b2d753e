"""
Main argument parser module for redis-stat

Orchestrates option parsing, positional classification, host parsing and
validation, and turns any failure into a message plus usage text.
"""

import argparse
import logging
import re
import sys
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from ..errors import ConfigurationError, FlagError
from .hosts import HostAddressParser
from .models import DEFAULT_SERVER_PORT, Configuration, Defaults
from .positional import PositionalClassifier, Positionals
from .sink import parse_sink_url
from .systems import RuntimeDetector
from .validator import ConfigValidator

USAGE = "redis-stat [ [ <redis(s)://...> | HOST[:PORT[/PASSWORD]]] ...] [INTERVAL [COUNT]]"

# Options whose value may only be attached with '='
OPTIONAL_VALUE_FLAGS = ("--csv", "--server")
SERVER_PORT_PATTERN = re.compile(r"^[0-9]+\Z")


class _OptionParser(argparse.ArgumentParser):
    """argparse parser that raises instead of exiting with status 2"""

    def error(self, message):
        raise FlagError(message)


class _VersionAction(argparse.Action):
    """Print the version and exit as soon as the flag is reached"""

    def __init__(self, option_strings, dest, help=None):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .. import __version__
        print(__version__)
        sys.exit(0)


class _HelpAction(argparse.Action):
    """Print usage and exit as soon as the flag is reached"""

    def __init__(self, option_strings, dest, help=None):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        sys.exit(0)


class ArgumentParser:
    """Command line argument parser for redis-stat"""

    def __init__(self, runtime: Optional[RuntimeDetector] = None):
        self.parser = self._create_parser()
        self.runtime = runtime or RuntimeDetector()

    def _create_parser(self):
        """Create the argument parser with all options"""
        parser = _OptionParser(
            prog="redis-stat",
            usage=USAGE,
            add_help=False,
            allow_abbrev=False,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog_text(),
        )

        parser.add_argument(
            "-a", "--auth", metavar="PASSWORD",
            help="Password"
        )

        tls_group = parser.add_argument_group("TLS")
        tls_group.add_argument(
            "-k", "--key-file", metavar="PATH",
            help="Path to PEM encoded key file"
        )

        tls_group.add_argument(
            "-c", "--cert-file", metavar="PATH",
            help="Path to PEM encoded cert file"
        )

        tls_group.add_argument(
            "--ca-file", metavar="PATH",
            help="Path to PEM encoded cert bundle file"
        )

        output_group = parser.add_argument_group("Output")
        output_group.add_argument(
            "-v", "--verbose", action="store_true",
            help="Show more info"
        )

        output_group.add_argument(
            "--style", type=str.lower, metavar="STYLE",
            help="Output style: unicode|ascii"
        )

        output_group.add_argument(
            "--no-color", dest="mono", action="store_true",
            help="Suppress ANSI color codes"
        )

        output_group.add_argument(
            "--csv", nargs="?", metavar="CSV_FILE",
            help="Print or save the result in CSV (use --csv=FILE to save)"
        )

        output_group.add_argument(
            "--es", metavar="ELASTICSEARCH_URL",
            help="Send results to ElasticSearch: [http://]HOST[:PORT][/INDEX]"
        )

        server_group = parser.add_argument_group("Web server")
        server_group.add_argument(
            "--server", nargs="?", metavar="PORT",
            help=f"Launch redis-stat web server (default port: {DEFAULT_SERVER_PORT})"
        )

        server_group.add_argument(
            "--daemon", action="store_true",
            help="Daemonize redis-stat. Must be used with --server option."
        )

        info_group = parser.add_argument_group("Information")
        info_group.add_argument(
            "--version", action=_VersionAction,
            help="Show version"
        )

        info_group.add_argument(
            "--help", action=_HelpAction,
            help="Show this message"
        )

        return parser

    def _get_epilog_text(self):
        """Get the epilog help text"""
        return """
Examples:
  redis-stat                                       # 127.0.0.1:6379 every 2 seconds
  redis-stat 1 10                                  # Every second, 10 samples
  redis-stat localhost:6380 1 10
  redis-stat localhost:6379 localhost:6380 localhost:6381 5
  redis-stat localhost:6379/secret 5               # Shorthand password, taken as is
  redis-stat rediss://:p%40ss@cache.example.com:6380 --ca-file=ca.pem
  redis-stat localhost:6379 --csv=/tmp/output.csv
  redis-stat --es=localhost:9200/redis-stat
  redis-stat --server=8080 --daemon

Option values:
  A value starting with '-' must be attached: --auth=-secret, not -a -secret.

Positional arguments:
  Numbers are taken as INTERVAL (seconds) then COUNT (samples); any further
  number is ignored. Everything else is a Redis host. Hosts given on the
  command line replace the default redis://127.0.0.1:6379.
        """

    def parse_args(self, args: Optional[Sequence[str]] = None) -> Configuration:
        """Parse command line arguments, exiting with status 1 on any error"""
        argv = list(sys.argv[1:] if args is None else args)
        try:
            return self.resolve(argv)
        except ConfigurationError as e:
            print(e)
            self.parser.print_help()
            sys.exit(1)

    def resolve(self, argv: Sequence[str], defaults: Optional[Defaults] = None) -> Configuration:
        """
        Resolve arguments into a validated Configuration

        Args:
            argv: Command-line arguments without the program name
            defaults: Baseline values (fresh Defaults() when omitted)

        Returns:
            Validated Configuration

        Raises:
            ConfigurationError: On the first flag, host or validation failure
        """
        if defaults is None:
            defaults = Defaults()

        config, remaining = self.resolve_flags(argv, defaults)
        positionals = PositionalClassifier.classify(remaining)
        config = self._apply_positionals(config, positionals, defaults)
        logging.debug(
            f"Resolved {len(config.hosts)} host(s), interval={config.interval}, count={config.count}"
        )

        return ConfigValidator.validate(config).unwrap()

    def resolve_flags(self, argv: Sequence[str], defaults: Defaults) -> Tuple[Configuration, List[str]]:
        """
        Consume recognized options

        Returns:
            Tuple of (configuration seeded from defaults and flags, positional tokens)
        """
        option_args, trailing = self._prepare_argv(argv)
        namespace, remaining = self.parser.parse_known_args(option_args)

        for token in remaining:
            if len(token) > 1 and token.startswith("-"):
                raise FlagError(f"invalid option: {token}")

        if namespace.daemon and not self.runtime.supports_daemon():
            raise FlagError("Sorry. Daemonization is not supported on this platform.")

        config = defaults.to_configuration()
        config = replace(
            config,
            auth=namespace.auth,
            key_file=namespace.key_file,
            cert_file=namespace.cert_file,
            ca_file=namespace.ca_file,
            verbose=namespace.verbose,
            mono=namespace.mono,
            daemon=namespace.daemon,
        )

        if namespace.style is not None:
            config = replace(config, style=namespace.style)

        if namespace.csv is not None:
            if namespace.csv:
                config = replace(config, csv_file=namespace.csv)
            else:
                config = replace(config, csv_output=True)

        if namespace.es is not None:
            config = replace(config, es=parse_sink_url(namespace.es))

        if namespace.server is not None:
            config = replace(config, server_port=self._parse_server_port(namespace.server))

        return config, remaining + trailing

    def _prepare_argv(self, argv: Sequence[str]) -> Tuple[List[str], List[str]]:
        """
        Drop bare -h, attach '=' to optional-value flags and split off
        everything after '--'

        Returns:
            Tuple of (arguments for option parsing, literal positional tokens)
        """
        option_args: List[str] = []
        trailing: List[str] = []
        argv = list(argv)

        if "--" in argv:
            split_at = argv.index("--")
            argv, trailing = argv[:split_at], argv[split_at + 1:]

        for token in argv:
            if token == "-h":
                continue
            if token in OPTIONAL_VALUE_FLAGS:
                token += "="
            option_args.append(token)

        return option_args, trailing

    @staticmethod
    def _parse_server_port(value: str) -> int:
        if not value:
            return DEFAULT_SERVER_PORT
        if not SERVER_PORT_PATTERN.match(value):
            raise FlagError(f"Invalid server port: {value}")
        return int(value)

    @staticmethod
    def _apply_positionals(config: Configuration, positionals: Positionals, defaults: Defaults) -> Configuration:
        """Merge interval, count and hosts from positional tokens"""
        if positionals.interval is not None:
            config = replace(config, interval=positionals.interval)

        if positionals.count is not None:
            config = replace(config, count=positionals.count)

        host_tokens = positionals.hosts or defaults.hosts
        return replace(config, hosts=HostAddressParser.parse_all(host_tokens))
