#!/usr/bin/env python3
"""
redis-stat - Redis monitoring tool

Resolves the command line and hands the configuration to the monitor.
"""

import logging
import sys
from typing import Optional, Sequence

from .args import ArgumentParser, Configuration

# Package version
from . import __version__


def setup_logging(verbose: bool = False):
    """Setup console logging, DEBUG when --verbose is given"""
    level = logging.DEBUG if verbose else logging.INFO

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    return console_handler


def log_configuration(config: Configuration):
    """Log what is about to be monitored"""
    hosts = ", ".join(str(host) for host in config.hosts)
    samples = "unlimited" if config.count is None else f"{config.count:g}"
    logging.info(f"redis-stat {__version__}: monitoring {hosts}")
    logging.info(f"Interval: {config.interval:g}s, samples: {samples}, style: {config.style}")

    if config.csv_file:
        logging.info(f"CSV output: {config.csv_file}")
    elif config.csv_output:
        logging.info("CSV output: stdout")

    if config.es:
        logging.info(f"Elasticsearch: {config.es.url} (index: {config.es.index})")

    if config.server_port is not None:
        mode = "daemon" if config.daemon else "foreground"
        logging.info(f"Web server on port {config.server_port} ({mode})")

    if any(host.scheme == "rediss" for host in config.hosts):
        logging.debug(
            f"TLS files - key: {config.key_file}, cert: {config.cert_file}, ca: {config.ca_file}"
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point"""
    # Basic handler so warnings raised while resolving are visible
    setup_logging()

    arg_parser = ArgumentParser()
    config = arg_parser.parse_args(argv)

    setup_logging(config.verbose)
    log_configuration(config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
