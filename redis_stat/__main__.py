#!/usr/bin/env python3
"""
redis_stat.__main__ - Module entry point
"""

import sys


def main():
    """Main entry point for console scripts"""
    from .main import main as script_main

    return script_main()


if __name__ == "__main__":
    sys.exit(main())
