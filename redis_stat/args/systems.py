"""
Runtime detection for redis-stat

Reports what the running interpreter can do that option resolution depends
on. Daemonization needs os.fork, which is missing on Windows and on some
alternative interpreters.
"""

import logging
import os
import platform
from typing import Dict


class RuntimeDetector:
    """Detects runtime capabilities"""

    def supports_daemon(self) -> bool:
        """
        Check whether the process can daemonize

        Returns:
            bool: True if os.fork is available
        """
        supported = hasattr(os, "fork")
        if not supported:
            logging.debug(f"os.fork unavailable on {self.get_runtime_info()}")
        return supported

    def get_runtime_info(self) -> Dict[str, str]:
        """Describe the interpreter and platform"""
        return {
            "implementation": platform.python_implementation(),
            "version": platform.python_version(),
            "system": platform.system(),
        }
