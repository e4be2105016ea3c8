"""
Configuration for a shaderpack run, and the log level of the shaderpack logger.
"""

import os
import logging
from dataclasses import dataclass


logger = logging.getLogger("shaderpack")

DEFAULT_INPUT_DIR = "."
DEFAULT_OUTPUT = "sources.py"
DEFAULT_PACKAGE = "shaders"


def set_log_level():
    """Set the logger level from the SHADERPACK_LOG_LEVEL env var (default WARNING)."""
    logger.setLevel(logging.WARN)
    level = os.getenv("SHADERPACK_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except (ValueError, TypeError):
            logger.warning(f"Invalid shaderpack log level: {level}")


def is_package_name(name):
    """Get whether name is a dotted sequence of Python identifiers."""
    return bool(name) and all(part.isidentifier() for part in name.split("."))


@dataclass
class BundleConfig:
    """The options of a shaderpack run."""

    input_dir: str = DEFAULT_INPUT_DIR
    output: str = DEFAULT_OUTPUT
    package: str = DEFAULT_PACKAGE
    verbose: bool = False

    def validate(self):
        if not is_package_name(self.package):
            raise ValueError(f"Invalid package name: {self.package!r}")
