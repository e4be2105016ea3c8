"""The shaderpack CLI.

Invoke using e.g. ``python -m shaderpack --in shaders --out mylib/shaders.py``.
"""

import sys
import logging
import argparse

import shaderpack
from shaderpack import BundleConfig, ShaderPackError, bundle_directory, logger
from shaderpack.config import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT,
    DEFAULT_PACKAGE,
    is_package_name,
)


def package_name(value):
    if not is_package_name(value):
        raise argparse.ArgumentTypeError(f"invalid package name: {value!r}")
    return value


def make_parser():
    parser = argparse.ArgumentParser(
        prog="shaderpack",
        description="Bundle GLSL shader sources into a generated Python module.",
    )
    parser.add_argument(
        "--version", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "--in",
        dest="input_dir",
        default=DEFAULT_INPUT_DIR,
        metavar="DIR",
        help="Input directory (default: %(default)s)",
    )
    parser.add_argument(
        "--out",
        dest="output",
        default=DEFAULT_OUTPUT,
        metavar="FILE",
        help="Python output file (default: %(default)s)",
    )
    parser.add_argument(
        "--pkg",
        dest="package",
        default=DEFAULT_PACKAGE,
        type=package_name,
        metavar="NAME",
        help="Package name stamped into the output (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show files being processed",
    )
    return parser


def main(argv=None):
    """Run the CLI. Returns the exit code."""
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.version:
        print("shaderpack v" + shaderpack.__version__)
        return 0

    config = BundleConfig(args.input_dir, args.output, args.package, args.verbose)

    # Messages go to stdout while we run
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    level = logger.level
    if config.verbose and logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)

    try:
        bundle_directory(config)
    except ShaderPackError as err:
        print(f"shaderpack: error: {err}", file=sys.stderr)
        return 1
    finally:
        logger.removeHandler(handler)
        logger.setLevel(level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
