"""
Walk a source tree and classify the shader files in it.

Files with the ``.glsl`` extension are either include fragments (anywhere
below a directory named ``include``) or stage shaders, named
``<program>_<stage>.glsl``. All other files are ignored.
"""

import os
import logging

from .bundle import Bundle, FileEntry
from .errors import NamingError, ReadError
from .stages import split_stage_name


logger = logging.getLogger("shaderpack")

SHADER_EXT = ".glsl"
INCLUDE_DIR = "include"


def walk(root, bundle=None, *, include=False):
    """Collect the shader files below ``root`` into a bundle.

    Directories are visited recursively, entries in order of name; symlinks
    to directories are not followed. Once a directory named ``include`` is
    entered, all files below it are includes.
    Returns the bundle, a new one if none was given.

    Raises ReadError if a directory cannot be listed or a file cannot be read.
    """
    if bundle is None:
        bundle = Bundle()

    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as err:
        raise ReadError(f"Cannot list directory {os.fspath(root)!r}: {err}") from err

    for entry in entries:
        # Symlinked directories are not entered, so links cannot form a cycle
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as err:
            raise ReadError(f"Cannot stat {entry.path!r}: {err}") from err
        if is_dir:
            walk(entry.path, bundle, include=include or entry.name == INCLUDE_DIR)
        else:
            classify_file(entry.path, include, bundle)

    return bundle


def classify_file(path, include, bundle):
    """Add a single file to the bundle, if it is a valid shader or include.

    Returns the FileEntry that was added, or None if the file was skipped.
    """
    filename = os.path.basename(path)
    if not filename.endswith(SHADER_EXT):
        logger.info(f"Ignored file (not shader): {path}")
        return None
    base = filename[: -len(SHADER_EXT)]

    program_name = stage = None
    if not include:
        try:
            program_name, stage = split_stage_name(base)
        except NamingError as err:
            logger.warning(f"Ignored file ({err}): {path}")
            return None

    source = read_source(path)
    entry = FileEntry(base, source, include)
    bundle.add(entry)
    if stage is not None:
        bundle.assign_stage(program_name, stage, base)

    logger.info(f"{path} ({len(source.encode())} bytes)")
    return entry


def read_source(path):
    """Read the full text of a source file, without newline translation."""
    try:
        with open(path, "rb") as f:
            data = f.read()
        return data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ReadError(f"Cannot read {os.fspath(path)!r}: {err}") from err


def collect(root):
    """Walk ``root`` and return the resulting bundle, logging a summary."""
    bundle = walk(root)
    logger.info(f"Collected {bundle.summary()} from {os.fspath(root)}")
    return bundle
