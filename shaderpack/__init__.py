"""
Bundle GLSL shader sources into a generated Python module.

shaderpack walks a directory of ``.glsl`` files, groups the
``<program>_<stage>.glsl`` files into programs, treats everything below an
``include`` directory as include fragments, and writes a module with the
sources as string constants plus ``include_map``, ``shader_map`` and
``program_map`` lookup tables.
"""

# ruff: noqa: F401

from ._version import __version__, version_info
from .config import BundleConfig, set_log_level, logger
from .errors import (
    ShaderPackError,
    ReadError,
    NamingError,
    RenderError,
    FormatError,
    WriteError,
)
from .stages import Stage, split_stage_name
from .bundle import Bundle, FileEntry, ProgramInfo
from .walker import walk, collect, classify_file, SHADER_EXT, INCLUDE_DIR
from .emitter import (
    generate,
    bundle_directory,
    render_sources,
    format_source,
    check_names,
)


set_log_level()
