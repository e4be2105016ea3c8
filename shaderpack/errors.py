"""
The errors raised by shaderpack.

All of them derive from ``ShaderPackError``. A ``NamingError`` is recoverable:
the walker logs it and skips the file. Every other error aborts the run
before the output file is touched.
"""


class ShaderPackError(Exception):
    """Base class for all shaderpack errors."""


class ReadError(ShaderPackError):
    """A directory could not be listed or a source file could not be read."""


class NamingError(ShaderPackError):
    """A filename does not follow the ``<program>_<stage>`` convention."""


class RenderError(ShaderPackError):
    """The output template could not be rendered."""


class FormatError(ShaderPackError):
    """The rendered output is not valid Python."""


class WriteError(ShaderPackError):
    """The output file could not be written."""
