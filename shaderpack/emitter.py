"""
Turn a bundle into the generated sources module and write it to disk.

The pipeline is render -> format -> write. The output file is only
touched at the very end, so a failing render or format step leaves any
earlier output as it was.
"""

import os
import logging
import unicodedata

import black

from .errors import FormatError, WriteError
from .templating import render_template
from .walker import collect


logger = logging.getLogger("shaderpack")

SOURCES_TEMPLATE = "sources.py.j2"


def check_names(bundle):
    """Check that every entry name can be used in a Python identifier.

    Raises FormatError for names like ``my-shader`` or ``a.b``, which would
    produce broken (or, worse, syntactically valid but wrong) code. Also
    raises for two names that Python normalizes (NFKC) to the same
    identifier, e.g. ``ﬁ`` and ``fi``.
    """
    seen = {}
    for kind, entries in (("include", bundle.includes), ("shader", bundle.shaders)):
        for entry in entries:
            identifier = f"{kind}_{entry.name}_source"
            if not identifier.isidentifier():
                raise FormatError(
                    f"The {kind} name {entry.name!r} cannot be used as a Python identifier"
                )
            normalized = unicodedata.normalize("NFKC", identifier)
            other = seen.setdefault(normalized, entry.name)
            if other != entry.name:
                raise FormatError(
                    f"The {kind} names {other!r} and {entry.name!r} map to the same "
                    f"Python identifier {normalized!r}"
                )


def render_sources(bundle, package):
    """Render the sources module for a bundle, unformatted."""
    check_names(bundle)
    return render_template(
        SOURCES_TEMPLATE,
        package=package,
        includes=bundle.includes,
        shaders=bundle.shaders,
        programs=bundle.sorted_programs(),
    )


def format_source(code, filename="<generated>"):
    """Format generated code with black and check that it compiles.

    Raises FormatError if the code is not valid Python, e.g. when a shader
    name is not usable as part of an identifier.
    """
    try:
        code = black.format_str(code, mode=black.Mode())
    except black.InvalidInput as err:
        raise FormatError(f"Generated code for {filename} is invalid: {err}") from err
    try:
        compile(code, filename, "exec")
    except SyntaxError as err:
        raise FormatError(f"Generated code for {filename} is invalid: {err}") from err
    return code


def write_output(code, path):
    """Write the code to path, replacing the file if it exists."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(code)
    except OSError as err:
        raise WriteError(f"Cannot write {os.fspath(path)!r}: {err}") from err


def generate(bundle, path, package="shaders"):
    """Render, format and write the sources module for a bundle."""
    code = render_sources(bundle, package)
    code = format_source(code, os.fspath(path))
    write_output(code, path)
    logger.info(f"Wrote {bundle.summary()} to {os.fspath(path)}")
    return code


def bundle_directory(config):
    """Run the whole pipeline for a BundleConfig: collect, then generate."""
    config.validate()
    bundle = collect(config.input_dir)
    if bundle.is_empty():
        logger.warning(f"No shader sources found in {config.input_dir}")
    return generate(bundle, config.output, config.package)
