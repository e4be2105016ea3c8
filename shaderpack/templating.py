"""
Jinja2 templating for the generated sources module.

Templates use ``{$ ... $}`` for blocks and ``{{ ... }}`` for expressions, and
lines starting with ``$$`` are statements::

    $$ for entry in shaders
    shader_{{ entry.name }}_source = {{ entry.source | pystr }}
    $$ endfor

Shader sources are only ever passed in as values, never parsed as templates,
so they may contain any of these delimiters.
"""

import jinja2

from .errors import RenderError


def python_literal(text):
    """Get a Python string literal that evaluates to exactly ``text``.

    Multi-line text becomes a triple-quoted literal, so the embedded shader
    code stays readable in the generated module.
    """
    text = str(text)
    if "\n" not in text:
        return repr(text)

    # A quote right before the closing quotes would end the literal early
    tail = ""
    if text.endswith('"'):
        text, tail = text[:-1], '\\"'

    escaped = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    escaped = "".join(_escape_char(c) for c in escaped)
    return '"""\\\n' + escaped + tail + '"""'


def _escape_char(c):
    # A bare CR in Python source becomes a newline, and NUL is not allowed
    if c in "\n\t" or c.isprintable():
        return c
    if c == "\r":
        return "\\r"
    o = ord(c)
    if o < 0x100:
        return f"\\x{o:02x}"
    elif o < 0x10000:
        return f"\\u{o:04x}"
    return f"\\U{o:08x}"


jinja_env = jinja2.Environment(
    block_start_string="{$",
    block_end_string="$}",
    variable_start_string="{{",
    variable_end_string="}}",
    line_statement_prefix="$$",
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
    loader=jinja2.PackageLoader("shaderpack.templates", "."),
)
jinja_env.filters["pystr"] = python_literal


def render_template(name, **kwargs):
    """Render one of the templates in ``shaderpack/templates``."""
    try:
        template = jinja_env.get_template(name)
        return template.render(**kwargs)
    except jinja2.TemplateError as err:
        raise RenderError(f"Cannot render template {name!r}: {err}") from err


def render_string(code, **kwargs):
    """Render template code given as a string."""
    try:
        return jinja_env.from_string(code).render(**kwargs)
    except jinja2.TemplateError as err:
        raise RenderError(f"Cannot render template: {err}") from err
