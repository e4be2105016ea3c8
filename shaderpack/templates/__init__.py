"""
Jinja2 templates for the modules that shaderpack generates. They are loaded
via ``shaderpack.templating.render_template()``.
"""
