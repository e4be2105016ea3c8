"""
Shader stages and the filename convention that maps stage files to programs.

A stage file is named ``<program>_<stage>.glsl``, e.g. ``basic_vertex.glsl``
belongs to the ``basic`` program. The program name may itself contain
underscores; only the last part is the stage.
"""

import enum

from .errors import NamingError


STAGE_DELIMITER = "_"


class Stage(enum.Enum):
    """The shader pipeline stages a program can have."""

    vertex = "vertex"
    fragment = "fragment"
    geometry = "geometry"

    @classmethod
    def from_suffix(cls, suffix):
        """Get the stage for a filename suffix, or None if it is not a stage.

        The match is case-exact: ``Vertex`` is not a stage.
        """
        try:
            return cls(suffix)
        except ValueError:
            return None


def split_stage_name(identifier):
    """Split a shader identifier into ``(program_name, stage)``.

    Raises NamingError if the identifier has no ``_<stage>`` suffix, or if
    the suffix is not a known stage.
    """
    parts = identifier.split(STAGE_DELIMITER)
    if len(parts) < 2:
        raise NamingError(f"invalid name {identifier!r}")
    stage = Stage.from_suffix(parts[-1])
    if stage is None:
        raise NamingError(f"invalid shader type {parts[-1]!r} in {identifier!r}")
    return STAGE_DELIMITER.join(parts[:-1]), stage
