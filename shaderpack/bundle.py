"""
The aggregation value that the walker fills and the emitter consumes.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple


logger = logging.getLogger("shaderpack")


@dataclass(frozen=True)
class FileEntry:
    """An include fragment or a stage shader, with its source text."""

    name: str
    source: str
    is_include: bool = False


class ProgramInfo(NamedTuple):
    """The shader names for each stage of a program. Absent stages are ``""``."""

    vertex: str = ""
    fragment: str = ""
    geometry: str = ""


@dataclass
class Bundle:
    """All includes, shaders and programs found in a source tree.

    Includes and shaders are kept in the order they were added. Adding an
    entry with a name that is already present replaces the earlier one.
    """

    includes: list = field(default_factory=list)
    shaders: list = field(default_factory=list)
    programs: dict = field(default_factory=dict)

    def add_include(self, entry):
        self._add(self.includes, entry, "include")

    def add_shader(self, entry):
        self._add(self.shaders, entry, "shader")

    def add(self, entry):
        """Add an entry to the includes or shaders, based on ``entry.is_include``."""
        if entry.is_include:
            self.add_include(entry)
        else:
            self.add_shader(entry)

    def _add(self, entries, entry, kind):
        for i, existing in enumerate(entries):
            if existing.name == entry.name:
                logger.warning(
                    f"Duplicate {kind} {entry.name!r}: the last one found replaces the earlier one."
                )
                entries[i] = entry
                return
        entries.append(entry)

    def assign_stage(self, program_name, stage, shader_name):
        """Set the shader for one stage of a program, creating the program if needed."""
        info = self.programs.get(program_name, ProgramInfo())
        current = getattr(info, stage.value)
        if current and current != shader_name:
            logger.warning(
                f"Program {program_name!r} has more than one {stage.value} shader: "
                f"{shader_name!r} replaces {current!r}."
            )
        self.programs[program_name] = info._replace(**{stage.value: shader_name})

    def sorted_programs(self):
        """Get a list of (name, ProgramInfo) tuples, sorted by program name."""
        return sorted(self.programs.items())

    def is_empty(self):
        return not (self.includes or self.shaders)

    def summary(self):
        return (
            f"{len(self.includes)} includes, {len(self.shaders)} shaders, "
            f"{len(self.programs)} programs"
        )
