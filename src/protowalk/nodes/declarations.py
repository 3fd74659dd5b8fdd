"""Leaf declaration nodes for the protowalk AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from protowalk.nodes.base import Visitee


@dataclass(frozen=True, slots=True)
class Syntax(Visitee):
    """Syntax statement: syntax = "proto3";"""

    kind = "syntax"

    value: str


@dataclass(frozen=True, slots=True)
class Edition(Visitee):
    """Edition statement: edition = "2023";"""

    kind = "edition"

    value: str


@dataclass(frozen=True, slots=True)
class Package(Visitee):
    """Package statement: package foo.bar;"""

    kind = "package"

    name: str


@dataclass(frozen=True, slots=True)
class Import(Visitee):
    """Import statement: import [weak|public] "other.proto";"""

    kind = "import"

    filename: str
    # "", "weak" or "public"
    import_kind: str = ""


@dataclass(frozen=True, slots=True)
class Option(Visitee):
    """Option statement: option java_package = "com.example";

    ``constant`` holds the literal source text of the value. Embedded
    options appear inside brackets on fields and enum values.
    """

    kind = "option"

    name: str
    constant: str = ""
    is_embedded: bool = False


@dataclass(frozen=True, slots=True)
class Reserved(Visitee):
    """Reserved field numbers or names: reserved 2, 15, 9 to 11, "foo";"""

    kind = "reserved"

    ranges: Sequence[tuple[int, int]] = ()
    field_names: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class Extensions(Visitee):
    """Extension ranges: extensions 100 to 199;"""

    kind = "extensions"

    ranges: Sequence[tuple[int, int]] = ()


@dataclass(frozen=True, slots=True)
class Comment(Visitee):
    """Standalone comment block."""

    kind = "comment"

    lines: Sequence[str] = ()
    cstyle: bool = False
    extra_slash: bool = False

    @property
    def message(self) -> str:
        return "\n".join(self.lines)
