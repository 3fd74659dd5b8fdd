"""Pytest configuration and fixtures for protowalk tests."""

from __future__ import annotations

from typing import Any

import pytest

from protowalk import (
    RPC,
    Comment,
    Enum,
    EnumField,
    Import,
    MapField,
    Message,
    NormalField,
    Oneof,
    OneOfField,
    Option,
    Package,
    Proto,
    Reserved,
    Service,
    Syntax,
    Visitee,
)


@pytest.fixture
def person_proto() -> Proto:
    """A small but complete schema touching every common variant.

    Pre-order delivery order is given by the person_proto_order fixture.
    """
    return Proto(
        filename="person.proto",
        elements=(
            Syntax("proto3"),
            Package("example.people"),
            Import("google/protobuf/timestamp.proto"),
            Option("go_package", '"example.com/people"'),
            Message(
                "Person",
                elements=(
                    Option("deprecated", "false"),
                    NormalField("name", "string", 1),
                    MapField("labels", "string", "string", 2),
                    Oneof(
                        "contact",
                        elements=(
                            OneOfField("email", "string", 3),
                            OneOfField("phone", "string", 4),
                        ),
                    ),
                    Enum(
                        "Kind",
                        elements=(
                            EnumField("KIND_UNSPECIFIED", 0),
                            EnumField(
                                "KIND_ADMIN",
                                1,
                                elements=(Option("deprecated", "true", is_embedded=True),),
                            ),
                        ),
                    ),
                    Message("Empty"),
                    Reserved(ranges=((9, 11),), field_names=("legacy",)),
                ),
            ),
            Message("Person", is_extend=True, elements=(NormalField("nickname", "string", 100),)),
            Service(
                "People",
                elements=(
                    RPC("Get", "GetRequest", "Person", elements=(Option("idempotency_level", "NO_SIDE_EFFECTS"),)),
                    RPC("Watch", "WatchRequest", "Person", streams_returns=True),
                ),
            ),
            Comment(lines=(" trailing",)),
        ),
    )


_PERSON_PROTO_ORDER = [
    ("syntax", "proto3"),
    ("package", "example.people"),
    ("import", "google/protobuf/timestamp.proto"),
    ("option", "go_package"),
    ("message", "Person"),
    ("option", "deprecated"),
    ("normal_field", "name"),
    ("map_field", "labels"),
    ("oneof", "contact"),
    ("oneof_field", "email"),
    ("oneof_field", "phone"),
    ("enum", "Kind"),
    ("enum_field", "KIND_UNSPECIFIED"),
    ("enum_field", "KIND_ADMIN"),
    ("option", "deprecated"),
    ("message", "Empty"),
    ("reserved", None),
    ("message", "Person"),
    ("normal_field", "nickname"),
    ("service", "People"),
    ("rpc", "Get"),
    ("option", "idempotency_level"),
    ("rpc", "Watch"),
    ("comment", None),
]


def describe(node: Visitee) -> tuple[str, str | None]:
    """(kind, name) pair for order assertions."""
    return node.kind, getattr(node, "name", getattr(node, "value", getattr(node, "filename", None)))


class Recorder:
    """Handler factory that logs (label, node) pairs in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Visitee]] = []

    def handler(self, label: str):
        def record(ctx: Any, node: Visitee) -> None:
            self.calls.append((label, node))

        return record

    def labels(self) -> list[str]:
        return [label for label, _ in self.calls]

    def nodes(self) -> list[Visitee]:
        return [node for _, node in self.calls]

    def described(self) -> list[tuple[str, str | None]]:
        return [describe(node) for _, node in self.calls]


@pytest.fixture
def person_proto_order() -> list[tuple[str, str | None]]:
    return list(_PERSON_PROTO_ORDER)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
