"""Immutable leader-key tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Union

SPACE_TOKEN = "space"
LEADER_MARKER = "SPC"


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Leaf node binding a key to a registered command."""

    title: str
    command_id: str

    def __post_init__(self) -> None:
        if not self.command_id:
            raise ValueError("KeyBinding command_id cannot be empty")

    @property
    def kind(self) -> Literal["binding"]:
        return "binding"


@dataclass(frozen=True, slots=True)
class KeyGroup:
    """Inner node; children keep their registration order."""

    title: str
    children: Mapping[str, "KeyNode"]

    def __post_init__(self) -> None:
        for token in self.children:
            if not token:
                raise ValueError(f"Group '{self.title}' has an empty key token")
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @property
    def kind(self) -> Literal["group"]:
        return "group"


KeyNode = Union[KeyGroup, KeyBinding]


@dataclass(frozen=True, slots=True)
class KeyHint:
    key: str
    title: str
    kind: Literal["group", "binding"]


def group(title: str, children: Mapping[str, KeyNode]) -> KeyGroup:
    return KeyGroup(title=title, children=children)


def bind(title: str, command_id: str) -> KeyBinding:
    return KeyBinding(title=title, command_id=command_id)


def display_token(token: str) -> str:
    return LEADER_MARKER if token in {SPACE_TOKEN, " "} else token


def iter_bindings(node: KeyNode):
    """Yield every ``KeyBinding`` reachable from ``node`` (depth first)."""

    if isinstance(node, KeyBinding):
        yield node
        return
    for child in node.children.values():
        yield from iter_bindings(child)


__all__ = [
    "KeyBinding",
    "KeyGroup",
    "KeyHint",
    "KeyNode",
    "LEADER_MARKER",
    "SPACE_TOKEN",
    "bind",
    "display_token",
    "group",
    "iter_bindings",
]
