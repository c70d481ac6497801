"""Step-wise leader sequence resolution over a ``KeyGroup`` tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Optional

from .models import (
    LEADER_MARKER,
    KeyBinding,
    KeyGroup,
    KeyHint,
    KeyNode,
    display_token,
    iter_bindings,
)


class LeaderMapError(ValueError):
    """Raised when a leader map binds a key to an unknown command."""

    def __init__(self, binding: KeyBinding) -> None:
        super().__init__(
            f"Leader binding '{binding.title}' references unknown command "
            f"'{binding.command_id}'"
        )
        self.binding = binding


@dataclass(slots=True)
class LeaderState:
    """Keys accepted since the leader key was pressed."""

    node: KeyGroup
    sequence: List[str] = field(default_factory=list)
    active: bool = True

    @classmethod
    def start(cls, root: KeyGroup) -> "LeaderState":
        return cls(node=root)

    def describe(self, *extra: str) -> str:
        tokens = [LEADER_MARKER, *(display_token(t) for t in (*self.sequence, *extra))]
        return " ".join(tokens)


@dataclass(frozen=True, slots=True)
class LeaderStep:
    """Outcome of feeding one key to a ``LeaderState``."""

    status: Literal["group", "match", "miss"]
    binding: Optional[KeyBinding] = None
    sequence: tuple[str, ...] = ()
    label: str = ""


def step_leader(node: KeyGroup, key: str) -> Optional[KeyNode]:
    return node.children.get(key)


def leader_hints(node: KeyGroup) -> tuple[KeyHint, ...]:
    return tuple(
        KeyHint(key=display_token(token), title=child.title, kind=child.kind)
        for token, child in node.children.items()
    )


def advance_leader(state: LeaderState, key: str) -> LeaderStep:
    """Feed ``key`` into ``state``; groups descend, bindings and misses finish."""

    child = step_leader(state.node, key)
    if child is None:
        label = state.describe(key)
        state.active = False
        return LeaderStep(status="miss", sequence=tuple(state.sequence), label=label)

    state.sequence.append(key)
    if isinstance(child, KeyGroup):
        state.node = child
        return LeaderStep(
            status="group", sequence=tuple(state.sequence), label=state.describe()
        )

    state.active = False
    return LeaderStep(
        status="match",
        binding=child,
        sequence=tuple(state.sequence),
        label=state.describe(),
    )


def validate_leader_map(root: KeyGroup, known_commands: Iterable[str]) -> None:
    known = set(known_commands)
    for binding in iter_bindings(root):
        if binding.command_id not in known:
            raise LeaderMapError(binding)


__all__ = [
    "LeaderMapError",
    "LeaderState",
    "LeaderStep",
    "advance_leader",
    "leader_hints",
    "step_leader",
    "validate_leader_map",
]
