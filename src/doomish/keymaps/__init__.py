"""Leader-key tree, step resolution, and the default map."""

from .models import (
    LEADER_MARKER,
    SPACE_TOKEN,
    KeyBinding,
    KeyGroup,
    KeyHint,
    KeyNode,
    bind,
    display_token,
    group,
)
from .resolver import (
    LeaderMapError,
    LeaderState,
    LeaderStep,
    advance_leader,
    leader_hints,
    step_leader,
    validate_leader_map,
)
from .defaults import DEFAULT_LEADER_MAP

__all__ = [
    "DEFAULT_LEADER_MAP",
    "LEADER_MARKER",
    "SPACE_TOKEN",
    "KeyBinding",
    "KeyGroup",
    "KeyHint",
    "KeyNode",
    "LeaderMapError",
    "LeaderState",
    "LeaderStep",
    "advance_leader",
    "bind",
    "display_token",
    "group",
    "leader_hints",
    "step_leader",
    "validate_leader_map",
]
