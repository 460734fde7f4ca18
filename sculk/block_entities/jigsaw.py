"""Jigsaw blocks used by structure generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidFieldError
from ..fields import get_owned_string, required
from ..nbt import Compound


class JigsawJoint(Enum):
    """How a jigsaw connection may turn."""

    ROLLABLE = "rollable"
    ALIGNED = "aligned"


@dataclass
class Jigsaw:
    """`minecraft:jigsaw`."""

    final_state: str
    joint: JigsawJoint
    name: str
    pool: str
    target: str
    selection_priority: int
    placement_priority: int

    @classmethod
    def from_compound(cls, nbt: Compound) -> Jigsaw:
        final_state = get_owned_string(nbt, "final_state")
        raw_joint = required(nbt.get_string("joint"), "joint")
        try:
            joint = JigsawJoint(raw_joint)
        except ValueError as exc:
            raise InvalidFieldError("joint") from exc
        return cls(
            final_state=final_state,
            joint=joint,
            name=get_owned_string(nbt, "name"),
            pool=get_owned_string(nbt, "pool"),
            target=get_owned_string(nbt, "target"),
            selection_priority=required(nbt.get_int("selection_priority"), "selection_priority"),
            placement_priority=required(nbt.get_int("placement_priority"), "placement_priority"),
        )