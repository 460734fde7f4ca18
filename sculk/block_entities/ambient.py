"""Beehives, conduits and enchanting tables."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from ..fields import get_compound_list, get_int_array, get_optional_name, get_uuid, required
from ..nbt import Compound


@dataclass
class Beehive:
    """`minecraft:beehive`; bees are kept as their raw NBT compounds."""

    bees: list[Compound] = field(default_factory=list)
    flower_pos: list[int] = field(default_factory=list)

    @classmethod
    def from_compound(cls, nbt: Compound) -> Beehive:
        return cls(
            bees=get_compound_list(nbt, "bees", lambda bee: bee),
            flower_pos=get_int_array(nbt, "flower_pos"),
        )


@dataclass
class Conduit:
    """`minecraft:conduit`, with the UUID of the entity it targets."""

    target: uuid.UUID

    @classmethod
    def from_compound(cls, nbt: Compound) -> Conduit:
        return cls(target=required(get_uuid(nbt, "target"), "target"))


@dataclass
class EnchantingTable:
    """`minecraft:enchanting_table`."""

    custom_name: str | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> EnchantingTable:
        return cls(custom_name=get_optional_name(nbt))