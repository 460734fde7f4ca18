"""Chest-like containers that hold items and an optional loot table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..fields import (
    get_compound_list,
    get_loot_table_data,
    get_optional_lock,
    get_optional_name,
)
from ..nbt import Compound


def _common_fields(nbt: Compound) -> dict[str, Any]:
    loot = get_loot_table_data(nbt)
    return {
        "custom_name": get_optional_name(nbt),
        "items": get_compound_list(nbt, "Items", lambda item: item),
        "lock": get_optional_lock(nbt),
        "loot_table": loot.loot_table,
        "loot_table_seed": loot.loot_table_seed,
    }


@dataclass
class LootContainer:
    """Fields shared by containers with items, a lock and a loot table.

    Items are kept as their raw NBT compounds.
    """

    custom_name: str | None = None
    items: list[Compound] = field(default_factory=list)
    lock: str | None = None
    loot_table: str | None = None
    loot_table_seed: int | None = None

    @classmethod
    def from_compound(cls, nbt: Compound):
        return cls(**_common_fields(nbt))


@dataclass
class Barrel(LootContainer):
    """`minecraft:barrel`."""


@dataclass
class Chest(LootContainer):
    """`minecraft:chest` and `minecraft:trapped_chest`; slots 0-26."""


@dataclass
class Dispenser(LootContainer):
    """`minecraft:dispenser`; slots 0-8."""


@dataclass
class Dropper(LootContainer):
    """`minecraft:dropper`; slots 0-8."""


@dataclass
class Hopper(LootContainer):
    """`minecraft:hopper`, with its transfer cooldown in ticks."""

    transfer_cooldown: int = 0

    @classmethod
    def from_compound(cls, nbt: Compound):
        cooldown = nbt.get_int("TransferCooldown")
        return cls(
            **_common_fields(nbt),
            transfer_cooldown=0 if cooldown is None else cooldown,
        )