"""Monster spawners and the spawn data they share with trial spawners."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidFieldError, MissingFieldError
from ..fields import get_owned_string, required
from ..nbt import Compound

DEFAULT_SPAWN_RANGE = 4


def _required_compound(nbt: Compound, name: str, field_name: str | None = None) -> Compound:
    compound = nbt.get_compound(name)
    if compound is None:
        raise MissingFieldError(field_name or name)
    return compound


@dataclass
class DropChances:
    """Drop chance of each equipment slot; absent slots are None."""

    feet: float | None = None
    legs: float | None = None
    chest: float | None = None
    head: float | None = None
    body: float | None = None
    mainhand: float | None = None
    offhand: float | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> DropChances:
        return cls(
            feet=nbt.get_float("feet"),
            legs=nbt.get_float("legs"),
            chest=nbt.get_float("chest"),
            head=nbt.get_float("head"),
            body=nbt.get_float("body"),
            mainhand=nbt.get_float("mainhand"),
            offhand=nbt.get_float("offhand"),
        )


def parse_drop_chances(nbt: Compound) -> float | DropChances | None:
    """The `slot_drop_chances` of an equipment compound.

    A single float applies to every slot; a compound gives a chance per slot.
    Returns None when the field is absent or of another type.
    """
    chance = nbt.get_float("slot_drop_chances")
    if chance is not None:
        return chance
    per_slot = nbt.get_compound("slot_drop_chances")
    if per_slot is not None:
        return DropChances.from_compound(per_slot)
    return None


@dataclass
class Equipment:
    """Equipment an entity wears when spawned, drawn from a loot table."""

    loot_table: str
    slot_drop_chances: float | DropChances | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Equipment:
        return cls(
            loot_table=get_owned_string(nbt, "loot_table"),
            slot_drop_chances=parse_drop_chances(nbt),
        )


@dataclass
class SpawnRules:
    """Light limits that override the usual spawning checks."""

    block_light_limit: int
    sky_light_limit: int

    @classmethod
    def from_compound(cls, nbt: Compound) -> SpawnRules:
        return cls(
            block_light_limit=required(nbt.get_int("block_light_limit"), "block_light_limit"),
            sky_light_limit=required(nbt.get_int("sky_light_limit"), "sky_light_limit"),
        )


@dataclass
class SpawnData:
    """The entity to spawn, kept as its raw NBT compound, and its overrides."""

    entity: Compound
    custom_spawn_rules: SpawnRules | None = None
    equipment: Equipment | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> SpawnData:
        entity = _required_compound(nbt, "entity", "data-entity")
        rules = nbt.get_compound("custom_spawn_rules")
        equipment = nbt.get_compound("equipment")
        return cls(
            entity=entity,
            custom_spawn_rules=None if rules is None else SpawnRules.from_compound(rules),
            equipment=None if equipment is None else Equipment.from_compound(equipment),
        )


@dataclass
class PotentialSpawn:
    """A weighted candidate for the next spawn."""

    weight: int
    data: SpawnData

    @classmethod
    def from_compound(cls, nbt: Compound) -> PotentialSpawn:
        weight = required(nbt.get_int("weight"), "weight")
        data = SpawnData.from_compound(_required_compound(nbt, "data"))
        return cls(weight=weight, data=data)


@dataclass
class MobSpawner:
    """`minecraft:mob_spawner`."""

    delay: int
    max_nearby_entities: int
    max_spawn_delay: int
    min_spawn_delay: int
    required_player_range: int
    spawn_count: int
    spawn_data: SpawnData
    spawn_potentials: list[PotentialSpawn] | None = None
    spawn_range: int = DEFAULT_SPAWN_RANGE

    @classmethod
    def from_compound(cls, nbt: Compound) -> MobSpawner:
        delay = required(nbt.get_short("Delay"), "Delay")
        max_nearby_entities = required(nbt.get_short("MaxNearbyEntities"), "MaxNearbyEntities")
        max_spawn_delay = required(nbt.get_short("MaxSpawnDelay"), "MaxSpawnDelay")
        min_spawn_delay = required(nbt.get_short("MinSpawnDelay"), "MinSpawnDelay")
        required_player_range = required(
            nbt.get_short("RequiredPlayerRange"), "RequiredPlayerRange"
        )
        spawn_count = required(nbt.get_short("SpawnCount"), "SpawnCount")
        spawn_data = SpawnData.from_compound(_required_compound(nbt, "SpawnData"))

        spawn_potentials: list[PotentialSpawn] | None = None
        potential_list = nbt.get_list("SpawnPotentials")
        if potential_list is not None and len(potential_list):
            compounds = potential_list.compounds()
            if compounds is None:
                raise InvalidFieldError("SpawnPotentials")
            spawn_potentials = [PotentialSpawn.from_compound(c) for c in compounds]

        spawn_range = nbt.get_short("SpawnRange")
        return cls(
            delay=delay,
            max_nearby_entities=max_nearby_entities,
            max_spawn_delay=max_spawn_delay,
            min_spawn_delay=min_spawn_delay,
            required_player_range=required_player_range,
            spawn_count=spawn_count,
            spawn_data=spawn_data,
            spawn_potentials=spawn_potentials,
            spawn_range=DEFAULT_SPAWN_RANGE if spawn_range is None else spawn_range,
        )