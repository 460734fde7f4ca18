"""Blocks that process items over time: brewing stands, furnaces, campfires."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidFieldError, MissingFieldError
from ..fields import (
    get_compound_list,
    get_int_array,
    get_optional_lock,
    get_optional_name,
    required,
)
from ..nbt import Compound, TagType


def _raw_item(item: Compound) -> Compound:
    return item


@dataclass
class BrewingStand:
    """`minecraft:brewing_stand`.

    Slots 0-2 hold potions, slot 3 the ingredient and slot 4 the fuel.
    """

    brew_time: int
    fuel: int
    custom_name: str | None = None
    items: list[Compound] = field(default_factory=list)
    lock: str | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> BrewingStand:
        return cls(
            brew_time=required(nbt.get_short("BrewTime"), "BrewTime"),
            custom_name=get_optional_name(nbt),
            fuel=required(nbt.get_byte("Fuel"), "Fuel"),
            items=get_compound_list(nbt, "Items", _raw_item),
            lock=get_optional_lock(nbt),
        )


@dataclass
class Furnace:
    """`minecraft:furnace`, `minecraft:blast_furnace` and `minecraft:smoker`.

    Slot 0 is the input, slot 1 the fuel and slot 2 the result.
    """

    burn_time: int
    cook_time: int
    cook_time_total: int
    custom_name: str | None = None
    items: list[Compound] = field(default_factory=list)
    lock: str | None = None
    recipes_used: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_compound(cls, nbt: Compound) -> Furnace:
        burn_time = required(nbt.get_short("BurnTime"), "BurnTime")
        cook_time = required(nbt.get_short("CookTime"), "CookTime")
        cook_time_total = required(nbt.get_short("CookTimeTotal"), "CookTimeTotal")
        custom_name = get_optional_name(nbt)
        items = get_compound_list(nbt, "Items", _raw_item)
        lock = get_optional_lock(nbt)

        recipes = nbt.get_compound("RecipesUsed")
        if recipes is None:
            raise MissingFieldError("RecipesUsed")
        recipes_used: dict[str, int] = {}
        for recipe, tag in recipes.items():
            if tag.type != TagType.INT:
                raise InvalidFieldError("RecipesUsed")
            recipes_used[recipe] = tag.value

        return cls(
            burn_time=burn_time,
            cook_time=cook_time,
            cook_time_total=cook_time_total,
            custom_name=custom_name,
            items=items,
            lock=lock,
            recipes_used=recipes_used,
        )


@dataclass
class Campfire:
    """`minecraft:campfire` and `minecraft:soul_campfire`."""

    cooking_times: list[int]
    cooking_total_times: list[int]
    items: list[Compound] = field(default_factory=list)

    @classmethod
    def from_compound(cls, nbt: Compound) -> Campfire:
        return cls(
            cooking_times=get_int_array(nbt, "CookingTimes"),
            cooking_total_times=get_int_array(nbt, "CookingTotalTimes"),
            items=get_compound_list(nbt, "Items", _raw_item),
        )