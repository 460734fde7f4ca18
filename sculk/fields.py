"""Helpers for pulling typed fields out of NBT compounds."""

from __future__ import annotations

import struct
import uuid
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

from .errors import InvalidFieldError, MissingFieldError
from .nbt import Compound, TagType

T = TypeVar("T")


@dataclass
class LootTableData:
    """The optional loot table reference of a container."""

    loot_table: str | None = None
    loot_table_seed: int | None = None


def required(value: T | None, name: str) -> T:
    """Return the value, raising MissingFieldError if it is None."""
    if value is None:
        raise MissingFieldError(name)
    return value


def get_owned_string(nbt: Compound, name: str) -> str:
    return required(nbt.get_string(name), name)


def get_optional_string(nbt: Compound, name: str) -> str | None:
    return nbt.get_string(name)


def get_bool(nbt: Compound, name: str) -> bool:
    """A byte flag; absent means False."""
    value = nbt.get_byte(name)
    return value is not None and value != 0


def get_optional_name(nbt: Compound) -> str | None:
    return nbt.get_string("CustomName")


def get_optional_lock(nbt: Compound) -> str | None:
    return nbt.get_string("Lock")


def get_loot_table_data(nbt: Compound) -> LootTableData:
    return LootTableData(nbt.get_string("LootTable"), nbt.get_long("LootTableSeed"))


def get_int_array(nbt: Compound, name: str) -> list[int]:
    return list(required(nbt.get_int_array(name), name))


def get_doubles_array(nbt: Compound, name: str) -> list[float]:
    """A required list of doubles."""
    values = required(nbt.get_list(name), name)
    if not values.items:
        return []
    if values.element_type != TagType.DOUBLE:
        raise InvalidFieldError(name)
    return list(values.items)


def get_compound_list(nbt: Compound, name: str, parse: Callable[[Compound], T]) -> list[T]:
    """Parse each compound of a list; an absent list gives an empty result."""
    values = nbt.get_list(name)
    if values is None:
        return []
    compounds = values.compounds()
    if compounds is None:
        raise InvalidFieldError(name)
    return [parse(compound) for compound in compounds]


def get_string_list(nbt: Compound, name: str) -> list[str] | None:
    """A list of strings, or None if absent."""
    values = nbt.get_list(name)
    if values is None:
        return None
    strings = values.strings()
    if strings is None:
        raise InvalidFieldError(name)
    return strings


def get_optional_components(nbt: Compound) -> Compound | None:
    """The unparsed `components` compound, if present."""
    return nbt.get_compound("components")


def uuid_from_ints(ints: Iterable[int]) -> uuid.UUID:
    """Build a UUID from four signed 32-bit integers, most significant first."""
    values = list(ints)
    if len(values) != 4:
        raise ValueError(f"a UUID needs 4 integers, got {len(values)}")
    try:
        raw = struct.pack(">4i", *values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc
    return uuid.UUID(bytes=raw)


def get_uuid(nbt: Compound, name: str) -> uuid.UUID | None:
    """A UUID stored as an int array, or None if absent."""
    ints = nbt.get_int_array(name)
    if ints is None:
        return None
    try:
        return uuid_from_ints(ints)
    except ValueError as exc:
        raise InvalidFieldError(name) from exc