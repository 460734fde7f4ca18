"""Mob heads and player heads with their owner profiles."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from ..errors import InvalidFieldError
from ..fields import get_optional_string, get_owned_string, get_uuid
from ..nbt import Compound


@dataclass
class Property:
    """A profile property, such as the base64-encoded `textures`."""

    name: str
    value: str
    signature: str | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Property:
        return cls(
            name=get_owned_string(nbt, "name"),
            value=get_owned_string(nbt, "value"),
            signature=get_optional_string(nbt, "signature"),
        )


@dataclass
class Profile:
    """The owner of a player head; every field is optional."""

    name: str | None = None
    id: uuid.UUID | None = None
    properties: list[Property] | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Profile:
        properties: list[Property] | None = None
        prop_list = nbt.get_list("properties")
        if prop_list is not None:
            compounds = prop_list.compounds()
            if compounds is None:
                raise InvalidFieldError("properties")
            properties = [Property.from_compound(c) for c in compounds]
        return cls(
            name=get_optional_string(nbt, "name"),
            id=get_uuid(nbt, "id"),
            properties=properties,
        )


def _profile_under(nbt: Compound, key: str) -> str | Profile:
    name = get_optional_string(nbt, key)
    if name is not None:
        return name
    compound = nbt.get_compound(key)
    if compound is not None:
        return Profile.from_compound(compound)
    raise InvalidFieldError(key)


def parse_skull_profile(nbt: Compound) -> str | Profile:
    """The `profile` field: a player name or a full profile."""
    return _profile_under(nbt, "profile")


def parse_component_skull_profile(nbt: Compound) -> str | Profile:
    """The `minecraft:profile` item component: a player name or a full profile."""
    return _profile_under(nbt, "minecraft:profile")


@dataclass
class Skull:
    """`minecraft:skull` and every mob or player head, floor or wall."""

    custom_name: str | None = None
    note_block_sound: str | None = None
    profile: str | Profile | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Skull:
        custom_name = get_optional_string(nbt, "custom_name")
        note_block_sound = get_optional_string(nbt, "note_block_sound")
        try:
            profile: str | Profile | None = parse_skull_profile(nbt)
        except InvalidFieldError:
            profile = None
        return cls(
            custom_name=custom_name,
            note_block_sound=note_block_sound,
            profile=profile,
        )