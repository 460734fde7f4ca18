import pytest

from sculk.block_entities.skull import (
    Profile,
    Property,
    Skull,
    parse_component_skull_profile,
    parse_skull_profile,
)
from sculk.errors import InvalidFieldError, MissingFieldError
from sculk.fields import uuid_from_ints
from sculk.nbt import Compound, NbtList, Tag, TagType, read_nbt, write_nbt


def make(**tags):
    return Compound({name: Tag(kind, value) for name, (kind, value) in tags.items()})


def textures():
    return make(
        name=(TagType.STRING, "textures"),
        value=(TagType.STRING, "e30="),
    )


def profile_compound():
    return make(
        name=(TagType.STRING, "Steve"),
        id=(TagType.INT_ARRAY, [1, 2, 3, 4]),
        properties=(TagType.LIST, NbtList(TagType.COMPOUND, [textures()])),
    )


def test_skull_without_profile():
    skull = Skull.from_compound(make(note_block_sound=(TagType.STRING, "minecraft:ambient")))
    assert skull.profile is None
    assert skull.note_block_sound == "minecraft:ambient"
    assert skull.custom_name is None


def test_skull_with_name_profile():
    skull = Skull.from_compound(make(profile=(TagType.STRING, "Alex")))
    assert skull.profile == "Alex"


def test_skull_with_full_profile():
    skull = Skull.from_compound(make(profile=(TagType.COMPOUND, profile_compound())))
    assert skull.profile == Profile(
        name="Steve",
        id=uuid_from_ints([1, 2, 3, 4]),
        properties=[Property(name="textures", value="e30=")],
    )


def test_parse_skull_profile_absent():
    with pytest.raises(InvalidFieldError) as info:
        parse_skull_profile(make())
    assert info.value.field == "profile"


def test_component_profile():
    nbt = make(**{"minecraft:profile": (TagType.STRING, "Alex")})
    assert parse_component_skull_profile(nbt) == "Alex"
    with pytest.raises(InvalidFieldError) as info:
        parse_component_skull_profile(make(profile=(TagType.STRING, "Alex")))
    assert info.value.field == "minecraft:profile"


def test_profile_all_optional():
    assert Profile.from_compound(make()) == Profile()


def test_profile_properties_wrong_type():
    nbt = make(properties=(TagType.LIST, NbtList(TagType.STRING, ["x"])))
    with pytest.raises(InvalidFieldError):
        Profile.from_compound(nbt)


def test_property_requires_value():
    with pytest.raises(MissingFieldError) as info:
        Property.from_compound(make(name=(TagType.STRING, "textures")))
    assert info.value.field == "value"


def test_property_signature():
    nbt = textures()
    nbt["signature"] = Tag(TagType.STRING, "sig")
    assert Property.from_compound(nbt).signature == "sig"


def test_missing_property_field_propagates_from_skull():
    bad = make(properties=(TagType.LIST, NbtList(TagType.COMPOUND, [make()])))
    with pytest.raises(MissingFieldError):
        Skull.from_compound(make(profile=(TagType.COMPOUND, bad)))


def test_round_trip_through_binary():
    original = make(
        custom_name=(TagType.STRING, "Head"),
        profile=(TagType.COMPOUND, profile_compound()),
    )
    assert Skull.from_compound(read_nbt(write_nbt(original))) == Skull.from_compound(original)