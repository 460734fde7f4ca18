import pytest

from sculk.block_entities.redstone import (
    CommandBlock,
    Comparator,
    Facing,
    Piston,
    PistonBlockState,
    StructureBlock,
    StructureBlockMirror,
    StructureBlockMode,
    StructureBlockRotation,
)
from sculk.errors import InvalidFieldError, MissingFieldError
from sculk.nbt import Compound, Tag, TagType, read_nbt, write_nbt


def compound(**tags):
    return Compound({name: Tag(tag_type, value) for name, (tag_type, value) in tags.items()})


def command_block_nbt(**extra):
    tags = {
        "Command": (TagType.STRING, "say hi"),
        "LastExecution": (TagType.LONG, 1234),
        "LastOutput": (TagType.STRING, "out"),
        "SuccessCount": (TagType.INT, 3),
    }
    tags.update(extra)
    return compound(**tags)


def test_command_block_required_fields_and_defaults():
    block = CommandBlock.from_compound(command_block_nbt())
    assert block.command == "say hi"
    assert block.last_execution == 1234
    assert block.last_output == "out"
    assert block.success_count == 3
    assert block.auto is False
    assert block.update_last_execution is False
    assert block.custom_name is None


def test_command_block_flags_and_name():
    nbt = command_block_nbt(
        auto=(TagType.BYTE, 1),
        conditionMet=(TagType.BYTE, 1),
        powered=(TagType.BYTE, 0),
        TrackOutput=(TagType.BYTE, 1),
        UpdateLastExecution=(TagType.BYTE, 1),
        CustomName=(TagType.STRING, "named"),
    )
    block = CommandBlock.from_compound(nbt)
    assert block.auto is True
    assert block.condition_met is True
    assert block.powered is False
    assert block.track_output is True
    assert block.update_last_execution is True
    assert block.custom_name == "named"


def test_command_block_missing_command():
    nbt = command_block_nbt()
    del nbt["Command"]
    with pytest.raises(MissingFieldError) as info:
        CommandBlock.from_compound(nbt)
    assert info.value.field == "Command"


def test_command_block_wrong_type_counts_as_missing():
    nbt = command_block_nbt(SuccessCount=(TagType.SHORT, 3))
    with pytest.raises(MissingFieldError) as info:
        CommandBlock.from_compound(nbt)
    assert info.value.field == "SuccessCount"


def test_comparator():
    assert Comparator.from_compound(compound(OutputSignal=(TagType.INT, 7))).output_signal == 7
    with pytest.raises(MissingFieldError):
        Comparator.from_compound(Compound())


def piston_nbt(facing=2, **extra):
    tags = {
        "blockState": (
            TagType.COMPOUND,
            compound(
                name=(TagType.STRING, "minecraft:stone"),
                properties=(TagType.COMPOUND, compound(axis=(TagType.STRING, "y"))),
            ),
        ),
        "facing": (TagType.INT, facing),
        "progress": (TagType.FLOAT, 0.5),
        "source": (TagType.BYTE, 1),
    }
    tags.update(extra)
    return compound(**tags)


def test_piston_parses():
    piston = Piston.from_compound(piston_nbt(extending=(TagType.BYTE, 1)))
    assert piston.facing is Facing.NORTH
    assert piston.progress == 0.5
    assert piston.source is True
    assert piston.extending is True
    assert piston.block_state == PistonBlockState("minecraft:stone", {"axis": "y"})


@pytest.mark.parametrize("value", list(range(6)))
def test_facing_values_round_trip(value):
    piston = Piston.from_compound(piston_nbt(facing=value))
    assert int(piston.facing) == value


def test_piston_invalid_facing():
    with pytest.raises(InvalidFieldError) as info:
        Piston.from_compound(piston_nbt(facing=6))
    assert info.value.field == "facing"


def test_piston_missing_block_state():
    nbt = piston_nbt()
    del nbt["blockState"]
    with pytest.raises(MissingFieldError) as info:
        Piston.from_compound(nbt)
    assert info.value.field == "blockState"


def test_piston_missing_source():
    nbt = piston_nbt()
    del nbt["source"]
    with pytest.raises(MissingFieldError) as info:
        Piston.from_compound(nbt)
    assert info.value.field == "source"


def test_block_state_without_properties():
    state = PistonBlockState.from_compound(compound(name=(TagType.STRING, "minecraft:dirt")))
    assert state.properties is None
    assert state.name == "minecraft:dirt"


def test_block_state_non_string_property():
    nbt = compound(
        name=(TagType.STRING, "minecraft:dirt"),
        properties=(TagType.COMPOUND, compound(level=(TagType.INT, 1))),
    )
    with pytest.raises(InvalidFieldError) as info:
        PistonBlockState.from_compound(nbt)
    assert info.value.field == "properties"


def structure_nbt(**extra):
    tags = {
        "author": (TagType.STRING, "?"),
        "integrity": (TagType.FLOAT, 1.0),
        "metadata": (TagType.STRING, ""),
        "mirror": (TagType.STRING, "LEFT_RIGHT"),
        "mode": (TagType.STRING, "SAVE"),
        "name": (TagType.STRING, "house"),
        "posX": (TagType.INT, 1),
        "posY": (TagType.INT, 2),
        "posZ": (TagType.INT, 3),
        "rotation": (TagType.STRING, "CLOCKWISE_90"),
        "seed": (TagType.LONG, 0),
        "sizeX": (TagType.INT, 4),
        "sizeY": (TagType.INT, 5),
        "sizeZ": (TagType.INT, 6),
        "showboundingbox": (TagType.BYTE, 1),
    }
    tags.update(extra)
    return compound(**tags)


def test_structure_block_parses():
    block = StructureBlock.from_compound(structure_nbt())
    assert block.author == "?"
    assert block.mirror is StructureBlockMirror.LEFT_RIGHT
    assert block.mode is StructureBlockMode.SAVE
    assert block.rotation is StructureBlockRotation.CLOCKWISE_90
    assert (block.pos_x, block.pos_y, block.pos_z) == (1, 2, 3)
    assert (block.size_x, block.size_y, block.size_z) == (4, 5, 6)
    assert block.show_bounding_box is True
    assert block.ignore_entities is False


def test_structure_block_survives_binary_round_trip():
    nbt = structure_nbt()
    assert StructureBlock.from_compound(read_nbt(write_nbt(nbt))) == StructureBlock.from_compound(nbt)


@pytest.mark.parametrize("field_name", ["mirror", "mode", "rotation"])
def test_structure_block_invalid_enum(field_name):
    with pytest.raises(InvalidFieldError) as info:
        StructureBlock.from_compound(structure_nbt(**{field_name: (TagType.STRING, "SIDEWAYS")}))
    assert info.value.field == field_name


@pytest.mark.parametrize("field_name", ["mirror", "seed", "sizeZ", "author"])
def test_structure_block_missing_field(field_name):
    nbt = structure_nbt()
    del nbt[field_name]
    with pytest.raises(MissingFieldError) as info:
        StructureBlock.from_compound(nbt)
    assert info.value.field == field_name


def test_enum_values_match_wire_strings():
    assert StructureBlockRotation("COUNTERCLOCKWISE_90") is StructureBlockRotation.COUNTERCLOCKWISE_90
    assert StructureBlockMode("CORNER").value == "CORNER"
    assert StructureBlockMirror("FRONT_BACK") is StructureBlockMirror.FRONT_BACK