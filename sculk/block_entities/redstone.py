"""Redstone blocks: command blocks, comparators, pistons and structure blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from ..errors import InvalidFieldError, MissingFieldError
from ..fields import get_bool, get_optional_name, get_owned_string, required
from ..nbt import Compound, TagType


def _required_compound(nbt: Compound, name: str) -> Compound:
    compound = nbt.get_compound(name)
    if compound is None:
        raise MissingFieldError(name)
    return compound


@dataclass
class CommandBlock:
    """`minecraft:command_block`, `chain_command_block` and `repeating_command_block`."""

    command: str
    last_execution: int
    last_output: str
    success_count: int
    auto: bool = False
    condition_met: bool = False
    custom_name: str | None = None
    powered: bool = False
    track_output: bool = False
    update_last_execution: bool = False

    @classmethod
    def from_compound(cls, nbt: Compound) -> CommandBlock:
        auto = get_bool(nbt, "auto")
        command = get_owned_string(nbt, "Command")
        condition_met = get_bool(nbt, "conditionMet")
        custom_name = get_optional_name(nbt)
        last_execution = required(nbt.get_long("LastExecution"), "LastExecution")
        last_output = get_owned_string(nbt, "LastOutput")
        powered = get_bool(nbt, "powered")
        success_count = required(nbt.get_int("SuccessCount"), "SuccessCount")
        return cls(
            command=command,
            last_execution=last_execution,
            last_output=last_output,
            success_count=success_count,
            auto=auto,
            condition_met=condition_met,
            custom_name=custom_name,
            powered=powered,
            track_output=get_bool(nbt, "TrackOutput"),
            update_last_execution=get_bool(nbt, "UpdateLastExecution"),
        )


@dataclass
class Comparator:
    """`minecraft:comparator`, with the strength of its output signal."""

    output_signal: int

    @classmethod
    def from_compound(cls, nbt: Compound) -> Comparator:
        return cls(output_signal=required(nbt.get_int("OutputSignal"), "OutputSignal"))


class Facing(IntEnum):
    """The direction a piston pushes."""

    DOWN = 0
    UP = 1
    NORTH = 2
    SOUTH = 3
    WEST = 4
    EAST = 5


@dataclass
class PistonBlockState:
    """The block being moved by a piston, with its optional properties."""

    name: str
    properties: dict[str, str] | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> PistonBlockState:
        name = get_owned_string(nbt, "name")
        props = nbt.get_compound("properties")
        properties: dict[str, str] | None = None
        if props is not None:
            properties = {}
            for key, tag in props.items():
                if tag.type != TagType.STRING:
                    raise InvalidFieldError("properties")
                properties[key] = tag.value
        return cls(name=name, properties=properties)


@dataclass
class Piston:
    """`minecraft:piston`: a block in motion or the piston head itself."""

    block_state: PistonBlockState
    facing: Facing
    progress: float
    source: bool
    extending: bool = False

    @classmethod
    def from_compound(cls, nbt: Compound) -> Piston:
        block_state = PistonBlockState.from_compound(_required_compound(nbt, "blockState"))
        extending = get_bool(nbt, "extending")
        raw_facing = required(nbt.get_int("facing"), "facing")
        try:
            facing = Facing(raw_facing)
        except ValueError as exc:
            raise InvalidFieldError("facing") from exc
        progress = required(nbt.get_float("progress"), "progress")
        source = required(nbt.get_byte("source"), "source") != 0
        return cls(
            block_state=block_state,
            facing=facing,
            progress=progress,
            source=source,
            extending=extending,
        )


class StructureBlockMirror(Enum):
    """How a structure is mirrored."""

    NONE = "NONE"
    LEFT_RIGHT = "LEFT_RIGHT"
    FRONT_BACK = "FRONT_BACK"


class StructureBlockMode(Enum):
    """The mode of a structure block."""

    SAVE = "SAVE"
    LOAD = "LOAD"
    CORNER = "CORNER"
    DATA = "DATA"


class StructureBlockRotation(Enum):
    """The rotation of a structure."""

    NONE = "NONE"
    CLOCKWISE_90 = "CLOCKWISE_90"
    CLOCKWISE_180 = "CLOCKWISE_180"
    COUNTERCLOCKWISE_90 = "COUNTERCLOCKWISE_90"


def _enum_field(nbt: Compound, name: str, enum_type):
    raw = required(nbt.get_string(name), name)
    try:
        return enum_type(raw)
    except ValueError as exc:
        raise InvalidFieldError(name) from exc


@dataclass
class StructureBlock:
    """`minecraft:structure_block`."""

    author: str
    integrity: float
    metadata: str
    mirror: StructureBlockMirror
    mode: StructureBlockMode
    name: str
    pos_x: int
    pos_y: int
    pos_z: int
    rotation: StructureBlockRotation
    seed: int
    size_x: int
    size_y: int
    size_z: int
    ignore_entities: bool = False
    powered: bool = False
    show_bounding_box: bool = False

    @classmethod
    def from_compound(cls, nbt: Compound) -> StructureBlock:
        author = get_owned_string(nbt, "author")
        ignore_entities = get_bool(nbt, "ignoreEntities")
        integrity = required(nbt.get_float("integrity"), "integrity")
        metadata = get_owned_string(nbt, "metadata")
        mirror = _enum_field(nbt, "mirror", StructureBlockMirror)
        mode = _enum_field(nbt, "mode", StructureBlockMode)
        name = get_owned_string(nbt, "name")
        pos_x = required(nbt.get_int("posX"), "posX")
        pos_y = required(nbt.get_int("posY"), "posY")
        pos_z = required(nbt.get_int("posZ"), "posZ")
        powered = get_bool(nbt, "powered")
        rotation = _enum_field(nbt, "rotation", StructureBlockRotation)
        seed = required(nbt.get_long("seed"), "seed")
        show_bounding_box = get_bool(nbt, "showboundingbox")
        size_x = required(nbt.get_int("sizeX"), "sizeX")
        size_y = required(nbt.get_int("sizeY"), "sizeY")
        size_z = required(nbt.get_int("sizeZ"), "sizeZ")
        return cls(
            author=author,
            integrity=integrity,
            metadata=metadata,
            mirror=mirror,
            mode=mode,
            name=name,
            pos_x=pos_x,
            pos_y=pos_y,
            pos_z=pos_z,
            rotation=rotation,
            seed=seed,
            size_x=size_x,
            size_y=size_y,
            size_z=size_z,
            ignore_entities=ignore_entities,
            powered=powered,
            show_bounding_box=show_bounding_box,
        )