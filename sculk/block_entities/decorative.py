"""Banners, beacons, end gateways and signs."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidFieldError, MissingFieldError
from ..fields import (
    get_bool,
    get_compound_list,
    get_optional_lock,
    get_optional_name,
    get_optional_string,
    required,
)
from ..nbt import Compound

_DYE_COLORS = frozenset(
    {
        "white",
        "orange",
        "magenta",
        "light_blue",
        "yellow",
        "lime",
        "pink",
        "gray",
        "light_gray",
        "cyan",
        "purple",
        "blue",
        "brown",
        "green",
        "red",
        "black",
    }
)


def _required_compound(nbt: Compound, name: str) -> Compound:
    compound = nbt.get_compound(name)
    if compound is None:
        raise MissingFieldError(name)
    return compound


def _strings(nbt: Compound, name: str) -> list[str] | None:
    values = nbt.get_list(name)
    if values is None:
        return None
    return list(values.strings() or [])


@dataclass
class Banner:
    """`minecraft:<color>_banner`; patterns are kept as raw NBT compounds."""

    custom_name: str | None = None
    patterns: list[Compound] = field(default_factory=list)

    @classmethod
    def from_compound(cls, nbt: Compound) -> Banner:
        return cls(
            custom_name=get_optional_name(nbt),
            patterns=get_compound_list(nbt, "patterns", lambda pattern: pattern),
        )


@dataclass
class Beacon:
    """`minecraft:beacon`, with its selected effects."""

    custom_name: str | None = None
    lock: str | None = None
    primary_effect: str | None = None
    secondary_effect: str | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Beacon:
        return cls(
            custom_name=get_optional_name(nbt),
            lock=get_optional_lock(nbt),
            primary_effect=get_optional_string(nbt, "primary_effect"),
            secondary_effect=get_optional_string(nbt, "secondary_effect"),
        )


@dataclass
class ExitPortal:
    """Where an end gateway sends entities."""

    x: int
    y: int
    z: int

    @classmethod
    def from_compound(cls, nbt: Compound) -> ExitPortal:
        return cls(
            x=required(nbt.get_int("X"), "X"),
            y=required(nbt.get_int("Y"), "Y"),
            z=required(nbt.get_int("Z"), "Z"),
        )


@dataclass
class EndGateway:
    """`minecraft:end_gateway`."""

    age: int
    exit_portal: ExitPortal
    exact_teleport: bool = False

    @classmethod
    def from_compound(cls, nbt: Compound) -> EndGateway:
        age = required(nbt.get_int("Age"), "Age")
        exact_teleport = get_bool(nbt, "ExactTeleport")
        exit_portal = ExitPortal.from_compound(_required_compound(nbt, "ExitPortal"))
        return cls(age=age, exit_portal=exit_portal, exact_teleport=exact_teleport)


@dataclass
class SignText:
    """One side of a sign: its lines, dye colour and glow."""

    color: str
    messages: list[str] = field(default_factory=list)
    has_glowing_text: bool = False
    filtered_messages: list[str] | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> SignText:
        has_glowing_text = get_bool(nbt, "has_glowing_text")
        color = nbt.get_string("color")
        if color is None:
            raise MissingFieldError("color")
        if color not in _DYE_COLORS:
            raise InvalidFieldError("color")
        filtered_messages = _strings(nbt, "filtered_messages")
        messages = _strings(nbt, "messages")
        if messages is None:
            raise MissingFieldError("messages")
        return cls(
            color=color,
            messages=messages,
            has_glowing_text=has_glowing_text,
            filtered_messages=filtered_messages,
        )


@dataclass
class Sign:
    """`minecraft:<wood>_sign` and hanging signs, with both faces."""

    front_text: SignText
    back_text: SignText
    is_waxed: bool = False

    @classmethod
    def from_compound(cls, nbt: Compound) -> Sign:
        is_waxed = get_bool(nbt, "is_waxed")
        front_text = SignText.from_compound(_required_compound(nbt, "front_text"))
        back_text = SignText.from_compound(_required_compound(nbt, "back_text"))
        return cls(front_text=front_text, back_text=back_text, is_waxed=is_waxed)