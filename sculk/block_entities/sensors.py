"""Sculk blocks: sensors, shriekers and catalysts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from ..errors import InvalidFieldError, MissingFieldError
from ..fields import get_doubles_array, get_int_array, get_owned_string, get_uuid, required
from ..nbt import Compound


def _required_compound(nbt: Compound, name: str) -> Compound:
    compound = nbt.get_compound(name)
    if compound is None:
        raise MissingFieldError(name)
    return compound


@dataclass
class Event:
    """A vibration travelling towards a sculk block."""

    distance: float
    game_event: str
    pos: tuple[float, float, float]
    projectile_owner: uuid.UUID | None = None
    source: uuid.UUID | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Event:
        distance = required(nbt.get_float("distance"), "distance")
        game_event = get_owned_string(nbt, "game_event")
        pos = get_doubles_array(nbt, "pos")
        if len(pos) != 3:
            raise InvalidFieldError("pos")
        return cls(
            distance=distance,
            game_event=game_event,
            pos=(pos[0], pos[1], pos[2]),
            projectile_owner=get_uuid(nbt, "projectile_owner"),
            source=get_uuid(nbt, "source"),
        )


@dataclass
class Selector:
    """The vibration selector; tick is -1 when there is nothing to choose."""

    tick: int
    event: Event | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Selector:
        tick = required(nbt.get_long("tick"), "tick")
        event = nbt.get_compound("event")
        return cls(tick=tick, event=None if event is None else Event.from_compound(event))


@dataclass
class Listener:
    """The vibration event listener of a sculk block."""

    event_delay: int
    selector: Selector
    event: Event | None = None

    @classmethod
    def from_compound(cls, nbt: Compound) -> Listener:
        event = nbt.get_compound("event")
        parsed_event = None if event is None else Event.from_compound(event)
        event_delay = required(nbt.get_int("event_delay"), "event_delay")
        selector = Selector.from_compound(_required_compound(nbt, "selector"))
        return cls(event_delay=event_delay, selector=selector, event=parsed_event)


@dataclass
class CalibratedSculkSensor:
    """`minecraft:calibrated_sculk_sensor`."""

    last_vibration_frequency: int
    listener: Listener

    @classmethod
    def from_compound(cls, nbt: Compound) -> CalibratedSculkSensor:
        frequency = required(nbt.get_int("last_vibration_frequency"), "last_vibration_frequency")
        listener = Listener.from_compound(_required_compound(nbt, "listener"))
        return cls(last_vibration_frequency=frequency, listener=listener)


@dataclass
class SculkSensor:
    """`minecraft:sculk_sensor`."""

    last_vibration_frequency: int
    listener: Listener

    @classmethod
    def from_compound(cls, nbt: Compound) -> SculkSensor:
        frequency = required(nbt.get_int("last_vibration_frequency"), "last_vibration_frequency")
        listener = Listener.from_compound(_required_compound(nbt, "listener"))
        return cls(last_vibration_frequency=frequency, listener=listener)


@dataclass
class SculkShrieker:
    """`minecraft:sculk_shrieker`."""

    listener: Listener

    @classmethod
    def from_compound(cls, nbt: Compound) -> SculkShrieker:
        return cls(listener=Listener.from_compound(_required_compound(nbt, "listener")))


@dataclass
class Cursor:
    """A sculk charge cluster stored within a single sculk block."""

    charge: int
    pos: tuple[int, int, int]
    decay_delay: int
    update_delay: int
    facings: list[Compound] = field(default_factory=list)

    @classmethod
    def from_compound(cls, nbt: Compound) -> Cursor:
        charge = required(nbt.get_int("charge"), "charge")
        pos = get_int_array(nbt, "pos")
        if len(pos) != 3:
            raise InvalidFieldError("pos")
        decay_delay = required(nbt.get_int("decay_delay"), "decay_delay")
        update_delay = required(nbt.get_int("update_delay"), "update_delay")
        facing_list = nbt.get_list("facings")
        if facing_list is None:
            facings: list[Compound] = []
        else:
            compounds = facing_list.compounds()
            if compounds is None:
                raise InvalidFieldError("facings")
            facings = compounds
        return cls(
            charge=charge,
            pos=(pos[0], pos[1], pos[2]),
            decay_delay=decay_delay,
            update_delay=update_delay,
            facings=facings,
        )


@dataclass
class SculkCatalyst:
    """`minecraft:sculk_catalyst`, with its charge clusters."""

    cursors: list[Cursor] = field(default_factory=list)

    @classmethod
    def from_compound(cls, nbt: Compound) -> SculkCatalyst:
        cursor_list = nbt.get_list("cursors")
        if cursor_list is None:
            raise MissingFieldError("cursors")
        compounds = cursor_list.compounds() or []
        return cls(cursors=[Cursor.from_compound(compound) for compound in compounds])