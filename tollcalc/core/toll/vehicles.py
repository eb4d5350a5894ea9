"""Avgiftsfria fordonstyper."""

import enum
from typing import Any


class TollFreeVehicle(str, enum.Enum):
    """Fordonstyper som aldrig betalar trängselskatt."""

    MOTORBIKE = "Motorbike"
    TRACTOR = "Tractor"
    EMERGENCY = "Emergency"
    DIPLOMAT = "Diplomat"
    FOREIGN = "Foreign"
    MILITARY = "Military"


TOLL_FREE_VEHICLE_TYPES: frozenset[str] = frozenset(member.value for member in TollFreeVehicle)


def get_vehicle_type(vehicle: Any) -> str | None:
    """Hämtar fordonets typ, eller None om fordon eller typ saknas."""
    if vehicle is None:
        return None
    vehicle_type = getattr(vehicle, "type", None)
    if isinstance(vehicle_type, TollFreeVehicle):
        return vehicle_type.value
    if isinstance(vehicle_type, str):
        return vehicle_type
    return None


def is_toll_free_vehicle(vehicle: Any) -> bool:
    """
    Avgör om fordonet är undantaget från avgift.

    Exakt, skiftlägeskänslig jämförelse mot TollFreeVehicle. Saknat fordon
    räknas som avgiftspliktigt.
    """
    return get_vehicle_type(vehicle) in TOLL_FREE_VEHICLE_TYPES
