"""Card counting systems."""

from core.counting.base import (
    CountingSystem,
    CountOverlay,
    Difficulty,
    calculate_running_count,
    calculate_true_count,
    get_count_overlay,
)
from core.counting.hilo import HiLoSystem
from core.counting.omega2 import Omega2System
from core.counting.wong_halves import WongHalvesSystem
from core.counting.zen import ZenCountSystem

# Registry of selectable systems, in menu order
COUNTING_SYSTEMS: dict[str, CountingSystem] = {
    system.id: system
    for system in (
        HiLoSystem(),
        ZenCountSystem(),
        Omega2System(),
        WongHalvesSystem(),
    )
}


def get_counting_system(system_id: str) -> CountingSystem:
    """
    Look up a counting system by id.

    Raises:
        KeyError: If no system is registered under ``system_id``
    """
    try:
        return COUNTING_SYSTEMS[system_id]
    except KeyError:
        raise KeyError(f"Unknown counting system: {system_id}") from None


def available_systems(include_premium: bool = True) -> list[CountingSystem]:
    """Return registered systems, optionally leaving out premium ones."""
    return [
        system
        for system in COUNTING_SYSTEMS.values()
        if include_premium or not system.is_premium
    ]


__all__ = [
    "COUNTING_SYSTEMS",
    "CountingSystem",
    "CountOverlay",
    "Difficulty",
    "HiLoSystem",
    "Omega2System",
    "WongHalvesSystem",
    "ZenCountSystem",
    "available_systems",
    "calculate_running_count",
    "calculate_true_count",
    "get_count_overlay",
    "get_counting_system",
]
