"""
Road name formatting for spoken street announcements.

For a plain next street the phrase is "ref; name". For highway exits (or
main roads carrying exit info) it is "junction ref; destination ref;
destination", falling back to the street name when there is no destination.
"""

from typing import Protocol

from .models import RoadNameInfo


ROAD_NAME_DELIMITER = "; "


class ShieldResolver(Protocol):
    """Maps a raw road reference to canonical road shield names."""

    def road_shields(self, ref: str) -> list[str]:
        ...


class NoShieldResolver:
    """Shield resolver that knows no shields."""

    def road_shields(self, ref: str) -> list[str]:
        return []


class MappingShieldResolver:
    """Shield resolver backed by a {raw ref: [canonical names]} mapping."""

    def __init__(self, shields: dict[str, list[str]] | None = None):
        self.shields = dict(shields or {})

    def road_shields(self, ref: str) -> list[str]:
        return list(self.shields.get(ref, []))


def _canonical_ref(ref: str, shield_resolver: ShieldResolver) -> str:
    if not ref:
        return ref
    shields = shield_resolver.road_shields(ref)
    return shields[0] if shields else ref


def format_full_road_name(
    road: RoadNameInfo,
    shield_resolver: ShieldResolver | None = None,
) -> str:
    """
    Build the semicolon-delimited road phrase for the TTS engine.

    Args:
        road: Structured info about the next street
        shield_resolver: Resolver for canonical road references

    Returns:
        Phrase such as "12A; I-95; Boston", empty if nothing is known
    """
    shield_resolver = shield_resolver or NoShieldResolver()

    ref = _canonical_ref(road.ref, shield_resolver)
    destination_ref = _canonical_ref(road.destination_ref, shield_resolver)

    parts: list[str] = []

    if road.has_exit_info:
        if road.junction_ref:
            parts.append(road.junction_ref)
        if destination_ref:
            parts.append(destination_ref)
        if road.destination:
            parts.append(road.destination)
        elif road.name:
            parts.append(road.name)
    else:
        if ref:
            parts.append(ref)
        if road.name:
            parts.append(road.name)

    return ROAD_NAME_DELIMITER.join(parts)
