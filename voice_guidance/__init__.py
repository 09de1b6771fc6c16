"""
Voice Guidance: turn-by-turn notification texts

Builds the exact locale-specific sentence spoken by a navigation app for an
upcoming maneuver: distance, direction, the street it leads onto, and
language-specific grammar adjustments.
"""

__version__ = "1.0.0"
__author__ = "Voice Guidance Team"

from .announcer import TurnNotificationTexts, synthesize
from .directions import arrival_text_id, direction_text_id, roundabout_text_id
from .distances import distance_text_id, quantize
from .localization import DictTextResolver, DirectoryTextResolver, LocaleBinding
from .models import (
    CarDirection,
    LengthUnits,
    Notification,
    PedestrianDirection,
    PedestrianManeuver,
    RoadNameInfo,
    VehicleManeuver,
)
from .road_names import format_full_road_name

__all__ = [
    "CarDirection",
    "DictTextResolver",
    "DirectoryTextResolver",
    "LengthUnits",
    "LocaleBinding",
    "Notification",
    "PedestrianDirection",
    "PedestrianManeuver",
    "RoadNameInfo",
    "TurnNotificationTexts",
    "VehicleManeuver",
    "arrival_text_id",
    "direction_text_id",
    "distance_text_id",
    "format_full_road_name",
    "quantize",
    "roundabout_text_id",
    "synthesize",
]
