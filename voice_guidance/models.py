"""
Pydantic models for turn-notification text generation.

This module defines the input schema of a voice notification: the maneuver
(vehicle or pedestrian arm of a tagged variant), the distance to it and the
optional next-street metadata.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class CarDirection(str, Enum):
    """Vehicle maneuvers."""
    NONE = "none"
    GO_STRAIGHT = "go_straight"
    TURN_RIGHT = "turn_right"
    TURN_SHARP_RIGHT = "turn_sharp_right"
    TURN_SLIGHT_RIGHT = "turn_slight_right"
    TURN_LEFT = "turn_left"
    TURN_SHARP_LEFT = "turn_sharp_left"
    TURN_SLIGHT_LEFT = "turn_slight_left"
    U_TURN_LEFT = "u_turn_left"
    U_TURN_RIGHT = "u_turn_right"
    ENTER_ROUNDABOUT = "enter_roundabout"
    LEAVE_ROUNDABOUT = "leave_roundabout"
    STAY_ON_ROUNDABOUT = "stay_on_roundabout"
    START_AT_END_OF_STREET = "start_at_end_of_street"
    REACHED_YOUR_DESTINATION = "reached_your_destination"
    EXIT_HIGHWAY_TO_LEFT = "exit_highway_to_left"
    EXIT_HIGHWAY_TO_RIGHT = "exit_highway_to_right"
    COUNT = "count"


class PedestrianDirection(str, Enum):
    """Pedestrian maneuvers."""
    NONE = "none"
    GO_STRAIGHT = "go_straight"
    TURN_RIGHT = "turn_right"
    TURN_LEFT = "turn_left"
    REACHED_YOUR_DESTINATION = "reached_your_destination"
    COUNT = "count"


class LengthUnits(str, Enum):
    """Unit system the distance is expressed in."""
    METRIC = "metric"
    IMPERIAL = "imperial"


# =============================================================================
# Maneuver variant
# =============================================================================

class VehicleManeuver(BaseModel):
    """Vehicle arm of the maneuver variant."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["vehicle"] = "vehicle"
    direction: CarDirection = CarDirection.NONE


class PedestrianManeuver(BaseModel):
    """Pedestrian arm of the maneuver variant."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["pedestrian"] = "pedestrian"
    direction: PedestrianDirection = PedestrianDirection.NONE


Maneuver = Annotated[VehicleManeuver | PedestrianManeuver, Field(discriminator="kind")]


# =============================================================================
# Input Models
# =============================================================================

class RoadNameInfo(BaseModel):
    """
    Raw road name fields of the street following the maneuver.

    Every field is independently optional; an absent value is the empty string.
    """
    model_config = ConfigDict(frozen=True)

    ref: str = Field(default="", description="Road reference, e.g. CA-1")
    name: str = Field(default="", description="Street name")
    destination: str = Field(default="", description="Signposted destination")
    destination_ref: str = Field(default="", description="Reference of the destination road")
    junction_ref: str = Field(default="", description="Exit/junction number")

    @property
    def has_exit_info(self) -> bool:
        """True when a junction or destination reference is present."""
        return bool(self.junction_ref or self.destination_ref)

    @property
    def is_empty(self) -> bool:
        """True when no field carries text."""
        return not (
            self.ref or self.name or self.destination
            or self.destination_ref or self.junction_ref
        )


class Notification(BaseModel):
    """
    A single voice notification request.

    This is the main input schema: one upcoming maneuver plus the
    information needed to qualify it (distance or "then" sequencing, and
    the street the maneuver leads onto).
    """
    model_config = ConfigDict(frozen=True)

    maneuver: Maneuver = Field(default_factory=VehicleManeuver)

    # Distance in the units of length_units; 0 means "at the maneuver"
    distance_units: int = Field(default=0, ge=0, description="Distance to the maneuver")
    length_units: LengthUnits = Field(default=LengthUnits.METRIC)

    # "Then do X" phrasing instead of a distance qualifier
    use_then_instead_of_distance: bool = False

    # Only meaningful for CarDirection.LEAVE_ROUNDABOUT
    exit_num: int = Field(default=0, ge=0, description="Roundabout exit index")

    next_street_info: RoadNameInfo = Field(default_factory=RoadNameInfo)

    @property
    def is_pedestrian(self) -> bool:
        """Whether the pedestrian arm of the maneuver is populated."""
        return isinstance(self.maneuver, PedestrianManeuver)

    @property
    def car_direction(self) -> CarDirection:
        """Vehicle direction, CarDirection.NONE for pedestrian notifications."""
        if isinstance(self.maneuver, VehicleManeuver):
            return self.maneuver.direction
        return CarDirection.NONE

    @property
    def pedestrian_direction(self) -> PedestrianDirection:
        """Pedestrian direction, PedestrianDirection.NONE for vehicle notifications."""
        if isinstance(self.maneuver, PedestrianManeuver):
            return self.maneuver.direction
        return PedestrianDirection.NONE

    @classmethod
    def for_vehicle(cls, direction: CarDirection | str, **kwargs) -> "Notification":
        """Create a vehicle notification."""
        return cls(maneuver=VehicleManeuver(direction=CarDirection(direction)), **kwargs)

    @classmethod
    def for_pedestrian(cls, direction: PedestrianDirection | str, **kwargs) -> "Notification":
        """Create a pedestrian notification."""
        return cls(
            maneuver=PedestrianManeuver(direction=PedestrianDirection(direction)),
            **kwargs,
        )
