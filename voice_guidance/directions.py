"""
Direction Resolution Module

Maps a notification's maneuver to the localization key of the spoken
instruction. An empty key means nothing should be said.
"""

import logging

from .contracts import contract_violation
from .models import CarDirection, Notification, PedestrianDirection


logger = logging.getLogger(__name__)


# Highest roundabout exit number with its own "take the Nth exit" phrase
MAX_SOUNDED_EXIT = 11

LEAVE_THE_ROUNDABOUT = "leave_the_roundabout"
DESTINATION = "destination"
YOU_HAVE_REACHED_THE_DESTINATION = "you_have_reached_the_destination"


PEDESTRIAN_DIRECTION_KEYS = {
    PedestrianDirection.GO_STRAIGHT: "go_straight",
    PedestrianDirection.TURN_RIGHT: "make_a_right_turn",
    PedestrianDirection.TURN_LEFT: "make_a_left_turn",
}

CAR_DIRECTION_KEYS = {
    CarDirection.GO_STRAIGHT: "go_straight",
    CarDirection.TURN_RIGHT: "make_a_right_turn",
    CarDirection.TURN_SHARP_RIGHT: "make_a_sharp_right_turn",
    CarDirection.TURN_SLIGHT_RIGHT: "make_a_slight_right_turn",
    CarDirection.TURN_LEFT: "make_a_left_turn",
    CarDirection.TURN_SHARP_LEFT: "make_a_sharp_left_turn",
    CarDirection.TURN_SLIGHT_LEFT: "make_a_slight_left_turn",
    CarDirection.U_TURN_LEFT: "make_a_u_turn",
    CarDirection.U_TURN_RIGHT: "make_a_u_turn",
    CarDirection.ENTER_ROUNDABOUT: "enter_the_roundabout",
    CarDirection.EXIT_HIGHWAY_TO_LEFT: "exit",
    CarDirection.EXIT_HIGHWAY_TO_RIGHT: "exit",
}

# Maneuvers that are never announced on their own
UNSPOKEN_CAR_DIRECTIONS = frozenset({
    CarDirection.STAY_ON_ROUNDABOUT,
    CarDirection.START_AT_END_OF_STREET,
    CarDirection.NONE,
    CarDirection.COUNT,
})


def roundabout_text_id(notification: Notification) -> str:
    """
    Localization key for leaving a roundabout.

    Just before the exit the generic "leave the roundabout" is spoken. As a
    "then" instruction the exit number is announced when it is sounded.
    """
    if notification.is_pedestrian or notification.car_direction != CarDirection.LEAVE_ROUNDABOUT:
        contract_violation("Roundabout key requested for another maneuver", maneuver=notification.maneuver)
        return ""

    if not notification.use_then_instead_of_distance:
        return LEAVE_THE_ROUNDABOUT

    if notification.exit_num == 0 or notification.exit_num > MAX_SOUNDED_EXIT:
        return LEAVE_THE_ROUNDABOUT

    return f"take_the_{notification.exit_num}_exit"


def arrival_text_id(notification: Notification) -> str:
    """Localization key for reaching the destination."""
    if notification.is_pedestrian:
        arrived = notification.pedestrian_direction == PedestrianDirection.REACHED_YOUR_DESTINATION
    else:
        arrived = notification.car_direction == CarDirection.REACHED_YOUR_DESTINATION

    if not arrived:
        contract_violation("Arrival key requested for another maneuver", maneuver=notification.maneuver)
        return ""

    if notification.distance_units != 0 or notification.use_then_instead_of_distance:
        return DESTINATION
    return YOU_HAVE_REACHED_THE_DESTINATION


def direction_text_id(notification: Notification) -> str:
    """
    Localization key of the maneuver instruction.

    Args:
        notification: Notification to announce

    Returns:
        Key such as "make_a_right_turn", empty for unspoken maneuvers
    """
    if notification.is_pedestrian:
        direction = notification.pedestrian_direction
        if direction == PedestrianDirection.REACHED_YOUR_DESTINATION:
            return arrival_text_id(notification)
        if direction in PEDESTRIAN_DIRECTION_KEYS:
            return PEDESTRIAN_DIRECTION_KEYS[direction]
        contract_violation("Pedestrian notification without a maneuver", direction=direction.value)
        return ""

    direction = notification.car_direction
    if direction == CarDirection.LEAVE_ROUNDABOUT:
        return roundabout_text_id(notification)
    if direction == CarDirection.REACHED_YOUR_DESTINATION:
        return arrival_text_id(notification)
    if direction in CAR_DIRECTION_KEYS:
        return CAR_DIRECTION_KEYS[direction]

    if direction in UNSPOKEN_CAR_DIRECTIONS:
        contract_violation("Vehicle notification for an unspoken maneuver", direction=direction.value)
    else:
        contract_violation("Unhandled vehicle maneuver", direction=direction.value)
    return ""
