"""
Distance Quantization Module

Snaps a raw distance to one of the "sounded" distances a locale can speak
(e.g. "in 200 meters") and returns its localization key.
"""

import logging
from collections.abc import Iterable

import numpy as np

from .contracts import contract_violation
from .models import LengthUnits, Notification


logger = logging.getLogger(__name__)


class SoundedDistances:
    """
    Immutable table of (threshold, key) pairs sorted by threshold.

    Thresholds are stored in a numpy array so the lower bound can be found
    with a binary search.
    """

    def __init__(self, pairs: Iterable[tuple[int, str]]):
        pairs = tuple(pairs)
        self._keys = tuple(key for _, key in pairs)
        self._thresholds = np.array([threshold for threshold, _ in pairs], dtype=np.int64)
        self._thresholds.setflags(write=False)

        if len(self._thresholds) > 1 and not np.all(np.diff(self._thresholds) > 0):
            raise ValueError("Sounded distance thresholds must be strictly increasing")

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self):
        return iter(zip(self._thresholds.tolist(), self._keys))

    @property
    def thresholds(self) -> np.ndarray:
        return self._thresholds

    @property
    def keys(self) -> tuple[str, ...]:
        return self._keys


SOUNDED_DIST_METERS = SoundedDistances([
    (50, "in_50_meters"),
    (100, "in_100_meters"),
    (200, "in_200_meters"),
    (250, "in_250_meters"),
    (300, "in_300_meters"),
    (400, "in_400_meters"),
    (500, "in_500_meters"),
    (600, "in_600_meters"),
    (700, "in_700_meters"),
    (750, "in_750_meters"),
    (800, "in_800_meters"),
    (900, "in_900_meters"),
    (1000, "in_1_kilometer"),
    (1500, "in_1_5_kilometers"),
    (2000, "in_2_kilometers"),
    (2500, "in_2_5_kilometers"),
    (3000, "in_3_kilometers"),
])

SOUNDED_DIST_FEET = SoundedDistances([
    (50, "in_50_feet"),
    (100, "in_100_feet"),
    (200, "in_200_feet"),
    (300, "in_300_feet"),
    (400, "in_400_feet"),
    (500, "in_500_feet"),
    (600, "in_600_feet"),
    (700, "in_700_feet"),
    (800, "in_800_feet"),
    (900, "in_900_feet"),
    (1000, "in_1000_feet"),
    (1500, "in_1500_feet"),
    (2000, "in_2000_feet"),
    (2640, "in_half_a_mile"),
    (3000, "in_3000_feet"),
    (3960, "in_three_quarters_of_a_mile"),
    (4000, "in_4000_feet"),
    (5280, "in_1_mile"),
    (7920, "in_1_5_miles"),
    (10560, "in_2_miles"),
    (13200, "in_2_5_miles"),
    (15840, "in_3_miles"),
])

SOUNDED_DISTANCES = {
    LengthUnits.METRIC: SOUNDED_DIST_METERS,
    LengthUnits.IMPERIAL: SOUNDED_DIST_FEET,
}


def quantize(table: SoundedDistances, distance: int) -> str:
    """
    Find the localization key of the sounded distance closest to distance.

    The first threshold >= distance is taken, unless the previous threshold
    is clearly nearer: with thresholds 100 and 200, 130 gives the key of 100
    while 135 gives the key of 200.

    Args:
        table: Sorted sounded distances for one unit system
        distance: Raw distance in the table's units

    Returns:
        Localization key, empty if distance is beyond the table
    """
    index = int(np.searchsorted(table.thresholds, distance, side="left"))

    if index == len(table):
        contract_violation("Invalid distance table for distance", distance=distance)
        return ""

    if index > 0:
        lower = int(table.thresholds[index - 1])
        upper = int(table.thresholds[index])
        if (distance - lower) * 2 < (upper - distance):
            return table.keys[index - 1]

    return table.keys[index]


def distance_text_id(notification: Notification) -> str:
    """Localization key for the notification's distance."""
    table = SOUNDED_DISTANCES.get(notification.length_units)
    if table is None:
        contract_violation("Unknown length units", units=notification.length_units)
        return ""
    return quantize(table, notification.distance_units)
