"""Altitude STACKS.

A STACK groups contacts that fly within a block of altitudes so a
group can be reported as "STACK, 25 thousand, 2 contacts, 10 thousand".
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

# Altitudes are rounded to this band before clustering, in feet
BAND_SIZE = 1000
# A contact this far or further below the open stack starts a new one, in feet
STACK_SEPARATION = 9900


@dataclass(frozen=True)
class Stack:
    """A single layer of an altitude STACK.

    Attributes:
        altitude: Rounded altitude of the layer's highest contact, in feet.
        count: Number of contacts in the layer.
    """

    altitude: int
    count: int


def round_to_band(altitude: float) -> int:
    """Round an altitude to the nearest band, halves away from zero."""
    bands = math.floor(abs(altitude) / BAND_SIZE + 0.5)
    return int(math.copysign(bands * BAND_SIZE, altitude))


def stacks(*altitudes: float) -> list[Stack]:
    """Create altitude STACKS from altitudes in feet.

    Args:
        *altitudes: Contact altitudes in feet. Not modified.

    Returns:
        Stacks ordered highest first. Counts sum to the number of altitudes.
    """
    return stacks_from(altitudes)


def stacks_from(altitudes: Iterable[float]) -> list[Stack]:
    """Same as stacks(), for an existing collection of altitudes."""
    rounded = sorted((round_to_band(a) for a in altitudes), reverse=True)

    layers: list[list[int]] = []
    for altitude in rounded:
        if layers and altitude > layers[-1][0] - STACK_SEPARATION:
            layers[-1][1] += 1
        else:
            layers.append([altitude, 1])

    return [Stack(altitude=altitude, count=count) for altitude, count in layers]
