"""Typed GCI requests produced by the transmission parser.

Each request type is a frozen dataclass carrying the requesting
aircraft's callsign plus its own fields. The ``request_type`` class
attribute is the discriminant callers dispatch on, so no isinstance
chains are needed to find out what was asked for.

Typical usage:
    request, ok = parser.parse(text)
    if ok and request.request_type == RequestType.SPIKED:
        print(request.bearing)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class RequestType(Enum):
    """Discriminant for the request variants."""

    ALPHA_CHECK = "alpha_check"
    BOGEY_DOPE = "bogey_dope"
    DECLARE = "declare"
    PICTURE = "picture"
    RADIO_CHECK = "radio_check"
    SPIKED = "spiked"
    SNAPLOCK = "snaplock"


class ContactCategory(Enum):
    """Airframe category used to filter BOGEY DOPE answers."""

    EVERYTHING = "everything"
    AIRPLANES = "airplanes"
    FIGHTERS = "fighters"
    HELICOPTERS = "helicopters"


@dataclass(frozen=True)
class BRA:
    """Bearing, range and altitude of a contact.

    Attributes:
        bearing: Magnetic bearing in degrees, 0-359.
        range: Range in nautical miles.
        altitude: Altitude in feet.
    """

    bearing: int
    range: int
    altitude: int

    def to_dict(self) -> dict[str, Any]:
        return {"bearing": self.bearing, "range": self.range, "altitude": self.altitude}


@dataclass(frozen=True)
class AlphaCheckRequest:
    """ALPHA CHECK: the pilot asks for their own position from bullseye."""

    callsign: str
    request_type: ClassVar[RequestType] = RequestType.ALPHA_CHECK

    def to_dict(self) -> dict[str, Any]:
        return {"request_type": self.request_type.value, "callsign": self.callsign}


@dataclass(frozen=True)
class RadioCheckRequest:
    """RADIO CHECK: the pilot asks whether the controller can hear them."""

    callsign: str
    request_type: ClassVar[RequestType] = RequestType.RADIO_CHECK

    def to_dict(self) -> dict[str, Any]:
        return {"request_type": self.request_type.value, "callsign": self.callsign}


@dataclass(frozen=True)
class SpikedRequest:
    """SPIKED: the pilot reports a radar warning along a bearing.

    Attributes:
        callsign: Normalized callsign of the requesting aircraft.
        bearing: Bearing of the spike in degrees, 0-359.
    """

    callsign: str
    bearing: int
    request_type: ClassVar[RequestType] = RequestType.SPIKED

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_type": self.request_type.value,
            "callsign": self.callsign,
            "bearing": self.bearing,
        }


@dataclass(frozen=True)
class BogeyDopeRequest:
    """BOGEY DOPE: the pilot asks for the nearest hostile contact."""

    callsign: str
    filter: ContactCategory = ContactCategory.EVERYTHING
    request_type: ClassVar[RequestType] = RequestType.BOGEY_DOPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_type": self.request_type.value,
            "callsign": self.callsign,
            "filter": self.filter.value,
        }


@dataclass(frozen=True)
class PictureRequest:
    """PICTURE: the pilot asks for a summary of the air picture.

    Attributes:
        callsign: Normalized callsign of the requesting aircraft.
        radius: Requested radius in nautical miles, None for the default.
    """

    callsign: str
    radius: int | None = None
    request_type: ClassVar[RequestType] = RequestType.PICTURE

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_type": self.request_type.value,
            "callsign": self.callsign,
            "radius": self.radius,
        }


@dataclass(frozen=True)
class DeclareRequest:
    """DECLARE: the pilot asks for the identity of a contact.

    Attributes:
        callsign: Normalized callsign of the requesting aircraft.
        bra: Location of the contact.
        is_bullseye: True when bearing and range are measured from the
            bullseye, False when measured from the requesting aircraft.
    """

    callsign: str
    bra: BRA
    is_bullseye: bool = False
    request_type: ClassVar[RequestType] = RequestType.DECLARE

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_type": self.request_type.value,
            "callsign": self.callsign,
            "bra": self.bra.to_dict(),
            "is_bullseye": self.is_bullseye,
        }


@dataclass(frozen=True)
class SnaplockRequest:
    """SNAPLOCK: the pilot asks for a quick declaration of a radar lock."""

    callsign: str
    bra: BRA
    request_type: ClassVar[RequestType] = RequestType.SNAPLOCK

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_type": self.request_type.value,
            "callsign": self.callsign,
            "bra": self.bra.to_dict(),
        }


Request = (
    AlphaCheckRequest
    | BogeyDopeRequest
    | DeclareRequest
    | PictureRequest
    | RadioCheckRequest
    | SpikedRequest
    | SnaplockRequest
)
