"""Brevity vocabulary: typed GCI requests and altitude STACKS."""

from gcibot.brevity.altitude import Stack, stacks, stacks_from
from gcibot.brevity.requests import (
    BRA,
    AlphaCheckRequest,
    BogeyDopeRequest,
    ContactCategory,
    DeclareRequest,
    PictureRequest,
    RadioCheckRequest,
    Request,
    RequestType,
    SnaplockRequest,
    SpikedRequest,
)

__all__ = [
    # Requests
    "AlphaCheckRequest",
    "BogeyDopeRequest",
    "BRA",
    "ContactCategory",
    "DeclareRequest",
    "PictureRequest",
    "RadioCheckRequest",
    "Request",
    "RequestType",
    "SnaplockRequest",
    "SpikedRequest",
    # Stacks
    "Stack",
    "stacks",
    "stacks_from",
]
