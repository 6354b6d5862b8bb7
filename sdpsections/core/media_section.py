"""Typed records produced by SDP media section parsing."""

from dataclasses import dataclass
from enum import Enum


class MediaKind(Enum):
    """Media kind of an m= section (audio or everything else)."""

    AUDIO = "audio"
    VIDEO = "video"


class MediaDirection(Enum):
    """Direction attribute of a media section."""

    RECVONLY = "recvonly"
    SENDONLY = "sendonly"
    INACTIVE = "inactive"
    SENDRECV = "sendrecv"


@dataclass(frozen=True)
class MediaSection:
    """One complete m= block of an SDP body.

    Fields:
        kind: Audio or video, taken from the header line
        identifier: Value of the first a=mid: line (never empty)
        direction: First direction attribute found in the block
    """

    kind: MediaKind
    identifier: str
    direction: MediaDirection
