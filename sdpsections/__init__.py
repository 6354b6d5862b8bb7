"""Media section extraction from WebRTC SDP bodies."""

__all__ = [
    "MediaDirection",
    "MediaKind",
    "MediaSection",
    "SdpParser",
    "parse_sdp",
]

from sdpsections.core.media_section import MediaDirection, MediaKind, MediaSection
from sdpsections.sdp.parser import SdpParser, parse_sdp
