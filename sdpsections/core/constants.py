"""SDP literal constants recognized by the media section parser."""

from types import MappingProxyType

from sdpsections.core.media_section import MediaDirection


class SdpConstants:
    """Line prefixes and separators for SDP bodies."""

    # Line separator (RFC 4566 uses CRLF)
    LINE_SEPARATOR = "\r\n"

    # Media section header prefixes
    MEDIA_HEADER_PREFIX = "m="
    AUDIO_HEADER_PREFIX = "m=audio"

    # Media identifier attribute: a=mid:<identifier>
    MID_PREFIX = "a=mid:"


# Direction attribute lines, matched by exact equality
DIRECTION_LITERALS = MappingProxyType({
    "a=recvonly": MediaDirection.RECVONLY,
    "a=sendonly": MediaDirection.SENDONLY,
    "a=inactive": MediaDirection.INACTIVE,
    "a=sendrecv": MediaDirection.SENDRECV,
})
