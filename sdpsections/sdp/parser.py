"""SDP media section parsing.

Extracts the media kind, mid and direction of every m= section in an SDP
body. Only these three properties are read; codecs, candidates and other
attributes are ignored.

Example SDP:
    v=0
    o=- 4611731400430051336 2 IN IP4 127.0.0.1
    s=-
    t=0 0
    m=audio 9 UDP/TLS/RTP/SAVPF 111
    a=mid:0
    a=sendrecv
    m=video 9 UDP/TLS/RTP/SAVPF 96
    a=mid:1
    a=recvonly
"""

from typing import Iterator, Optional, Sequence

import structlog

from sdpsections.core.constants import DIRECTION_LITERALS, SdpConstants
from sdpsections.core.media_section import MediaDirection, MediaKind, MediaSection
from sdpsections import config as settings
from sdpsections.config import ParserConfig
from sdpsections.sdp.text import split

logger = structlog.get_logger(__name__)


def is_media_section_header(line: str) -> bool:
    """Check whether a line starts a new media section (m=...)."""
    return line.startswith(SdpConstants.MEDIA_HEADER_PREFIX)


def direction_from_line(line: str) -> Optional[MediaDirection]:
    """Map an exact direction attribute line to its direction, if any."""
    return DIRECTION_LITERALS.get(line)


def iter_section_windows(lines: Sequence[str]) -> Iterator[Sequence[str]]:
    """Yield the lines of each media section, header line first.

    Lines before the first header are skipped. The last window runs to
    the end of input.
    """
    starts = [i for i, line in enumerate(lines) if is_media_section_header(line)]
    for index, start in enumerate(starts):
        end = starts[index + 1] if index + 1 < len(starts) else len(lines)
        yield lines[start:end]


def parse_media_section(window: Sequence[str]) -> Optional[MediaSection]:
    """Parse one media section window.

    Args:
        window: Section lines, starting with the m= header (empty yields None)

    Returns:
        MediaSection if both a non-empty mid and a direction were found,
        None otherwise
    """
    if not window:
        return None

    header = window[0]
    # Anything that is not audio counts as video
    if header.startswith(SdpConstants.AUDIO_HEADER_PREFIX):
        kind = MediaKind.AUDIO
    else:
        kind = MediaKind.VIDEO

    identifier: Optional[str] = None
    direction: Optional[MediaDirection] = None

    for line in window:
        if line.startswith(SdpConstants.MID_PREFIX):
            if identifier is None:
                identifier = line[len(SdpConstants.MID_PREFIX):]
                logger.debug("Found media identifier", mid=identifier)
        elif direction is None:
            direction = direction_from_line(line)
            if direction is not None:
                logger.debug("Found media direction", direction=direction.value)

    if identifier and direction is not None:
        return MediaSection(kind=kind, identifier=identifier, direction=direction)

    return None


class SdpParser:
    """Parser turning an SDP body into its complete media sections.

    Parsing never raises for malformed input: sections without a mid or
    a direction are dropped and reported through the logger.
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        # Module settings are resolved per parser, not at import
        self._config = config or settings.config.parser

    def parse(self, sdp: str) -> list[MediaSection]:
        """Parse an SDP body.

        Args:
            sdp: SDP text with CRLF line separators

        Returns:
            Complete media sections in order of appearance
        """
        lines = split(sdp, SdpConstants.LINE_SEPARATOR)
        sections: list[MediaSection] = []

        for window in iter_section_windows(lines):
            section = parse_media_section(window)
            if section is not None:
                sections.append(section)
            elif self._config.log_dropped_sections:
                logger.warning("Failed to parse media section", header=window[0])

        return sections


def parse_sdp(sdp: str) -> list[MediaSection]:
    """Parse an SDP body with the default parser settings."""
    return SdpParser().parse(sdp)
