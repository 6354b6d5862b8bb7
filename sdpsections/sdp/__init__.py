"""SDP media section parsing.

- SdpParser / parse_sdp: media kind, mid and direction per m= section
- text helpers: split, remove_first_occurrence, remove_all_since_word_occurrence
"""

__all__ = [
    "SdpParser",
    "parse_sdp",
    "parse_media_section",
    "is_media_section_header",
    "direction_from_line",
    "split",
    "remove_first_occurrence",
    "remove_all_since_word_occurrence",
]

from sdpsections.sdp.parser import (
    SdpParser,
    direction_from_line,
    is_media_section_header,
    parse_media_section,
    parse_sdp,
)
from sdpsections.sdp.text import (
    remove_all_since_word_occurrence,
    remove_first_occurrence,
    split,
)
