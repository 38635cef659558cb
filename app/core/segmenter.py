"""
Split a completion answer into candidate scholarship segments.

Boundaries are zero-width (lookahead) so each segment keeps its leading marker
('1.', '## ', '**', '- ') for the name extractor to anchor on.
"""

import re
from typing import Iterator


MIN_SEGMENT_LENGTH = 100

SEGMENT_BOUNDARY_RE = re.compile(
    r"(?="
    r"^[ \t]*\d+\.(?!\d)"            # numbered list item at line start
    r"|\n##"                         # markdown heading
    r"|\*\*[A-Z].*[Ss]cholarship"    # bold title mentioning a scholarship
    r"|\n[A-Z].*[Ss]cholarship"      # capitalized line about a scholarship
    r"|\n- [A-Z]"                    # bullet followed by a capitalized word
    r")",
    re.MULTILINE,
)


def iter_segments(text: str, min_length: int = MIN_SEGMENT_LENGTH) -> Iterator[str]:
    """
    Yield stripped segments of `text` in document order.

    Segments shorter than `min_length` (greetings, bare headers) are dropped.
    The generator is lazy: boundaries are found as it is consumed.
    """
    if not text:
        return

    start = 0
    for m in SEGMENT_BOUNDARY_RE.finditer(text):
        pos = m.start()
        if pos == start:
            continue
        segment = text[start:pos].strip()
        start = pos
        if len(segment) >= min_length:
            yield segment

    tail = text[start:].strip()
    if len(tail) >= min_length:
        yield tail
