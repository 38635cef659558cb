from typing import Tuple

from app.core.schemas import ScholarshipRecord


NAME_MIN_LENGTH = 8
NAME_MAX_LENGTH = 200

SCHOLARSHIP_KEYWORDS: Tuple[str, ...] = ("scholarship", "grant", "fellowship", "award", "scheme")

# Phrases that show the extractor grabbed a sentence introducing a list, not a title
LIST_INTRO_PHRASES: Tuple[str, ...] = ("here are", "following")


def is_valid_scholarship(record: ScholarshipRecord) -> bool:
    """
    Accept a candidate only if its name reads like a scholarship title.

    Rejection is routine (most segments of a chatty answer are not scholarships),
    so this returns False rather than raising.
    """
    name = record.name
    if not name:
        return False
    if not (NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH):
        return False

    low = name.lower()
    if any(phrase in low for phrase in LIST_INTRO_PHRASES):
        return False
    return any(keyword in low for keyword in SCHOLARSHIP_KEYWORDS)
