"""
Field extraction for one scholarship segment.

Every field is driven by an ordered list of (pattern, group) pairs. Patterns are
tried most-specific first and the first acceptable match wins; group 0 means the
whole match is the value. An extractor never raises on a miss: it returns the
field's literal default instead (the link extractor returns None and lets the
caller substitute the portal URL).
"""

import re
from typing import Callable, List, Optional, Pattern, Tuple

from pydantic import HttpUrl, TypeAdapter, ValidationError

from app.core.text_normalization import clean_title, collapse_whitespace, trim_url


FieldPattern = Tuple[Pattern[str], int]

DEFAULT_NAME = "Educational Opportunity"
DEFAULT_AMOUNT = "Amount varies"
DEFAULT_ELIGIBILITY = "Check official website for detailed eligibility criteria"
DEFAULT_DEADLINE = "Check official website for application deadlines"
DEFAULT_DESCRIPTION = "Financial assistance program for eligible students to pursue higher education."

MONTHS = r"(?:January|February|March|April|May|June|July|August|September|October|November|December)"


# ===== NAME =====

NAME_PATTERNS: List[FieldPattern] = [
    # '1. Foo Scholarship', '**Foo Scholarship', '## Foo Scheme'
    (re.compile(
        r"(?:\d+\.|\*\*|##)\s*([^.\n]+(?:scholarship|grant|fellowship|award|scheme|yojana))",
        re.IGNORECASE,
    ), 1),
    # Standalone capitalized phrase ending in a keyword
    (re.compile(
        r"([A-Z][A-Za-z\s&-]{8,60}(?:[Ss]cholarship|[Gg]rant|[Ff]ellowship|[Aa]ward|[Ss]cheme|[Yy]ojana))"
    ), 1),
    # Any capitalized line ending in a keyword
    (re.compile(
        r"^([A-Z][^.\n]{10,100}(?:[Ss]cholarship|[Gg]rant|[Ff]ellowship|[Aa]ward|[Ss]cheme))",
        re.MULTILINE,
    ), 1),
]

NAME_MIN_EXCLUSIVE = 10
NAME_MAX_EXCLUSIVE = 150


# ===== AMOUNT =====

AMOUNT_PATTERNS: List[FieldPattern] = [
    (re.compile(r"₹[\d,.\s]+(?:\s*(?:lakh|crore|per year|per month|annually|monthly))?", re.IGNORECASE), 0),
    (re.compile(r"Rs\.?\s*[\d,.\s]+(?:\s*(?:lakh|crore|per year|per month|annually))?", re.IGNORECASE), 0),
    (re.compile(r"INR\s*[\d,.\s]+", re.IGNORECASE), 0),
    (re.compile(r"up to\s*₹?[\d,.\s]+", re.IGNORECASE), 0),
    (re.compile(r"amount[:\s]*₹?[\d,.\s]+(?:\s*(?:lakh|crore|per year))?", re.IGNORECASE), 0),
]


# ===== ELIGIBILITY =====

ELIGIBILITY_PATTERNS: List[FieldPattern] = [
    (re.compile(r"eligibility[:\s]*([^.\n]{20,150})", re.IGNORECASE), 1),
    (re.compile(r"eligible[:\s]*([^.\n]{20,150})", re.IGNORECASE), 1),
    (re.compile(r"criteria[:\s]*([^.\n]{20,150})", re.IGNORECASE), 1),
    (re.compile(r"requirements?[:\s]*([^.\n]{20,150})", re.IGNORECASE), 1),
    (re.compile(r"for\s+([^.\n]{25,120}(?:students|candidates))", re.IGNORECASE), 1),
]

ELIGIBILITY_MIN_EXCLUSIVE = 20


# ===== DEADLINE =====

DEADLINE_PATTERNS: List[FieldPattern] = [
    (re.compile(r"deadline[:\s]*([^.\n]{10,60})", re.IGNORECASE), 1),
    (re.compile(r"due[:\s]*(by\s+[^.\n]{8,50})", re.IGNORECASE), 1),
    (re.compile(r"apply by[:\s]*([^.\n]{10,50})", re.IGNORECASE), 1),
    (re.compile(r"last date[:\s]*([^.\n]{10,50})", re.IGNORECASE), 1),
    (re.compile(MONTHS + r"\s+\d{1,2}(?:st|nd|rd|th)?,?\s*202[5-6]\b"), 0),
    (re.compile(r"\d{1,2}[/\-]\d{1,2}[/\-]202[5-6]"), 0),
    (re.compile(r"202[5-6]\s*(?:deadline|due)", re.IGNORECASE), 0),
]


# ===== DESCRIPTION =====

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
DESCRIPTION_BOILERPLATE = ("scholarship name", "eligibility criteria", "application deadline")
DESCRIPTION_MIN_EXCLUSIVE = 40
DESCRIPTION_MAX_EXCLUSIVE = 200
DESCRIPTION_MAX_SENTENCES = 2


# ===== LINK =====

LINK_PATTERNS: List[FieldPattern] = [
    (re.compile(r"(https?://[^\s)]+)"), 1),
    (re.compile(r"(?:website|portal|apply)[:\s]*(www\.[^\s)]+)", re.IGNORECASE), 1),
    (re.compile(r"(?:visit|check)[:\s]*(www\.[^\s)]+)", re.IGNORECASE), 1),
]

_URL_ADAPTER = TypeAdapter(HttpUrl)


def _first_match(
    text: str,
    patterns: List[FieldPattern],
    clean: Callable[[str], str] = str.strip,
    accept: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    """
    Walk the ordered pattern list and return the first cleaned capture that `accept` allows.

    A rejected capture does not stop the search; the next pattern is tried.
    """
    for pattern, group in patterns:
        m = pattern.search(text)
        if not m:
            continue
        raw = m.group(group) or m.group(0)
        value = clean(raw)
        if not value:
            continue
        if accept is not None and not accept(value):
            continue
        return value
    return None


def is_valid_url(candidate: str) -> bool:
    """True if candidate parses as an absolute http(s) URL with a host."""
    try:
        _URL_ADAPTER.validate_python(candidate)
    except ValidationError:
        return False
    return True


def extract_name(text: str) -> str:
    """
    Title of the scholarship described in the segment.

    Examples:
      '1. National Merit Scholarship\\nAmount: ...' -> 'National Merit Scholarship'
      '**The Tata Trusts Grant**' -> 'Tata Trusts Grant'
    """
    name = _first_match(
        text,
        NAME_PATTERNS,
        clean=clean_title,
        accept=lambda v: NAME_MIN_EXCLUSIVE < len(v) < NAME_MAX_EXCLUSIVE,
    )
    return name or DEFAULT_NAME


def extract_amount(text: str) -> str:
    """
    Monetary value, units kept verbatim ('₹50,000 per year', 'Rs. 12,000', 'INR 2,00,000').

    Matches without any digit are skipped and the next pattern is tried. The
    looser patterns happily match a bare label ('Amount: to be decided' yields
    'Amount:'), which is not an amount; see DESIGN.md, "Amount matches with no
    digit".
    """
    amount = _first_match(
        text,
        AMOUNT_PATTERNS,
        accept=lambda v: any(c.isdigit() for c in v),
    )
    return amount or DEFAULT_AMOUNT


def extract_eligibility(text: str) -> str:
    eligibility = _first_match(
        text,
        ELIGIBILITY_PATTERNS,
        accept=lambda v: len(v) > ELIGIBILITY_MIN_EXCLUSIVE,
    )
    return eligibility or DEFAULT_ELIGIBILITY


def extract_deadline(text: str) -> str:
    deadline = _first_match(text, DEADLINE_PATTERNS)
    return deadline or DEFAULT_DEADLINE


def extract_description(text: str) -> str:
    """
    First one or two substantive sentences of the segment, ending in a period.

    Sentences that echo field labels ('Scholarship Name', 'Eligibility Criteria',
    'Application Deadline') are skipped.
    """
    picked: List[str] = []
    for sentence in SENTENCE_SPLIT_RE.split(text):
        s = collapse_whitespace(sentence.replace("**", ""))
        if not (DESCRIPTION_MIN_EXCLUSIVE < len(s) < DESCRIPTION_MAX_EXCLUSIVE):
            continue
        low = s.lower()
        if any(phrase in low for phrase in DESCRIPTION_BOILERPLATE):
            continue
        picked.append(s)
        if len(picked) == DESCRIPTION_MAX_SENTENCES:
            break

    if picked:
        return ". ".join(picked) + "."
    return DEFAULT_DESCRIPTION


def _normalize_link(raw: str) -> str:
    link = trim_url(raw.strip())
    if not link.startswith("http"):
        link = "https://" + link
    return link


def extract_link(text: str) -> Optional[str]:
    """
    Official page for the scholarship, or None.

    Bare 'www.' domains get an https:// prefix. A candidate that fails URL
    validation falls through to the next pattern.
    """
    return _first_match(text, LINK_PATTERNS, clean=_normalize_link, accept=is_valid_url)
