"""
Turn a free-text completion answer into a bounded list of scholarships.

Pipeline: segment -> extract fields -> validate -> collect (at most
MAX_CANDIDATES) -> fall back to the fixed catalog if nothing survived ->
truncate to MAX_RESULTS. The public entry point never raises.
"""

import logging
from typing import List

from app.core.fallback_catalog import FALLBACK_SCHOLARSHIPS
from app.core.field_extractors import (
    extract_amount,
    extract_deadline,
    extract_description,
    extract_eligibility,
    extract_link,
    extract_name,
)
from app.core.schemas import DEFAULT_SCHOLARSHIP_LINK, ScholarshipRecord
from app.core.segment_validator import is_valid_scholarship
from app.core.segmenter import iter_segments

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 10
MAX_RESULTS = 8


def extract_scholarship(segment: str) -> ScholarshipRecord:
    """Build an unvalidated candidate from one segment."""
    return ScholarshipRecord(
        name=extract_name(segment),
        amount=extract_amount(segment),
        eligibility=extract_eligibility(segment),
        deadline=extract_deadline(segment),
        description=extract_description(segment),
        link=extract_link(segment) or DEFAULT_SCHOLARSHIP_LINK,
    )


def _collect_scholarships(text: str) -> List[ScholarshipRecord]:
    accepted: List[ScholarshipRecord] = []
    for idx, segment in enumerate(iter_segments(text)):
        if len(accepted) >= MAX_CANDIDATES:
            break
        candidate = extract_scholarship(segment)
        if is_valid_scholarship(candidate):
            accepted.append(candidate)
        else:
            logger.debug(f"Segment {idx} rejected: name='{candidate.name}'")
    return accepted


def parse_scholarship_response(text: str) -> List[ScholarshipRecord]:
    """
    Parse a completion answer into 1..MAX_RESULTS scholarships.

    Returns the fallback catalog when no segment validates, including when
    parsing itself blows up on odd input.
    """
    try:
        scholarships = _collect_scholarships(text or "")
    except Exception:
        logger.exception("Error parsing scholarship response; using fallback catalog")
        scholarships = []

    if not scholarships:
        logger.warning("No scholarships parsed, adding fallback options")
        scholarships = list(FALLBACK_SCHOLARSHIPS)

    logger.info(f"Parsed {len(scholarships)} scholarships")
    return scholarships[:MAX_RESULTS]
