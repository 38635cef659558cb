"""
Text cleanup for values pulled out of model-generated answers.

Completion answers are markdown-flavoured: titles arrive wrapped in bold markers,
prefixed with heading hashes, or split across lines. These helpers only ever
remove formatting; they never rewrite words.
"""

import re


EMPHASIS_RE = re.compile(r"\*{1,3}|_{2,3}")
HEADING_PREFIX_RE = re.compile(r"^\s*#{1,6}\s*")
LIST_PREFIX_RE = re.compile(r"^\s*(?:\d+\.|[-*•])\s+")
LEADING_ARTICLE_RE = re.compile(r"^(?:The |A )", re.IGNORECASE)
WHITESPACE_RE = re.compile(r"\s+")
URL_TRAILING_PUNCT = ".,;:!?'\"*_"


def collapse_whitespace(text: str) -> str:
    """
    Join lines and squeeze runs of whitespace into single spaces.

    Examples:
      'Post Matric\\n  Scholarship' -> 'Post Matric Scholarship'
    """
    if not text:
        return text
    return WHITESPACE_RE.sub(" ", text).strip()


def strip_markdown(text: str) -> str:
    """
    Remove bold/italic markers and a leading heading or list marker.

    Examples:
      '**National Merit Scholarship**' -> 'National Merit Scholarship'
      '## Inspire Scholarship' -> 'Inspire Scholarship'
      '- Merit Award' -> 'Merit Award'
    """
    if not text:
        return text
    t = EMPHASIS_RE.sub("", text)
    t = HEADING_PREFIX_RE.sub("", t)
    t = LIST_PREFIX_RE.sub("", t)
    return t


def clean_title(text: str) -> str:
    """Normalize an extracted title: markdown off, whitespace collapsed, leading article dropped."""
    t = collapse_whitespace(strip_markdown(text))
    t = LEADING_ARTICLE_RE.sub("", t)
    return t.strip(" :-")


def trim_url(url: str) -> str:
    """Drop sentence punctuation or emphasis markers swallowed at the end ('...gov.in.' or '...gov.in**' -> '...gov.in')."""
    return url.rstrip(URL_TRAILING_PUNCT)
