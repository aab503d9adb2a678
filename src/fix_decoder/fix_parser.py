"""
FIX message tokenizer utilities.

Responsibility: Purely structural splitting of raw FIX strings.
Functions: tokenize(), resolve_delimiter(), parse_delimiter(), extract_tag(), swap_delimiter()
"""

import logging

from fix_decoder.fix_tags import DELIMITER_LABELS, Delimiter

logger = logging.getLogger("fix_decoder.parser")

# What to do with a segment that has no '=' in it.
MISSING_EQUALS_EMPTY = "empty"  # keep it: tag present, value ""
MISSING_EQUALS_SKIP = "skip"    # drop the segment
MISSING_EQUALS_POLICIES = (MISSING_EQUALS_EMPTY, MISSING_EQUALS_SKIP)

# User spellings accepted for an explicit delimiter
_DELIMITER_ALIASES = {
    "|": Delimiter.PIPE,
    "pipe": Delimiter.PIPE,
    "\x01": Delimiter.SOH,
    "soh": Delimiter.SOH,
    "^a": Delimiter.SOH,
    "\\x01": Delimiter.SOH,
    "\\u0001": Delimiter.SOH,
}


class EmptyInputError(ValueError):
    """Raised when there is nothing to decode."""

    def __init__(self, message="Please enter a FIX message to decode."):
        super().__init__(message)


def parse_delimiter(name):
    """Map a user supplied delimiter spelling onto PIPE or SOH.

    None passes through (meaning: infer from the text).
    """
    if name is None:
        return None
    delimiter = _DELIMITER_ALIASES.get(name.strip().lower())
    if delimiter is None:
        raise ValueError(f"Unsupported delimiter {name!r}: use '|' or SOH")
    return delimiter


def resolve_delimiter(raw_str, delimiter=None):
    """Pick the delimiter to split on.

    An explicit delimiter always wins. Otherwise SOH if the text has one,
    then pipe, then SOH as the wire default.
    """
    if delimiter is not None:
        return parse_delimiter(delimiter)
    if Delimiter.SOH in raw_str:
        return Delimiter.SOH
    if Delimiter.PIPE in raw_str:
        return Delimiter.PIPE
    return Delimiter.SOH


def delimiter_label(delimiter):
    return DELIMITER_LABELS[delimiter]


def tokenize(raw_str, delimiter, on_missing_equals=MISSING_EQUALS_EMPTY):
    """Split a raw FIX string into an ordered list of (tag, value) pairs.

    Trailing delimiters and empty segments are dropped; repeated tags are
    kept in the order they appear.
    """
    if on_missing_equals not in MISSING_EQUALS_POLICIES:
        raise ValueError(
            f"Unknown missing '=' policy {on_missing_equals!r}, "
            f"expected one of {MISSING_EQUALS_POLICIES}"
        )

    text = raw_str.strip() if raw_str else ""
    if not text:
        raise EmptyInputError()

    text = text.rstrip(delimiter)

    pairs = []
    for segment in text.split(delimiter):
        if not segment:
            continue
        tag, sep, value = segment.partition("=")
        if not sep:
            if on_missing_equals == MISSING_EQUALS_SKIP:
                logger.debug("Skipping segment without '=': %r", segment)
                continue
            logger.debug("Segment without '=' kept with empty value: %r", segment)
        pairs.append((tag, value))

    return pairs


def extract_tag(fields, tag):
    """Return the value of the first occurrence of a tag, or None if absent."""
    for field_tag, value in fields:
        if field_tag == tag:
            return value
    return None


def swap_delimiter(raw_str, current):
    """Rewrite every occurrence of the current delimiter with the other one.

    Returns (new_delimiter, new_text).
    """
    current = parse_delimiter(current)
    new_delimiter = Delimiter.SOH if current == Delimiter.PIPE else Delimiter.PIPE
    return new_delimiter, raw_str.replace(current, new_delimiter)
