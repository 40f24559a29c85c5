"""Parsing of externally supplied website / report identifiers."""

import re

from wpfleet.domain.exceptions import InvalidIdentifierError

# Upper bound of the store's integer primary keys.
MAX_IDENTIFIER = 2_147_483_647

_DIGITS = re.compile(r"[0-9]+")


def parse_identifier(field: str, raw: object) -> int:
    """Convert a raw path/query value into a non-negative integer key.

    Only a non-empty string of ASCII digits is accepted. Anything else,
    including values already coerced to numbers upstream, raises
    ``InvalidIdentifierError`` naming ``field``.
    """
    if not isinstance(raw, str) or not _DIGITS.fullmatch(raw):
        raise InvalidIdentifierError(field, raw)

    value = int(raw)
    if value > MAX_IDENTIFIER:
        raise InvalidIdentifierError(field, raw)
    return value


def parse_report_identifiers(website_id: object, report_id: object) -> tuple[int, int]:
    """Validate both identifiers of a report-detail request, website first."""
    return (
        parse_identifier("website_id", website_id),
        parse_identifier("report_id", report_id),
    )
