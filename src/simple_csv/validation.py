"""Validation helpers for parse parameters and parsed record shapes."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from simple_csv.models import Delimiter

DELIMITER_NAMES = {member.name.lower(): member for member in Delimiter}


def coerce_delimiter(value: Delimiter | str) -> Delimiter:
    """Resolve a caller-supplied delimiter to a member of :class:`Delimiter`.

    Accepts a ``Delimiter`` member, its character (``","``), or its name
    (``"comma"``, case-insensitive).

    Args:
        value: Delimiter selection to resolve.

    Returns:
        The matching ``Delimiter`` member.

    Raises:
        ValueError: If ``value`` is not one of the recognized delimiters.
    """

    if isinstance(value, Delimiter):
        return value
    if isinstance(value, str):
        try:
            return Delimiter(value)
        except ValueError:
            pass
        member = DELIMITER_NAMES.get(value.lower())
        if member is not None:
            return member
    choices = ", ".join(sorted(DELIMITER_NAMES))
    raise ValueError(f"Unsupported delimiter {value!r}; expected one of: {choices}")


def collect_field_counts(records: Sequence[Sequence[str]]) -> dict[int, int]:
    """Count records by number of fields.

    Args:
        records: Parsed records.

    Returns:
        Dictionary of field count to number of records with that count.
    """

    counter: Counter[int] = Counter()
    for record in records:
        counter[len(record)] += 1
    return dict(counter)


def ragged_record_indexes(records: Sequence[Sequence[str]]) -> list[int]:
    """Find records whose width differs from the first record's width.

    Args:
        records: Parsed records.

    Returns:
        Zero-based indexes of records with a different number of fields.
    """

    if not records:
        return []

    expected = len(records[0])
    return [idx for idx, record in enumerate(records) if len(record) != expected]
