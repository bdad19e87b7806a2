"""Display-text helpers for parsed values and terminal summaries.

None of these are used while parsing; they convert values to text for output.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Iterable, Sequence

from simple_csv.models import QUOTE


def join_fields(fields: Iterable[str], with_newline: bool = True) -> str:
    """Join field values with ``", "`` for display.

    Args:
        fields: Field values.
        with_newline: Whether to append a trailing ``"\\n"``.

    Returns:
        Joined text.
    """

    text = ", ".join(fields)
    if with_newline:
        text += "\n"
    return text


def to_text(
    value: Any,
    fmt: str = "",
    predicate: Callable[[Any], bool] | None = None,
    replace: str = "",
) -> str:
    """Format a value with a format spec, substituting ``replace`` when it is unusable.

    Args:
        value: Value to format, or ``None``.
        fmt: Format spec passed to :func:`format`, e.g. ``","`` for ``20,000``.
        predicate: Optional check; values failing it are replaced.
        replace: Text returned for ``None`` or rejected values.

    Returns:
        Display text.
    """

    if value is None:
        return replace
    if predicate is not None and not predicate(value):
        return replace
    return format(value, fmt)


def round_text(
    value: float | None,
    decimals: int,
    predicate: Callable[[float], bool] | None = None,
    replace: str = "",
) -> str:
    """Round half away from zero and show exactly ``decimals`` fractional digits.

    Args:
        value: Number to format, or ``None``.
        decimals: Number of fractional digits.
        predicate: Optional check; values failing it are replaced.
        replace: Text returned for ``None`` or rejected values.

    Returns:
        Display text such as ``200.1235``.
    """

    if value is None:
        return replace
    if predicate is not None and not predicate(value):
        return replace
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{decimals}f}"


def escape_field(value: str | None, quote: str = QUOTE) -> str:
    """Wrap a value in quotes for display, doubling any quotes inside it.

    ``None`` and the empty string both become an empty quoted pair.

    Args:
        value: Field value.
        quote: Wrapping character. Only the double quote is doubled inside.

    Returns:
        Quoted text such as ``"a ""b"" c"``.
    """

    if not value:
        return quote + quote
    if quote == QUOTE:
        value = value.replace(QUOTE, QUOTE + QUOTE)
    return f"{quote}{value}{quote}"


def _is_count(value: str) -> bool:
    return value.replace(",", "").isdigit()


def format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Render a summary as a monospace table; all-numeric columns align right.

    Args:
        headers: Column labels.
        data_rows: Cell text per row, e.g. counts formatted by :func:`to_text`.

    Returns:
        Table text with a header line and a ``-+-`` separator.
    """

    columns = list(zip(headers, *data_rows))
    widths = [max(len(cell) for cell in column) for column in columns]
    numeric = [bool(data_rows) and all(_is_count(cell) for cell in column[1:]) for column in columns]

    def render(cells: Sequence[str]) -> str:
        return " | ".join(
            cell.rjust(width) if is_numeric else cell.ljust(width)
            for cell, width, is_numeric in zip(cells, widths, numeric)
        )

    lines = [render(headers), "-+-".join("-" * width for width in widths)]
    lines.extend(render(row) for row in data_rows)
    return "\n".join(lines)
