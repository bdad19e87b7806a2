"""Line-ending normalization applied before any scanning."""

from __future__ import annotations

import re

from simple_csv.models import CRLF

LINE_ENDING_RE = re.compile(r"\r\n|\r|\n")


def normalize_line_endings(text: str) -> str:
    """Rewrite every CRLF, lone CR, and lone LF as a single CRLF.

    Args:
        text: Arbitrary input text, possibly empty.

    Returns:
        Text whose only line ending is ``\\r\\n``. CRLF-only text is returned
        unchanged.
    """

    return LINE_ENDING_RE.sub(CRLF, text)
