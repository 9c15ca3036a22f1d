"""
Tabular environment report.

Renders a list of Outcomes as a fixed-width table. Values are only shown
when value previews are enabled, and sensitive values are always masked.
"""

import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from envguard.config import show_values_enabled
from envguard.core import Outcome, OutcomeStatus


HEADERS = ("ENV", "SOURCE", "REQUIRED", "SENSITIVE", "STATUS", "DETAILS")
MIN_WIDTHS = (20, 12, 8, 9, 8, 20)

MASK = "••••"
MASK_SUFFIX_LENGTH = 4
# Shorter sensitive values are masked entirely
MASK_SUFFIX_MIN_LENGTH = 8
PREVIEW_MAX_LENGTH = 20
PREVIEW_TRUNCATE_AT = 17


def mask_value(value: str) -> str:
    """Masked preview of a sensitive value: the mask plus at most the last 4 characters."""
    if len(value) >= MASK_SUFFIX_MIN_LENGTH:
        return MASK + value[-MASK_SUFFIX_LENGTH:]
    return MASK


def preview_value(value: str) -> str:
    """Truncated preview of a non-sensitive value."""
    if len(value) > PREVIEW_MAX_LENGTH:
        return value[:PREVIEW_TRUNCATE_AT] + "..."
    return value


def _details(outcome: Outcome, show_values: bool) -> str:
    status = outcome.status
    if status is OutcomeStatus.MISSING:
        return outcome.description
    if status is OutcomeStatus.INVALID:
        return f"Error: {outcome.error_message}"

    if show_values and outcome.present:
        shown = mask_value(outcome.value) if outcome.sensitive else preview_value(outcome.value)
        return f"{outcome.description} (value: {shown})".lstrip()
    return outcome.description


def build_rows(outcomes: Iterable[Outcome], show_values: bool = False) -> List[Sequence[str]]:
    """Report rows (without headers) for ``outcomes``, in the given order."""
    rows = []
    for outcome in outcomes:
        rows.append((
            outcome.name,
            outcome.source,
            "no" if outcome.optional else "yes",
            "yes" if outcome.sensitive else "no",
            outcome.status.value,
            _details(outcome, show_values),
        ))
    return rows


def count_failures(outcomes: Iterable[Outcome]) -> int:
    """Number of required entries that are missing or invalid."""
    return sum(1 for outcome in outcomes if outcome.is_failure)


def render_report(outcomes: Sequence[Outcome], stream: Optional[TextIO] = None,
                  show_values: Optional[bool] = None) -> int:
    """
    Write the report table for ``outcomes`` to ``stream``.

    Args:
        outcomes: Outcomes to render, usually ``EnvRegistry.snapshot()``
        stream: Destination, defaults to stderr
        show_values: Include value previews; defaults to ENVGUARD_SHOW_VALUES=1

    Returns:
        Count of required variables that are missing or invalid
    """
    if stream is None:
        stream = sys.stderr
    if show_values is None:
        show_values = show_values_enabled()

    rows = build_rows(outcomes, show_values)

    # Widths grow with content; the details column is never padded
    widths = list(MIN_WIDTHS)
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            widths[i] = max(widths[i], len(cell))

    def format_row(cells):
        padded = [cell.ljust(widths[i]) for i, cell in enumerate(cells[:-1])]
        return " ".join(padded + [cells[-1]]).rstrip() + "\n"

    stream.write(format_row(HEADERS))
    stream.write(format_row(["-" * width for width in widths]))
    for row in rows:
        stream.write(format_row(row))

    return count_failures(outcomes)
