"""Text rendering of journey search results."""

from __future__ import annotations

from typing import Sequence

from ..domain.models import Journey

NO_JOURNEY_MESSAGE = "No journey connects these stations"


def format_journeys(journeys: Sequence[Journey]) -> str:
    """Enumerate journeys as numbered report blocks.

    Returns:
        ``Routes found: n`` followed by one ``Journey.report()`` per entry.
    """
    blocks = []
    if not journeys:
        blocks.append(NO_JOURNEY_MESSAGE)
    blocks.append(f"Routes found: {len(journeys)}")
    for position, journey in enumerate(journeys, start=1):
        blocks.append(f"{position}:\n{journey.report()}\n")
    return "\n".join(blocks)
