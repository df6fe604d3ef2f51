"""
Canonical-order verification for one component body.

Single forward pass over the classified statements:

- ranks may stay equal or grow
- the first time a rank DROPS, the body is out of order

On that first drop the verifier looks backward for the nearest visited
statement with a strictly higher rank (the blocker), reports exactly one
violation and stops. Later disorder in the same body is NOT reported.
"""

from __future__ import annotations

from typing import Optional

from ..logging import logger
from .models import CATEGORY_LABELS, ClassifiedStatement, Violation


class SequenceVerifier:
    """Detect the first canonical-order violation in a classified body."""

    def verify(self, classified: list[ClassifiedStatement]) -> Optional[Violation]:
        """
        Verify that categories appear in non-decreasing canonical rank.

        Args:
            classified: Classified statements in source order
                (unclassified statements already removed)

        Returns:
            The first Violation, or None if the body is conformant
        """
        highest = -1
        for index, entry in enumerate(classified):
            rank = entry.rank
            if rank < highest:
                blocker = self._nearest_blocker(classified, index)
                # Unreachable while ``highest`` comes from a visited entry.
                if blocker is None:
                    return None
                logger.debug(
                    f"Rank dropped at entry {index}: "
                    f"{CATEGORY_LABELS[entry.category]} after {CATEGORY_LABELS[blocker.category]}"
                )
                return Violation(
                    offender=entry.statement,
                    category=entry.category,
                    blocker=blocker.statement,
                    blocking_category=blocker.category,
                )
            highest = rank
        return None

    @staticmethod
    def _nearest_blocker(
        classified: list[ClassifiedStatement],
        offender_index: int,
    ) -> Optional[ClassifiedStatement]:
        offender_rank = classified[offender_index].rank
        for candidate in reversed(classified[:offender_index]):
            if candidate.rank > offender_rank:
                return candidate
        return None
