"""
Review list adapter.

Holds the reviews currently displayed by a list view and works out what
changed when a new list is submitted.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from src.models.review import Review

logger = logging.getLogger(__name__)


def are_items_the_same(old: Review, new: Review) -> bool:
    """Same list entry: compared by reference."""
    return old is new


def are_contents_the_same(old: Review, new: Review) -> bool:
    """Same displayed content: compared field by field."""
    return old == new


@dataclass
class ListDiff:
    """Positions affected by a list update."""
    inserted: List[int] = field(default_factory=list)  # Positions in the new list
    removed: List[int] = field(default_factory=list)  # Positions in the old list
    changed: List[int] = field(default_factory=list)  # Positions in the new list

    @property
    def is_empty(self) -> bool:
        return not (self.inserted or self.removed or self.changed)


def diff_reviews(old_items: List[Review], new_items: List[Review]) -> ListDiff:
    """
    Compare two review lists.

    Entries are matched by reference; a matched entry whose content no
    longer compares equal is reported as changed.
    """
    diff = ListDiff()
    unmatched = set(range(len(old_items)))

    for new_pos, new_item in enumerate(new_items):
        match = None
        for old_pos in sorted(unmatched):
            if are_items_the_same(old_items[old_pos], new_item):
                match = old_pos
                break

        if match is None:
            diff.inserted.append(new_pos)
            continue

        unmatched.discard(match)
        if not are_contents_the_same(old_items[match], new_item):
            diff.changed.append(new_pos)

    diff.removed = sorted(unmatched)
    return diff


class ReviewListAdapter:
    """
    Backing store of a review list view.

    submit_list() keeps its own copy of the submitted list, computes the
    diff against the previous one and runs the commit callback once the
    new list is in place.
    """

    def __init__(self):
        self.items: List[Review] = []

    def submit_list(
        self,
        reviews: List[Review],
        commit_callback: Optional[Callable[[], None]] = None
    ) -> ListDiff:
        """
        Replace displayed reviews.

        Args:
            reviews: New list to display
            commit_callback: Called after the list has been applied

        Returns:
            Differences with the previously displayed list
        """
        new_items = list(reviews)
        diff = diff_reviews(self.items, new_items)
        self.items = new_items

        logger.debug(
            f"Submitted {len(new_items)} reviews: {len(diff.inserted)} inserted, "
            f"{len(diff.removed)} removed, {len(diff.changed)} changed"
        )

        if commit_callback is not None:
            commit_callback()
        return diff

    def __len__(self) -> int:
        return len(self.items)

    def get_item(self, position: int) -> Review:
        return self.items[position]
