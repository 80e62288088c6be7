"""
Bidirectional mapping between page labels and dense vertex indices.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class LabelRegistry:
    """
    Assigns zero-based indices to labels in first-insertion order.

    Once assigned, an index/label pair never changes and is never reused.

    Attributes:
        labels: List of all labels, indexed by vertex index
    """

    def __init__(self) -> None:
        self._label_to_idx: dict[str, int] = {}
        self._labels: list[str] = []

    def add(self, label: str) -> int:
        """Return the index for label, assigning the next free one if unseen."""
        idx = self._label_to_idx.get(label)
        if idx is not None:
            return idx

        idx = len(self._labels)
        self._label_to_idx[label] = idx
        self._labels.append(label)
        logger.debug(f"Registered vertex {idx}: {label}")
        return idx

    def index_of(self, label: str) -> int | None:
        """Get index for label, or None if not registered."""
        return self._label_to_idx.get(label)

    def label_of(self, idx: int) -> str:
        """Get label by index."""
        if 0 <= idx < len(self._labels):
            return self._labels[idx]
        raise IndexError(f"Index {idx} out of range [0, {len(self._labels)})")

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._label_to_idx

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def is_consistent(self) -> bool:
        """Check that both directions of the mapping agree."""
        if len(self._labels) != len(self._label_to_idx):
            return False
        return all(
            self._label_to_idx.get(label) == idx
            for idx, label in enumerate(self._labels)
        )
