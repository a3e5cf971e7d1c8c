"""InsertResult returned by bulk insertion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InsertResult:
    """
    Outcome of ``QuadTree.insert_many`` / ``insert_many_np``.

    Bulk inserts always receive auto-assigned, contiguous IDs, so the batch
    is described by its first and last ID. An empty batch has
    ``end_id == start_id - 1``.
    """

    count: int
    start_id: int
    end_id: int

    @property
    def ids(self) -> range:
        """IDs given to the batch, in input order."""
        return range(self.start_id, self.end_id + 1)
