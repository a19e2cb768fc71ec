"""
Bounded best-of-K selection.

Keeps the K highest-scoring candidates seen so far in a min-heap keyed by
score, so a brute-force search over millions of keys runs in constant
memory.
"""

import heapq

from cipher_bruteforce.models.schemas import Candidate


class TopKSelector:
    """
    Fixed-capacity container of the best candidates by score.

    - insert(): O(log K); a candidate that does not beat the current
      minimum of a full selector is discarded
    - would_accept(): O(1) check made before building a candidate
    - best() / sorted_results(): read the held candidates
    - merge(): fold another selector in (keep top K is associative)

    Ties are not ordered.
    """

    def __init__(self, capacity: int = 5):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._heap: list[tuple[int, int, Candidate]] = []
        # Insertion counter; heap entries never compare candidates directly
        self._inserted = 0

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def min_score(self) -> int | None:
        """Lowest held score, the cutoff once the selector is full."""
        return self._heap[0][0] if self._heap else None

    def would_accept(self, score: int) -> bool:
        return len(self._heap) < self.capacity or score > self._heap[0][0]

    def insert(self, candidate: Candidate) -> bool:
        """
        Offer a candidate.

        Returns:
            True if it was kept, False if it was discarded
        """
        if not self.would_accept(candidate.score):
            return False

        self._inserted += 1
        entry = (candidate.score, self._inserted, candidate)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, entry)
        else:
            heapq.heapreplace(self._heap, entry)
        return True

    def best(self) -> Candidate | None:
        if not self._heap:
            return None
        return max(self._heap)[2]

    def sorted_results(self) -> list[Candidate]:
        """Held candidates, highest score first."""
        return [candidate for _, _, candidate in sorted(self._heap, reverse=True)]

    def merge(self, other: "TopKSelector") -> "TopKSelector":
        for candidate in other.sorted_results():
            self.insert(candidate)
        return self
