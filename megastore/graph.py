"""Registry of products taking part in recommendations."""

from __future__ import annotations

__all__ = ["RecommendationGraph"]


class RecommendationGraph:
    """Holds the set of product ids known to the recommendation graph."""

    def __init__(self) -> None:
        self._nodes: set[int] = set()

    def add_product(self, product_id: int) -> None:
        """Register a product id as a node."""
        self._nodes.add(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)