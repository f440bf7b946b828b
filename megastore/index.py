"""Word index over product names."""

from __future__ import annotations

from collections import defaultdict

from megastore.product import Product

__all__ = ["SearchIndex"]


class SearchIndex:
    """Maps each lower-cased word of a product name to the ids that contain it."""

    def __init__(self) -> None:
        self._words: defaultdict[str, list[int]] = defaultdict(list)

    def add_product(self, product: Product) -> None:
        """Index every whitespace-separated word of the product's name."""
        for word in product.name.lower().split():
            self._words[word].append(product.id)

    def search(self, term: str) -> list[int]:
        """Return the ids indexed under exactly ``term``, or an empty list."""
        return list(self._words.get(term, ()))