"""Recommending products that share a category or brand."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from megastore.product import Product

__all__ = ["Recommendation", "recommend_products"]


@dataclass(frozen=True, slots=True)
class Recommendation:
    """A recommended product and its score."""

    product: Product
    score: int


def recommend_products(
    product: Product, products: Iterable[Product], limit: int
) -> list[Recommendation]:
    """Score other products by shared category and brand, best first, at most ``limit``.

    Products with a score of zero are left out; ties keep their input order.
    """
    candidates = (
        Recommendation(
            other,
            int(other.category == product.category) + int(other.brand == product.brand),
        )
        for other in products
        if other.id != product.id
    )
    ranked = sorted((r for r in candidates if r.score > 0), key=lambda r: -r.score)
    return ranked[:limit]