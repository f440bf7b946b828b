"""Accent-insensitive product filtering and result formatting."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from megastore.product import Product
from megastore.recommender import Recommendation

__all__ = [
    "strip_accents",
    "normalize",
    "filter_products",
    "format_result",
    "format_recommendations",
]

_COMBINING_RANGES = (
    (0x0300, 0x036F),
    (0x1AB0, 0x1AFF),
    (0x1DC0, 0x1DFF),
    (0x20D0, 0x20FF),
    (0xFE20, 0xFE2F),
)

NO_RECOMMENDATIONS = "Nenhuma recomendação encontrada."


def _is_mark(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in _COMBINING_RANGES)


def strip_accents(text: str) -> str:
    """Decompose ``text`` and drop combining diacritical marks."""
    return "".join(c for c in unicodedata.normalize("NFD", text) if not _is_mark(c))


def normalize(text: str) -> str:
    """Lower-case ``text`` and strip its accents."""
    return strip_accents(text.lower())


def filter_products(
    products: Iterable[Product], name: str, category: str, brand: str
) -> list[Product]:
    """Keep products whose name, category and brand contain the given queries.

    Matching ignores case and accents; an empty query does not filter.
    """
    criteria = [
        (query, attribute)
        for query, attribute in (
            (normalize(name), "name"),
            (normalize(category), "category"),
            (normalize(brand), "brand"),
        )
        if query
    ]
    return [
        product
        for product in products
        if all(query in normalize(getattr(product, attribute)) for query, attribute in criteria)
    ]


def format_result(product: Product) -> str:
    """Render a product as a result-list line."""
    return f"{product.name} | {product.category} | {product.brand}"


def format_recommendations(recommendations: Iterable[Recommendation]) -> str:
    """Render recommendations one per line, or a notice when there are none."""
    lines = [
        f"🛒 {r.product.name} | {r.product.category} | {r.product.brand} (pontuação: {r.score})"
        for r in recommendations
    ]
    return "\n".join(lines) if lines else NO_RECOMMENDATIONS