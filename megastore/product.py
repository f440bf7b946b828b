"""The product record shared by the search, loading and recommendation code."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Product"]


@dataclass(frozen=True, slots=True)
class Product:
    """A catalogue entry: identifier, name, category and brand."""

    id: int
    name: str
    category: str
    brand: str