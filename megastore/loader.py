"""Loading products from comma-separated files."""

from __future__ import annotations

import csv
import os
import re

from megastore.product import Product

__all__ = ["ProductLoadError", "load_products_csv", "read_products_csv"]

_U32_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")
_COLUMNS = ("id", "nome", "categoria", "marca")


class ProductLoadError(ValueError):
    """Raised when a product file cannot be decoded or a record is malformed."""


def _parse_u32(field: str) -> int | None:
    if _UNSIGNED.fullmatch(field) is None:
        return None
    value = int(field)
    return value if value <= _U32_MAX else None


def load_products_csv(path: str | os.PathLike[str]) -> list[Product]:
    """Read ``id,name,category,brand`` lines, skipping lines with fewer than four fields.

    No header is expected and no quoting is understood; an id that is not an
    unsigned 32-bit integer becomes 0.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ProductLoadError(f"{path}: invalid UTF-8: {exc}") from exc

    products = []
    for line in text.split("\n"):
        fields = line.removesuffix("\r").split(",")
        if len(fields) < 4:
            continue
        product_id = _parse_u32(fields[0])
        products.append(
            Product(
                id=product_id if product_id is not None else 0,
                name=fields[1],
                category=fields[2],
                brand=fields[3],
            )
        )
    return products


def read_products_csv(path: str | os.PathLike[str]) -> list[Product]:
    """Read a CSV file with a header naming the ``id``, ``nome``, ``categoria`` and ``marca`` columns."""
    try:
        with open(path, encoding="utf-8-sig", newline="") as handle:
            rows = [row for row in csv.reader(handle) if row]
    except UnicodeDecodeError as exc:
        raise ProductLoadError(f"{path}: invalid UTF-8: {exc}") from exc
    except csv.Error as exc:
        raise ProductLoadError(f"{path}: {exc}") from exc

    if not rows:
        return []
    header, records = rows[0], rows[1:]
    positions: dict[str, int] = {}
    for position, name in enumerate(header):
        positions.setdefault(name, position)

    products = []
    for number, record in enumerate(records, start=2):
        if len(record) != len(header):
            raise ProductLoadError(
                f"record {number}: found {len(record)} fields, "
                f"but the header has {len(header)} fields"
            )
        missing = [column for column in _COLUMNS if column not in positions]
        if missing:
            raise ProductLoadError(f"record {number}: missing field `{missing[0]}`")
        raw_id = record[positions["id"]]
        product_id = _parse_u32(raw_id)
        if product_id is None:
            raise ProductLoadError(f"record {number}: invalid id {raw_id!r}")
        products.append(
            Product(
                id=product_id,
                name=record[positions["nome"]],
                category=record[positions["categoria"]],
                brand=record[positions["marca"]],
            )
        )
    return products