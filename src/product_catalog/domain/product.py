"""Product entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """A product record exchanged between the service and its repository.

    Conventions:
      - `id` is unique; it is `None` until storage assigns one.
      - `price` is a plain float; no rounding rule is applied anywhere.
    """

    name: str
    description: str
    price: float
    id: int | None = None  # pylint: disable=invalid-name
