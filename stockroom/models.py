"""Inventory items and user accounts, with their one-line text records."""

from __future__ import annotations

from dataclasses import dataclass

LOW_STOCK_THRESHOLD = 5
FIELD_SEPARATOR = ","


def _to_int(text: str) -> int:
    """Parse an integer field, yielding 0 when it does not parse."""
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    """Parse a decimal field, yielding 0.0 when it does not parse."""
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _split_record(line: str, minimum: int) -> list[str]:
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) < minimum:
        raise ValueError(
            f"record needs at least {minimum} fields, got {len(parts)}: {line!r}"
        )
    return parts


@dataclass
class Stock:
    """One inventory item."""

    name: str = ""
    quantity: int = 0
    price: float = 0.0
    category: str = ""
    supplier: str = ""

    def to_line(self) -> str:
        """Render the item as a comma-separated record, without a newline."""
        return FIELD_SEPARATOR.join(
            (
                self.name,
                str(self.quantity),
                f"{self.price:g}",
                self.category,
                self.supplier,
            )
        )

    @classmethod
    def from_line(cls, line: str) -> "Stock":
        """Parse a record; raise ValueError when it has fewer than five fields."""
        name, quantity, price, category, supplier = _split_record(line, 5)[:5]
        return cls(name, _to_int(quantity), _to_float(price), category, supplier)

    def is_low(self) -> bool:
        """True when the quantity is under the low-stock threshold."""
        return self.quantity < LOW_STOCK_THRESHOLD


@dataclass
class User:
    """A user account with its role."""

    username: str
    password: str
    role: str

    def to_line(self) -> str:
        """Render the account as a comma-separated record, without a newline."""
        return FIELD_SEPARATOR.join((self.username, self.password, self.role))

    @classmethod
    def from_line(cls, line: str) -> "User":
        """Parse a record; raise ValueError when it has fewer than three fields."""
        username, password, role = _split_record(line, 3)[:3]
        return cls(username, password, role)