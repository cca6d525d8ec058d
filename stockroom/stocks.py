"""Inventory kept in a text file: adding, removing, searching and summarising items."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .models import Stock

STOCK_HEADERS = ("Name", "Quantity", "Price", "Category", "Supplier", "Low stock")


class StockError(Exception):
    """Base error for inventory operations."""


class InvalidItemError(StockError):
    """An item's fields are missing or out of range."""


class DuplicateItemError(StockError):
    """An item with the same name and supplier already exists."""


def _parse_quantity(text: str) -> int:
    if "_" in text:
        raise InvalidItemError("Quantity must be positive.")
    try:
        quantity = int(text)
    except ValueError:
        raise InvalidItemError("Quantity must be positive.") from None
    if quantity < 0:
        raise InvalidItemError("Quantity must be positive.")
    return quantity


def _parse_price(text: str) -> float:
    if "_" in text:
        raise InvalidItemError("Price must be positive.")
    try:
        price = float(text)
    except ValueError:
        raise InvalidItemError("Price must be positive.") from None
    if price != price or price < 0:
        raise InvalidItemError("Price must be positive.")
    return price


class StockStore:
    """Items stored one per line as name,quantity,price,category,supplier."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def load(self) -> list[Stock]:
        """Read every well-formed item; a missing file holds none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        stocks = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                stocks.append(Stock.from_line(line))
            except ValueError:
                continue
        return stocks

    def save(self, stocks: Iterable[Stock]) -> None:
        """Replace the file with the given items."""
        self.path.write_text(
            "".join(f"{stock.to_line()}\n" for stock in stocks), encoding="utf-8"
        )

    def add_item(self, name, quantity, price, category, supplier) -> Stock:
        """Validate and append a new item, refusing a repeated name and supplier."""
        fields = [str(value).strip() for value in (name, quantity, price, category, supplier)]
        if not all(fields):
            raise InvalidItemError("Please fill all fields.")
        name_text, quantity_text, price_text, category_text, supplier_text = fields
        stock = Stock(
            name_text,
            _parse_quantity(quantity_text),
            _parse_price(price_text),
            category_text,
            supplier_text,
        )
        if any(
            existing.name == stock.name and existing.supplier == stock.supplier
            for existing in self.load()
        ):
            raise DuplicateItemError("This item from this supplier already exists.")
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{stock.to_line()}\n")
        return stock

    def delete_item(self, name: str) -> Stock:
        """Remove the first item with this name and return it."""
        stocks = self.load()
        for stock in stocks:
            if stock.name == name:
                stocks.remove(stock)
                self.save(stocks)
                return stock
        raise StockError(f"No item named '{name}'.")


def search_stocks(stocks: Iterable[Stock], text: str) -> list[Stock]:
    """Items whose name contains the text, ignoring case; blank text matches all."""
    needle = text.strip().casefold()
    return [stock for stock in stocks if not needle or needle in stock.name.casefold()]


def low_stock_count(stocks: Iterable[Stock]) -> int:
    """How many items are below the low-stock threshold."""
    return sum(1 for stock in stocks if stock.is_low())


def stock_rows(stocks: Iterable[Stock]) -> list[tuple[str, ...]]:
    """Table rows matching STOCK_HEADERS, one per item."""
    return [
        (
            stock.name,
            str(stock.quantity),
            f"${stock.price:.2f}",
            stock.category,
            stock.supplier,
            "Yes" if stock.is_low() else "No",
        )
        for stock in stocks
    ]


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for a user's view of the inventory."""

    user_name: str
    total_items: int
    low_stock_alerts: int

    @property
    def welcome(self) -> str:
        return f"Welcome, {self.user_name}!"

    def lines(self) -> tuple[str, str, str]:
        return (
            self.welcome,
            f"Total Items: {self.total_items}",
            f"Low Stock Alerts: {self.low_stock_alerts}",
        )

    def __str__(self) -> str:
        return "\n".join(self.lines())


def dashboard_summary(user_name: str, stocks: Iterable[Stock]) -> DashboardSummary:
    """Count all items and the low-stock ones for the given user."""
    items = list(stocks)
    return DashboardSummary(user_name, len(items), low_stock_count(items))