"""Command-line front end: log in, then work with accounts or inventory by role."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Sequence

from .models import User
from .stocks import (
    STOCK_HEADERS,
    StockError,
    StockStore,
    dashboard_summary,
    search_stocks,
    stock_rows,
)
from .users import UserError, UserStore

USERS_FILE = "users.txt"
STOCKS_FILE = "stocks.txt"


class Role(Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class CommandError(Exception):
    """A command could not be carried out."""


@dataclass
class _Context:
    args: argparse.Namespace
    user: User
    users: UserStore
    stocks: StockStore


def _format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    columns = list(zip(headers, *rows))
    widths = [max(len(cell) for cell in column) for column in columns]

    def render(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [render(headers), render(["-" * width for width in widths])]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)


def _confirm(question: str, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    try:
        answer = input(f"{question} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def _list_users(ctx: _Context) -> None:
    rows = [(user.username, user.role) for user in ctx.users.load()]
    print(_format_table(("Username", "Role"), rows))


def _add_user(ctx: _Context) -> None:
    args = ctx.args
    ctx.users.register(args.new_username, args.new_password, args.role)
    print("User successfully registered!")


def _delete_user(ctx: _Context) -> None:
    target = ctx.args.target
    question = f"Are you sure you want to delete user '{target}'?"
    if not _confirm(question, ctx.args.yes):
        print("Deletion cancelled.")
        return
    ctx.users.delete(target)
    print(f"User '{target}' has been deleted.")


def _view_stock(ctx: _Context) -> None:
    print(_format_table(STOCK_HEADERS, stock_rows(ctx.stocks.load())))


def _search_stock(ctx: _Context) -> None:
    found = search_stocks(ctx.stocks.load(), ctx.args.text)
    if not found:
        print("No stocks found matching your search criteria.")
    print(_format_table(STOCK_HEADERS, stock_rows(found)))


def _add_stock(ctx: _Context) -> None:
    args = ctx.args
    ctx.stocks.add_item(args.name, args.quantity, args.price, args.category, args.supplier)
    print("Item successfully added!")


def _delete_stock(ctx: _Context) -> None:
    if not _confirm("Are you sure you want to delete this item?", ctx.args.yes):
        print("Deletion cancelled.")
        return
    ctx.stocks.delete_item(ctx.args.name)
    print("Item has been successfully deleted.")


def _report(ctx: _Context) -> None:
    print(dashboard_summary(ctx.user.username, ctx.stocks.load()))


_Handler = Callable[[_Context], None]

_COMMANDS: dict[tuple[str, str], tuple[frozenset[Role], _Handler]] = {
    ("users", "list"): (frozenset({Role.ADMIN}), _list_users),
    ("users", "add"): (frozenset({Role.ADMIN}), _add_user),
    ("users", "delete"): (frozenset({Role.ADMIN}), _delete_user),
    ("stock", "view"): (frozenset({Role.MANAGER, Role.EMPLOYEE}), _view_stock),
    ("stock", "search"): (frozenset({Role.EMPLOYEE}), _search_stock),
    ("stock", "add"): (frozenset({Role.MANAGER}), _add_stock),
    ("stock", "delete"): (frozenset({Role.MANAGER}), _delete_stock),
    ("report", ""): (frozenset({Role.MANAGER}), _report),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stockroom", description="Inventory and user management."
    )
    parser.add_argument(
        "--data-dir", type=Path, default=Path("."),
        help="directory holding users.txt and stocks.txt",
    )
    parser.add_argument("-u", "--username", default="", help="login name")
    parser.add_argument("-p", "--password", default="", help="login password")
    commands = parser.add_subparsers(dest="command", required=True)

    users = commands.add_parser("users", help="manage accounts (admin)")
    user_actions = users.add_subparsers(dest="action", required=True)
    user_actions.add_parser("list", help="list all accounts")
    add_user = user_actions.add_parser("add", help="create an account")
    add_user.add_argument("new_username")
    add_user.add_argument("new_password")
    add_user.add_argument("role")
    delete_user = user_actions.add_parser("delete", help="remove an account")
    delete_user.add_argument("target")
    delete_user.add_argument("-y", "--yes", action="store_true", help="do not ask")

    stock = commands.add_parser("stock", help="work with inventory items")
    stock_actions = stock.add_subparsers(dest="action", required=True)
    stock_actions.add_parser("view", help="show every item")
    search = stock_actions.add_parser("search", help="find items by name")
    search.add_argument("text", nargs="?", default="")
    add_item = stock_actions.add_parser("add", help="add an item (manager)")
    add_item.add_argument("name")
    add_item.add_argument("quantity")
    add_item.add_argument("price")
    add_item.add_argument("category")
    add_item.add_argument("supplier")
    delete_item = stock_actions.add_parser("delete", help="remove an item (manager)")
    delete_item.add_argument("name")
    delete_item.add_argument("-y", "--yes", action="store_true", help="do not ask")

    commands.add_parser("report", help="show the inventory summary (manager)")
    return parser


def _role_of(user: User) -> Role:
    try:
        return Role(user.role.lower())
    except ValueError:
        raise CommandError(
            f"Your role ({user.role}) does not have a specific interface."
        ) from None


def _run(args: argparse.Namespace) -> None:
    users = UserStore(args.data_dir / USERS_FILE)
    stocks = StockStore(args.data_dir / STOCKS_FILE)
    user = users.authenticate(args.username, args.password)
    role = _role_of(user)
    key = (args.command, getattr(args, "action", None) or "")
    allowed, handler = _COMMANDS[key]
    if role not in allowed:
        name = " ".join(part for part in key if part)
        raise CommandError(f"Role '{role.value}' may not run '{name}'.")
    handler(_Context(args, user, users, stocks))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, log in and run the chosen command."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (UserError, StockError, CommandError, OSError) as error:
        print(f"stockroom: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())