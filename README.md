# stockroom

A small inventory keeper for a shop or store room, run from the command line.
People sign in with a username and a password. What they may do depends on
their role (matched without regard to case):

| Command                | admin | manager | employee |
|------------------------|:-----:|:-------:|:--------:|
| `users list`           |  yes  |         |          |
| `users add`            |  yes  |         |          |
| `users delete`         |  yes  |         |          |
| `stock view`           |       |   yes   |   yes    |
| `stock search`         |       |         |   yes    |
| `stock add`            |       |   yes   |          |
| `stock delete`         |       |   yes   |          |
| `report`               |       |   yes   |          |

An account with any other role can be stored, but signing in with it is
refused with a message that the role has no interface.

Everything is kept in two plain text files, one record per line, with the
fields separated by commas:

- `users.txt`: `username,password,role`
- `stocks.txt`: `name,quantity,price,category,supplier`

Blank lines and lines with too few fields are skipped when the files are read.
A missing file counts as empty. An item counts as *low stock* when fewer than
5 are left.

## Installing

```
pip install .
```

## Running

Every run signs in and carries out one command:

```
stockroom [--data-dir DIR] -u USERNAME -p PASSWORD COMMAND ...
```

`--data-dir` is the directory holding `users.txt` and `stocks.txt`; it
defaults to the current directory.

Commands:

```
stockroom -u USERNAME -p PASSWORD users list
stockroom -u USERNAME -p PASSWORD users add NEW_USERNAME NEW_PASSWORD ROLE
stockroom -u USERNAME -p PASSWORD users delete TARGET [-y]

stockroom -u USERNAME -p PASSWORD stock view
stockroom -u USERNAME -p PASSWORD stock search [TEXT]
stockroom -u USERNAME -p PASSWORD stock add NAME QUANTITY PRICE CATEGORY SUPPLIER
stockroom -u USERNAME -p PASSWORD stock delete NAME [-y]

stockroom -u USERNAME -p PASSWORD report
```

- `users list` prints a table of usernames and roles.
- `users add` creates an account; the new password must be at least 8
  characters long and contain a digit and a special character, and the
  username must not be taken.
- `users delete` and `stock delete` ask for confirmation (`y` or `yes`)
  unless `-y` is given. `stock delete` removes the first item with that name.
- `stock view` prints every item as a table: name, quantity, price with a
  dollar sign and two decimals, category, supplier, and a Yes/No low-stock
  column.
- `stock search` shows items whose name contains the text, ignoring case; with
  no text it shows them all.
- `stock add` refuses empty fields, a quantity that is not a whole number of
  zero or more, a price that is not a number of zero or more, and an item
  already listed from the same supplier.
- `report` prints a welcome line, the total number of items and the number of
  low-stock items.

On failure (wrong credentials, a refused command, a bad field, an unknown name,
a file error) the message is printed to standard error as `stockroom: ...` and
the exit status is 1.

Since every command needs a signed-in admin to create accounts, the first
account has to be written into `users.txt` by hand or created from Python with
`UserStore.register`.

## Using it from Python

Records are the dataclasses `Stock` and `User` in `stockroom.models`, each with
`to_line()` and `from_line(line)`; `Stock.is_low()` tells whether the quantity
is under 5.

User accounts live in a `UserStore` (`stockroom.users`):

```python
from stockroom.users import UserStore, validate_password

users = UserStore("users.txt")
validate_password(candidate)            # True or False
users.register("alice", password, "admin")
user = users.authenticate("alice", password)
print(users.listing())
users.delete("alice")
```

`register` raises `UserError` for an empty field, `InvalidPasswordError` for a
password that breaks the rules and `DuplicateUserError` for a username that is
already taken. `authenticate` raises `AuthenticationError` when a field is
empty or the username and password do not match, and `delete` raises
`UnknownUserError` for a name that is not there. All of these derive from
`UserError`. `load()` and `save(users)` read and replace the whole file.

Stock lives in a `StockStore` (`stockroom.stocks`):

```python
from stockroom.stocks import (
    StockStore, search_stocks, low_stock_count, stock_rows, dashboard_summary,
)

store = StockStore("stocks.txt")
store.add_item("Stapler", 3, 4.5, "Office", "Acme Supplies")
items = store.load()

matches = search_stocks(items, "stap")
print(low_stock_count(items))
print(stock_rows(items))
print(dashboard_summary("alice", items))
store.delete_item("Stapler")
```

`add_item` raises `InvalidItemError` for an empty field or a quantity or price
that is negative or not a number, and `DuplicateItemError` when the same item
from the same supplier is already listed; `delete_item` raises `StockError`
for a name that is not there. Both other errors derive from `StockError`.
`dashboard_summary` returns a `DashboardSummary` whose text is the three report
lines.

## What it does not do

- There is no graphical interface and no interactive session: each run is one
  command.
- Passwords are stored as plain text in `users.txt`, not hashed.
- Nothing guards against two runs writing the same file at once.

## Tests

```
pip install .[test]
pytest
```