"""User accounts kept in a text file: registration, login and removal."""

from __future__ import annotations

from pathlib import Path

from .models import User

MIN_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"


class UserError(Exception):
    """Base error for user account operations."""


class InvalidPasswordError(UserError):
    """The password does not meet the strength rules."""


class DuplicateUserError(UserError):
    """The username is already taken."""


class AuthenticationError(UserError):
    """The credentials were missing or did not match."""


class UnknownUserError(UserError):
    """No account has the given username."""


def validate_password(password: str) -> bool:
    """True when the password is long enough and has a digit and a special character."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    has_digit = any(c.isdecimal() for c in password)
    has_special = any(c in SPECIAL_CHARACTERS for c in password)
    return has_digit and has_special


class UserStore:
    """Accounts stored one per line as username,password,role."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def load(self) -> list[User]:
        """Read every well-formed account; a missing file holds none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        users = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                users.append(User.from_line(line))
            except ValueError:
                continue
        return users

    def save(self, users) -> None:
        """Replace the file with the given accounts."""
        self.path.write_text(
            "".join(f"{user.to_line()}\n" for user in users), encoding="utf-8"
        )

    def register(self, username: str, password: str, role: str) -> User:
        """Add a new account after checking its fields, strength and uniqueness."""
        if not username or not password or not role:
            raise UserError("Please fill all fields.")
        if not validate_password(password):
            raise InvalidPasswordError(
                "Password must be at least 8 characters long, contain at least "
                "one number, and at least one special character."
            )
        if any(user.username == username for user in self.load()):
            raise DuplicateUserError("This username already exists.")
        user = User(username, password, role)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{user.to_line()}\n")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """Return the account matching both username and password."""
        if not username or not password:
            raise AuthenticationError("Please enter both username and password.")
        for user in self.load():
            if user.username == username and user.password == password:
                return user
        raise AuthenticationError("Incorrect username or password.")

    def delete(self, username: str) -> User:
        """Remove the first account with this username and return it."""
        users = self.load()
        for user in users:
            if user.username == username:
                users.remove(user)
                self.save(users)
                return user
        raise UnknownUserError(f"No user named '{username}'.")

    def listing(self) -> str:
        """Render all accounts as a table with a total."""
        users = self.load()
        if not users:
            return "No users found in the system."
        lines = ["All Users in System:", "", "Username\tRole", "-" * 24]
        lines.extend(f"{user.username}\t{user.role}" for user in users)
        lines.extend(["", "-" * 24, f"Total Users: {len(users)}"])
        return "\n".join(lines)