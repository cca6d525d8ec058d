import pytest

from stockroom.models import User
from stockroom.users import (
    AuthenticationError,
    DuplicateUserError,
    InvalidPasswordError,
    UnknownUserError,
    UserError,
    UserStore,
    validate_password,
)

DIGIT = "1"
SYMBOL = "!"


def _strong(word):
    return word + DIGIT + SYMBOL


@pytest.fixture
def store(tmp_path):
    return UserStore(tmp_path / "users.txt")


@pytest.fixture
def strong_password():
    password = "password"
    return _strong(password)


def test_validate_password_accepts_strong(strong_password):
    assert validate_password(strong_password) is True


def test_validate_password_rejects_plain_word():
    assert validate_password("password") is False


def test_validate_password_rejects_short():
    password = "password"
    assert validate_password(_strong(password[:4])) is False


def test_validate_password_needs_digit_and_symbol():
    password = "password"
    assert validate_password(password + DIGIT) is False
    assert validate_password(password + SYMBOL) is False


def test_load_missing_file_is_empty(store):
    assert store.load() == []


def test_register_then_load(store, strong_password):
    user = store.register("alice", strong_password, "admin")
    assert store.load() == [user]
    assert user.role == "admin"


def test_register_empty_fields(store, strong_password):
    with pytest.raises(UserError):
        store.register("", strong_password, "admin")
    with pytest.raises(UserError):
        store.register("alice", strong_password, "")
    assert store.load() == []


def test_register_weak_password(store):
    password = "password"
    with pytest.raises(InvalidPasswordError):
        store.register("alice", password, "admin")
    assert store.load() == []


def test_register_duplicate(store, strong_password):
    store.register("alice", strong_password, "admin")
    with pytest.raises(DuplicateUserError):
        store.register("alice", strong_password, "employee")
    assert len(store.load()) == 1


def test_authenticate_success(store, strong_password):
    store.register("bob", strong_password, "manager")
    user = store.authenticate("bob", strong_password)
    assert user == User("bob", strong_password, "manager")


def test_authenticate_wrong_password(store, strong_password):
    store.register("bob", strong_password, "manager")
    with pytest.raises(AuthenticationError, match="Incorrect username or password."):
        store.authenticate("bob", strong_password + SYMBOL)


def test_authenticate_missing_fields(store):
    with pytest.raises(AuthenticationError):
        store.authenticate("bob", "")


def test_load_skips_blank_and_short_lines(store):
    store.path.write_text("\nalice,password,admin\nbroken\n  \n", encoding="utf-8")
    assert [u.username for u in store.load()] == ["alice"]


def test_save_round_trip(store):
    password = "password"
    users = [User("a", password, "admin"), User("b", password, "employee")]
    store.save(users)
    assert store.load() == users


def test_delete_removes_user(store, strong_password):
    store.register("alice", strong_password, "admin")
    store.register("bob", strong_password, "employee")
    removed = store.delete("alice")
    assert removed.username == "alice"
    assert [u.username for u in store.load()] == ["bob"]


def test_delete_unknown(store):
    with pytest.raises(UnknownUserError):
        store.delete("nobody")


def test_listing_empty(store):
    assert store.listing() == "No users found in the system."


def test_listing_contents(store, strong_password):
    store.register("alice", strong_password, "admin")
    store.register("bob", strong_password, "employee")
    text = store.listing()
    assert text.startswith("All Users in System:")
    assert "alice\tadmin" in text
    assert "bob\temployee" in text
    assert text.endswith("Total Users: 2")
    assert strong_password not in text