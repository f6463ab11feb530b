import pytest

from app.context import AppContext
from app.db import users as users_repo
from app.errors import DuplicateUsername, InvalidCredentials, NotFound, StorageFailure
from app.services import accounts


def test_register_and_authenticate(ctx):
    created = accounts.register(ctx, "alice", "pw1", "alice@example.com")
    found = accounts.authenticate(ctx, "alice", "pw1")

    assert created == found
    assert created.username == "alice"
    assert created.email == "alice@example.com"


def test_register_duplicate(ctx):
    accounts.register(ctx, "alice", "pw1")

    with pytest.raises(DuplicateUsername):
        accounts.register(ctx, "alice", "pw2")


def test_register_duplicate_caught_by_unique_constraint(ctx, monkeypatch):
    accounts.register(ctx, "alice", "pw1")
    # The first lookup misses the row, as if another request inserted it
    # between our lookup and our write.
    original = users_repo.find_by_username
    calls = []

    def stale_lookup(conn, username):
        calls.append(username)
        return None if len(calls) == 1 else original(conn, username)

    monkeypatch.setattr(users_repo, "find_by_username", stale_lookup)

    with pytest.raises(DuplicateUsername):
        accounts.register(ctx, "alice", "pw2")

    assert len(accounts.list_accounts(ctx)) == 1


def test_authenticate_unknown_user(ctx):
    with pytest.raises(NotFound):
        accounts.authenticate(ctx, "ghost", "pw")


def test_authenticate_is_exact_match(ctx):
    accounts.register(ctx, "alice", "pw1")

    with pytest.raises(InvalidCredentials):
        accounts.authenticate(ctx, "alice", "pw1 ")


def test_list_accounts_includes_password_and_timestamps(ctx):
    accounts.register(ctx, "alice", "pw1")
    accounts.register(ctx, "bob", "pw2", "bob@example.com")

    records = accounts.list_accounts(ctx)

    assert [(r.id, r.username, r.password, r.email) for r in records] == [
        (1, "alice", "pw1", None),
        (2, "bob", "pw2", "bob@example.com"),
    ]
    assert all(r.created_at is not None and r.updated_at is not None for r in records)


def test_storage_errors_are_wrapped(settings):
    # No schema created: every query hits a missing table.
    ctx = AppContext.from_settings(settings)

    with pytest.raises(StorageFailure) as excinfo:
        accounts.list_accounts(ctx)
    assert "no such table" in excinfo.value.detail

    with pytest.raises(StorageFailure):
        accounts.authenticate(ctx, "alice", "pw")

    with pytest.raises(StorageFailure):
        accounts.register(ctx, "alice", "pw")


def test_register_missing_username_is_storage_failure(ctx):
    with pytest.raises(StorageFailure) as excinfo:
        accounts.register(ctx, None, "pw")

    assert "NOT NULL" in excinfo.value.detail


def test_authenticate_without_username_is_storage_failure(ctx):
    accounts.register(ctx, "alice", "pw1")

    with pytest.raises(StorageFailure) as excinfo:
        accounts.authenticate(ctx, None, "pw1")

    assert "username" in excinfo.value.detail
