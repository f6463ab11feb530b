# app/services/accounts.py
"""
Account operations: register, authenticate, list.

Each operation is one read-then-write (or read-only) pass over the users
table. Driver errors are re-raised as ``StorageFailure``.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.context import AppContext
from app.db import users as users_repo
from app.errors import DuplicateUsername, InvalidCredentials, NotFound, StorageFailure
from app.models.users import AccountRecord, AccountSummary

logger = logging.getLogger(__name__)


def _username_taken(ctx: AppContext, username: Optional[str]) -> bool:
    if username is None:
        return False
    with ctx.engine.connect() as conn:
        return users_repo.find_by_username(conn, username) is not None


def register(
    ctx: AppContext,
    username: Optional[str],
    password: Optional[str],
    email: Optional[str] = None,
) -> AccountSummary:
    try:
        with ctx.engine.begin() as conn:
            if users_repo.find_by_username(conn, username) is not None:
                logger.warning("Registration rejected, username %r taken", username)
                raise DuplicateUsername()

            row = users_repo.create_user(conn, username, password, email)
    except IntegrityError as exc:
        # A concurrent insert won the race between the lookup and ours.
        try:
            taken = _username_taken(ctx, username)
        except SQLAlchemyError as lookup_exc:
            raise StorageFailure(detail=str(lookup_exc)) from lookup_exc
        if taken:
            logger.warning("Registration rejected, username %r taken", username)
            raise DuplicateUsername() from exc
        raise StorageFailure(detail=str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        raise StorageFailure(detail=str(exc)) from exc

    logger.info("Registered user %r (id=%s)", row["username"], row["id"])
    return AccountSummary.model_validate(dict(row))


def authenticate(
    ctx: AppContext,
    username: Optional[str],
    password: Optional[str],
) -> AccountSummary:
    if username is None:
        # A lookup needs a value; an absent one is not the same as "no such user".
        raise StorageFailure(detail="WHERE parameter 'username' has no value")

    try:
        with ctx.engine.connect() as conn:
            row = users_repo.find_by_username(conn, username)
    except SQLAlchemyError as exc:
        raise StorageFailure(detail=str(exc)) from exc

    if row is None:
        raise NotFound()

    # Plain comparison; passwords are stored as given.
    if row["password"] != password:
        logger.warning("Login failed for %r: incorrect password", username)
        raise InvalidCredentials()

    logger.info("User %r logged in", username)
    return AccountSummary.model_validate(dict(row))


def list_accounts(ctx: AppContext) -> List[AccountRecord]:
    try:
        with ctx.engine.connect() as conn:
            rows = users_repo.find_all(conn)
    except SQLAlchemyError as exc:
        raise StorageFailure(detail=str(exc)) from exc

    return [AccountRecord.model_validate(dict(row)) for row in rows]
