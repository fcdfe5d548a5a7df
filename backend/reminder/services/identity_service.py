"""Maps verified token claims back to a stored user id."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reminder.repositories.user_repository import UserRepository

LOGGER = logging.getLogger(__name__)


class IdentityResolver:
    """Looks the token's username up again on every request.

    Tokens carry only the username, so an account removed after a token was
    issued resolves to no identity. ``None`` is returned for every failure
    (missing or non-string claim, no matching row, store error); owner-scoped
    lookups with no identity simply find nothing.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def resolve_user_id(self, db: Session, claims: Mapping[str, Any]) -> Optional[int]:
        username = claims.get("username")
        if not isinstance(username, str) or not username:
            return None
        LOGGER.info("Authenticated user: %s", username)
        try:
            return self.user_repository.get_id_by_username(db, username)
        except SQLAlchemyError as exc:
            LOGGER.warning("Identity lookup for %s failed: %s", username, exc)
            return None
