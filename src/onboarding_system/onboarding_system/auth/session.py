from __future__ import annotations

import hmac
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import now_timestamp
from ..core.constants import SESSION_TTL_SECONDS
from ..core.exceptions import InvalidTokenError, TokenExpiredError
from .tokens import generate_session_token, parse_session_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    identifier: str
    token: str
    issued_at: int


class SessionManager:
    """Holds the single admin session.

    A new login replaces any previous session; expiry is checked lazily on access.
    """

    def __init__(self, *, ttl_seconds: int = SESSION_TTL_SECONDS):
        self._ttl_seconds = int(ttl_seconds)
        self._lock = threading.Lock()
        self._session: Optional[Session] = None

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def start(self, identifier: str) -> Session:
        now = now_timestamp()
        token = generate_session_token(identifier, now=now)
        session = Session(identifier=identifier, token=token, issued_at=now)
        with self._lock:
            if self._session is not None:
                logger.info("Replacing active session for %r", self._session.identifier)
            self._session = session
        return session

    def end(self, token: Optional[str]) -> bool:
        """Clear the session, only when ``token`` is the active one."""
        with self._lock:
            if self._session is None or not token:
                return False
            if not hmac.compare_digest(self._session.token, token):
                return False
            logger.info("Session for %r ended", self._session.identifier)
            self._session = None
            return True

    def current(self) -> Optional[Session]:
        with self._lock:
            if self._session is not None and self._is_expired(self._session):
                logger.info("Session for %r expired", self._session.identifier)
                self._session = None
            return self._session

    def require(self, token: Optional[str]) -> Session:
        if not token:
            raise InvalidTokenError("Not logged in")
        parse_session_token(token)

        with self._lock:
            session = self._session
            if session is None or not hmac.compare_digest(session.token, token):
                raise InvalidTokenError("Session is not active")
            if self._is_expired(session):
                self._session = None
                raise TokenExpiredError("Session expired, please log in again")
            return session

    def _is_expired(self, session: Session) -> bool:
        return now_timestamp() - session.issued_at >= self._ttl_seconds
