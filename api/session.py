"""Game sessions: signed client tokens and a store for serialized games."""

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any
from uuid import uuid4

import redis.asyncio as redis
from itsdangerous import BadSignature, URLSafeTimedSerializer
from redis.exceptions import RedisError

from config import config

logger = logging.getLogger(__name__)

SESSION_SALT = "simplejack-session"
REDIS_KEY_PREFIX = "simplejack:session:"


class SessionSigner:
    """
    Issue and check the tokens handed to clients.

    A token wraps the raw session id; only the id is used as a store key, so
    a client can never address another session by guessing keys.
    """

    def __init__(self, secret_key: str | None = None, max_age: int | None = None) -> None:
        self._serializer = URLSafeTimedSerializer(
            secret_key or config.security.secret_key,
            salt=SESSION_SALT,
        )
        self._max_age = max_age or config.session_ttl

    def issue(self) -> tuple[str, str]:
        """Return a new ``(session_id, token)`` pair."""
        session_id = uuid4().hex
        return session_id, self._serializer.dumps(session_id)

    def verify(self, token: str) -> str | None:
        """Return the session id inside ``token``, or None if forged or expired."""
        try:
            return self._serializer.loads(token, max_age=self._max_age)
        except BadSignature:  # includes SignatureExpired
            return None


class SessionStore(ABC):
    """Keeps one JSON-compatible dict per session id for a limited time."""

    @abstractmethod
    async def load(self, session_id: str) -> dict[str, Any] | None:
        ...

    @abstractmethod
    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        ...


class InMemorySessionStore(SessionStore):
    """Process-local store used when Redis is not reachable."""

    def __init__(self, ttl: int | None = None) -> None:
        self._ttl = ttl or config.session_ttl
        self._entries: dict[str, tuple[float, dict[str, Any]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def load(self, session_id: str) -> dict[str, Any] | None:
        entry = self._entries.get(session_id)
        if entry is None:
            return None

        expires_at, data = entry
        if expires_at <= time.monotonic():
            del self._entries[session_id]
            return None
        return data

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        now = time.monotonic()
        # Sweep expired sessions on every write
        expired = [sid for sid, (expires_at, _) in self._entries.items() if expires_at <= now]
        for sid in expired:
            del self._entries[sid]
        self._entries[session_id] = (now + self._ttl, data)


class RedisSessionStore(SessionStore):
    """Redis store; entries expire through ``SETEX``."""

    def __init__(self, client: redis.Redis, ttl: int | None = None) -> None:
        self._client = client
        self._ttl = ttl or config.session_ttl

    async def load(self, session_id: str) -> dict[str, Any] | None:
        raw = await self._client.get(REDIS_KEY_PREFIX + session_id)
        return None if raw is None else json.loads(raw)

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        await self._client.setex(REDIS_KEY_PREFIX + session_id, self._ttl, json.dumps(data))


_signer: SessionSigner | None = None
_store: SessionStore | None = None


def get_session_signer() -> SessionSigner:
    """Get or create the process-wide signer."""
    global _signer
    if _signer is None:
        _signer = SessionSigner()
    return _signer


async def get_session_store() -> SessionStore:
    """Get or create the session store, preferring Redis when it answers a ping."""
    global _store
    if _store is not None:
        return _store

    client = redis.from_url(config.redis.url)
    try:
        await client.ping()
    except (RedisError, OSError) as exc:
        logger.warning("Redis unavailable (%s); keeping sessions in memory", exc)
        _store = InMemorySessionStore()
    else:
        logger.info("Using Redis session store at %s", config.redis.host)
        _store = RedisSessionStore(client)
    return _store
