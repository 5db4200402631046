"""
Revocation registries

The in-memory registry lives for the process; the Redis registry is shared
between processes and lets entries expire with the token lifetime.
"""

import hashlib
import logging
import threading
from typing import Set

from redis.asyncio import Redis

from account_service.app.services.revocation_registry import RevocationRegistry

logger = logging.getLogger(__name__)


class InMemoryRevocationRegistry(RevocationRegistry):
    def __init__(self):
        self._tokens: Set[str] = set()
        self._lock = threading.Lock()

    async def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.add(token)

    async def is_revoked(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


class RedisRevocationRegistry(RevocationRegistry):
    """
    Stores ``revoked:<sha256(token)>`` keys with a TTL matching the token
    lifetime, after which the token is rejected by its own expiry anyway.
    """

    KEY_PREFIX = "revoked:"

    def __init__(self, redis: Redis, ttl_seconds: int):
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, url: str, ttl_seconds: int) -> "RedisRevocationRegistry":
        logger.debug(f"New Redis revocation registry at {url}")
        return cls(Redis.from_url(url), ttl_seconds)

    def _key(self, token: str) -> str:
        return self.KEY_PREFIX + hashlib.sha256(token.encode()).hexdigest()

    async def revoke(self, token: str) -> None:
        await self.redis.set(self._key(token), 1, ex=self.ttl_seconds)

    async def is_revoked(self, token: str) -> bool:
        return await self.redis.exists(self._key(token)) > 0
