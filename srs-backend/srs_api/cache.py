"""Redis-backed cache of parsed SRS responses with a no-op fallback.

Usage:
    from srs_api.cache import build_cache_from_env
    cache = await build_cache_from_env()
    await cache.set_json(srs_cache_key(4326, definition), payload)
    data = await cache.get_json(srs_cache_key(4326, definition))

Connection errors are logged and treated as cache misses so parsing keeps
working without Redis (tests, CI, local runs).
"""
from __future__ import annotations

import asyncio
import hashlib
import json
import logging
import os
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


def srs_cache_key(srid: int, definition: str) -> str:
    h = hashlib.sha1()
    h.update(str(srid).encode("ascii"))
    h.update(b"\n")
    h.update(definition.encode("utf-8", errors="surrogatepass"))
    return f"parse:{h.hexdigest()}"


class NoopCache:
    async def get_json(self, key: str) -> Optional[Any]:
        return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> bool:
        return False

    async def close(self) -> None:
        return None


class RedisCache:
    def __init__(self, client: Any, prefix: str = "srs", default_ttl: int = 3600):
        self.client = client
        self.prefix = prefix.rstrip(":")
        self.default_ttl = default_ttl

    def _k(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    async def get_json(self, key: str) -> Optional[Any]:
        try:
            raw = await self.client.get(self._k(key))
        except RedisError as e:  # pragma: no cover (network issues)
            logger.debug("Redis get failed for %s: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.debug("Dropping corrupt cache entry %s", key)
            return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> bool:
        data = json.dumps(value, separators=(",", ":"))
        try:
            await self.client.set(self._k(key), data, ex=ttl if ttl is not None else self.default_ttl)
        except RedisError as e:  # pragma: no cover
            logger.debug("Redis set failed for %s: %s", key, e)
            return False
        return True

    async def close(self) -> None:  # pragma: no cover - rarely used
        try:
            await self.client.aclose()
        except RedisError as e:
            logger.debug("Redis close failed: %s", e)


async def build_cache_from_env() -> RedisCache | NoopCache:
    """Instantiate a RedisCache if REDIS_URL is set and reachable; else a no-op.

    Env vars:
      REDIS_URL          e.g. redis://redis:6379/0
      CACHE_DISABLE=1    force disable
      CACHE_PREFIX       (optional) namespace prefix (default 'srs')
      CACHE_TTL_SECONDS  (optional) default TTL (int, default 3600)
    """
    if os.getenv("CACHE_DISABLE") == "1":
        return NoopCache()
    url = os.getenv("REDIS_URL")
    if not url:
        return NoopCache()
    try:
        client = redis.from_url(url, encoding="utf-8", decode_responses=False)
        # Short ping timeout so startup isn't delayed badly
        await asyncio.wait_for(client.ping(), timeout=0.75)
    except (RedisError, OSError, asyncio.TimeoutError) as e:  # pragma: no cover (network issues)
        logger.info("Redis unavailable (%s); proceeding without cache", e)
        return NoopCache()
    prefix = os.getenv("CACHE_PREFIX", "srs")
    ttl = int(os.getenv("CACHE_TTL_SECONDS", "3600"))
    return RedisCache(client, prefix=prefix, default_ttl=ttl)
