"""Request-scoped database sessions for FastAPI.

Each engine is created on first use and kept for the life of the process.
Sessions never commit on their own; application services wrap their work
in ``async with session.begin()``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import EngineRole, create_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

_probe = DefaultConnectionProbe()


@dataclass
class _Pool:
    engine: AsyncEngine
    sessions: async_sessionmaker[AsyncSession]


_pools: dict[EngineRole, _Pool] = {}
_pools_lock = threading.Lock()


def _pool(role: EngineRole) -> _Pool:
    pool = _pools.get(role)
    if pool is not None:
        return pool

    with _pools_lock:
        if role not in _pools:
            settings = get_database_settings()
            engine = create_engine(role, settings)
            _pools[role] = _Pool(
                engine=engine,
                sessions=async_sessionmaker(
                    engine, expire_on_commit=False, class_=AsyncSession
                ),
            )
            _probe.engine_created(
                kind=role.value,
                host=settings.host,
                database=settings.database,
                pool_size=settings.pool_max_connections,
            )
        return _pools[role]


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Session for catalog, order, coupon, inventory and message writes.

    Every repository in one request shares this session, so an order and
    its coupon redemption commit together.
    """
    async with _pool(EngineRole.WRITE).sessions() as session:
        yield session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """Session for dashboard and export queries."""
    async with _pool(EngineRole.READ).sessions() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose every engine created so far. Called on shutdown."""
    with _pools_lock:
        pools = list(_pools.items())
        _pools.clear()

    for role, pool in pools:
        await pool.engine.dispose()
        _probe.pool_closed(kind=role.value)
