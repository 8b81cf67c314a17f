# alembic/env.py
from __future__ import annotations
import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from customer_registry.config import get_database_url
from customer_registry.models import Base

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def configure_context(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def migrate_offline(url: str) -> None:
    """Emit SQL for the customers schema without a live connection."""
    configure_context(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def migrate_connection(connection) -> None:
    configure_context(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online(url: str) -> None:
    # Same async driver the API uses; Alembic itself runs inside run_sync
    engine = create_async_engine(url, pool_pre_ping=True)
    async with engine.connect() as conn:
        await conn.run_sync(migrate_connection)
    await engine.dispose()


if context.is_offline_mode():
    migrate_offline(get_database_url())
else:
    asyncio.run(migrate_online(get_database_url()))
