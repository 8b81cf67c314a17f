# scripts/init_db.py
import asyncio
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from customer_registry.config import get_database_url
from customer_registry.db import build_engine, create_db_and_tables


async def create_tables():
    engine = build_engine(get_database_url())
    await create_db_and_tables(engine)
    await engine.dispose()
    print("✅ All missing tables created.")

if __name__ == "__main__":
    asyncio.run(create_tables())
