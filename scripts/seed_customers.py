"""
Seed sample customers and their addresses.

Run once after creating the tables.

Usage: python scripts/seed_customers.py
"""

import asyncio
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sqlalchemy.future import select
from customer_registry.config import get_database_url
from customer_registry.db import build_engine, build_session_factory, create_db_and_tables
from customer_registry.models import Address, Customer

SAMPLE_CUSTOMERS = [
    ("Linus Torvalds", "73473943096", [("Verão do Cometa", "Elvira"), ("Borba Gato", "Perobia")]),
    ("Bill Gates", "95395994076", [("Farinha Seca", "Frunte")]),
    ("Ada Lovelace", "36151250021", []),
]


async def seed_customers():
    """Seed sample customers unless the table already has rows"""
    engine = build_engine(get_database_url())
    await create_db_and_tables(engine)
    session_factory = build_session_factory(engine)

    async with session_factory() as session:
        print("🌱 Seeding customers...\n")

        result = await session.execute(select(Customer))
        if result.scalars().first():
            print("⚠️  Customers already exist. Skipping seed.")
            await engine.dispose()
            return

        customers = [
            Customer(
                name=name,
                cpf=cpf,
                addresses=[Address(street=street, city=city) for street, city in addresses],
            )
            for name, cpf, addresses in SAMPLE_CUSTOMERS
        ]
        session.add_all(customers)
        await session.commit()
        print(f"✅ Created {len(customers)} customers")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_customers())
