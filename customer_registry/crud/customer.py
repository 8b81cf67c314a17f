from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from customer_registry.models.customer import Customer

log = logging.getLogger(__name__)


class CustomerCpfConflict(Exception):
    """Another customer already holds this cpf."""


async def get_customers(db: AsyncSession) -> List[Customer]:
    result = await db.execute(select(Customer).order_by(Customer.id))
    return list(result.scalars().all())


async def get_customers_with_addresses(db: AsyncSession) -> List[Customer]:
    result = await db.execute(
        select(Customer)
        .options(selectinload(Customer.addresses))
        .order_by(Customer.id)
    )
    return list(result.scalars().all())


async def get_customer(db: AsyncSession, customer_id: int) -> Optional[Customer]:
    return await db.get(Customer, customer_id)


async def get_customer_with_addresses(db: AsyncSession, customer_id: int) -> Optional[Customer]:
    result = await db.execute(
        select(Customer)
        .where(Customer.id == customer_id)
        .options(selectinload(Customer.addresses))
    )
    return result.scalar_one_or_none()


async def get_customer_by_cpf(db: AsyncSession, cpf: str) -> Optional[Customer]:
    result = await db.execute(select(Customer).where(Customer.cpf == cpf))
    return result.scalars().first()


def is_cpf_unique_violation(exc: IntegrityError) -> bool:
    # PostgreSQL names the constraint; SQLite reports "UNIQUE constraint failed: customers.cpf"
    message = str(exc.orig).lower()
    return "uq_customers_cpf" in message or ("unique" in message and "customers.cpf" in message)


async def save_changes(db: AsyncSession) -> None:
    """Commit pending changes, translating a duplicate cpf into CustomerCpfConflict"""
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        if is_cpf_unique_violation(exc):
            raise CustomerCpfConflict() from exc
        raise


async def add_customer(db: AsyncSession, customer: Customer) -> Customer:
    db.add(customer)
    await save_changes(db)
    log.info("customer created: id=%s", customer.id)
    return customer


async def update_customer(db: AsyncSession, customer: Customer, action: str = "updated") -> Customer:
    await save_changes(db)
    log.info("customer %s: id=%s", action, customer.id)
    return customer


async def remove_customer(db: AsyncSession, customer: Customer) -> None:
    customer_id = customer.id
    await db.delete(customer)
    await save_changes(db)
    log.info("customer deleted: id=%s", customer_id)
