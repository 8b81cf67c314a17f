# tests/test_crud.py
import pytest
from sqlalchemy.exc import IntegrityError

from customer_registry.crud import customer as customer_store
from customer_registry.crud.customer import CustomerCpfConflict
from customer_registry.models import Address, Customer


async def test_add_and_lookup(session_factory):
    async with session_factory() as db:
        created = await customer_store.add_customer(db, Customer(name="Ada", cpf="36151250021"))
        assert created.id is not None

    async with session_factory() as db:
        by_id = await customer_store.get_customer(db, created.id)
        by_cpf = await customer_store.get_customer_by_cpf(db, "36151250021")
        assert by_id.id == by_cpf.id == created.id
        assert await customer_store.get_customer_by_cpf(db, "00000000000") is None


async def test_duplicate_cpf_raises_conflict(session_factory):
    async with session_factory() as db:
        await customer_store.add_customer(db, Customer(name="Ada", cpf="36151250021"))

    async with session_factory() as db:
        with pytest.raises(CustomerCpfConflict):
            await customer_store.add_customer(db, Customer(name="Other Ada", cpf="36151250021"))

    async with session_factory() as db:
        assert len(await customer_store.get_customers(db)) == 1


async def test_with_addresses_loads_children_in_order(session_factory):
    async with session_factory() as db:
        created = await customer_store.add_customer(
            db,
            Customer(
                name="Bill",
                cpf="95395994076",
                addresses=[Address(street="A", city="X"), Address(street="B", city="Y")],
            ),
        )

    async with session_factory() as db:
        customer = await customer_store.get_customer_with_addresses(db, created.id)
        assert [a.street for a in customer.addresses] == ["A", "B"]

        customers = await customer_store.get_customers_with_addresses(db)
        assert [len(c.addresses) for c in customers] == [2]


async def test_remove_customer(session_factory):
    async with session_factory() as db:
        created = await customer_store.add_customer(db, Customer(name="Ada", cpf="36151250021"))

    async with session_factory() as db:
        customer = await customer_store.get_customer(db, created.id)
        await customer_store.remove_customer(db, customer)

    async with session_factory() as db:
        assert await customer_store.get_customer(db, created.id) is None


async def test_missing_cpf_is_not_reported_as_conflict(session_factory):
    async with session_factory() as db:
        with pytest.raises(IntegrityError) as info:
            await customer_store.add_customer(db, Customer(name="Ada", cpf=None))
        assert not isinstance(info.value, CustomerCpfConflict)
