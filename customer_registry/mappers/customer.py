"""
Explicit mappings between Customer entities and the customer DTO shapes.

Functions named ``to_*`` read an entity and build a DTO. ``from_*`` build a
new, transient entity. ``apply_*`` copy DTO fields onto an existing entity
and return it; they never touch ``id``, and only the with-addresses variant
touches the address collection.
"""
from typing import Iterable, List

from customer_registry.models.customer import Customer
from customer_registry.schemas.customer import (
    CustomerDto,
    CustomerForCreationDto,
    CustomerForPatchDto,
    CustomerForUpdateDto,
    CustomerWithAddressesDto,
    CustomerWithAddressesForCreationDto,
    CustomerWithAddressesForUpdateDto,
)
from customer_registry.mappers import address as address_mapper


def to_dto(customer: Customer) -> CustomerDto:
    return CustomerDto(id=customer.id, name=customer.name, cpf=customer.cpf)


def to_dtos(customers: Iterable[Customer]) -> List[CustomerDto]:
    return [to_dto(c) for c in customers]


def from_dto(dto: CustomerDto) -> Customer:
    return Customer(id=dto.id, name=dto.name, cpf=dto.cpf)


def from_creation_dto(dto: CustomerForCreationDto) -> Customer:
    return Customer(name=dto.name, cpf=dto.cpf)


def apply_update_dto(dto: CustomerForUpdateDto, customer: Customer) -> Customer:
    customer.name = dto.name
    customer.cpf = dto.cpf
    return customer


def to_patch_dto(customer: Customer) -> CustomerForPatchDto:
    # model_construct: the stored row is the source of truth, no re-validation
    return CustomerForPatchDto.model_construct(name=customer.name, cpf=customer.cpf)


def apply_patch_dto(dto: CustomerForPatchDto, customer: Customer) -> Customer:
    customer.name = dto.name
    customer.cpf = dto.cpf
    return customer


# ---------- With addresses ----------

def to_with_addresses_dto(customer: Customer) -> CustomerWithAddressesDto:
    """Requires ``customer.addresses`` to be loaded already."""
    return CustomerWithAddressesDto(
        id=customer.id,
        name=customer.name,
        cpf=customer.cpf,
        addresses=[address_mapper.to_dto(a) for a in customer.addresses],
    )


def to_with_addresses_dtos(customers: Iterable[Customer]) -> List[CustomerWithAddressesDto]:
    return [to_with_addresses_dto(c) for c in customers]


def from_with_addresses_dto(dto: CustomerWithAddressesDto) -> Customer:
    return Customer(
        id=dto.id,
        name=dto.name,
        cpf=dto.cpf,
        addresses=[address_mapper.from_dto(a) for a in dto.addresses],
    )


def from_with_addresses_creation_dto(dto: CustomerWithAddressesForCreationDto) -> Customer:
    return Customer(
        name=dto.name,
        cpf=dto.cpf,
        addresses=[address_mapper.from_creation_dto(a) for a in dto.addresses],
    )


def apply_with_addresses_update_dto(dto: CustomerWithAddressesForUpdateDto, customer: Customer) -> Customer:
    """
    Copy name/cpf and replace the address collection.

    Incoming addresses whose id matches one already owned by ``customer`` are
    updated in place, the rest become new addresses. Owned addresses missing
    from ``dto`` drop out of the collection (delete-orphan removes them).
    Requires ``customer.addresses`` to be loaded already.
    """
    customer.name = dto.name
    customer.cpf = dto.cpf

    owned = {a.id: a for a in customer.addresses}
    addresses = []
    for incoming in dto.addresses:
        existing = owned.pop(incoming.id, None) if incoming.id is not None else None
        if existing is not None:
            addresses.append(address_mapper.apply_update_dto(incoming, existing))
        else:
            addresses.append(address_mapper.from_creation_dto(incoming))

    customer.addresses = addresses
    return customer
