from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from customer_registry.crud import customer as customer_store
from customer_registry.db import get_db
from customer_registry.mappers import customer as customer_mapper
from customer_registry.patch import apply_patch
from customer_registry.schemas import (
    CustomerDto,
    CustomerForCreationDto,
    CustomerForUpdateDto,
    CustomerWithAddressesDto,
    CustomerWithAddressesForCreationDto,
    CustomerWithAddressesForUpdateDto,
    PatchOperation,
)
from customer_registry.utils.problems import problem_response, validation_problem

router = APIRouter(prefix="/api/customers", tags=["customers"])


def not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def id_mismatch() -> Response:
    return problem_response(status.HTTP_400_BAD_REQUEST, "The route id does not match the body id.")


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------
# Customers with addresses
# -----------------------
# Registered ahead of "/{customer_id}" so "with-addresses" is never read as an id

@router.get("/with-addresses", response_model=List[CustomerWithAddressesDto])
async def get_customers_with_addresses(db: AsyncSession = Depends(get_db)):
    """Get all customers with their addresses"""
    customers = await customer_store.get_customers_with_addresses(db)
    return customer_mapper.to_with_addresses_dtos(customers)


@router.get(
    "/with-addresses/{customer_id}",
    response_model=CustomerWithAddressesDto,
    name="GetCustomerWithAddressesById",
)
async def get_customer_with_addresses_by_id(customer_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific customer with its addresses"""
    customer = await customer_store.get_customer_with_addresses(db, customer_id)
    if customer is None:
        return not_found()
    return customer_mapper.to_with_addresses_dto(customer)


@router.post("/with-addresses", response_model=CustomerWithAddressesDto, status_code=status.HTTP_201_CREATED)
async def create_customer_with_addresses(
    request: Request,
    response: Response,
    customer_for_creation: CustomerWithAddressesForCreationDto,
    db: AsyncSession = Depends(get_db),
):
    """Create a customer together with its addresses"""
    customer = customer_mapper.from_with_addresses_creation_dto(customer_for_creation)
    await customer_store.add_customer(db, customer)

    customer_to_return = customer_mapper.to_with_addresses_dto(customer)
    response.headers["Location"] = str(
        request.url_for("GetCustomerWithAddressesById", customer_id=customer_to_return.id)
    )
    return customer_to_return


@router.put("/with-addresses/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_customer_with_addresses(
    customer_id: int,
    customer_for_update: CustomerWithAddressesForUpdateDto,
    db: AsyncSession = Depends(get_db),
):
    """Update a customer and replace its addresses"""
    if customer_id != customer_for_update.id:
        return id_mismatch()

    customer = await customer_store.get_customer_with_addresses(db, customer_id)
    if customer is None:
        return not_found()

    customer_mapper.apply_with_addresses_update_dto(customer_for_update, customer)
    await customer_store.update_customer(db, customer)
    return no_content()


# -----------------------
# Customers
# -----------------------

@router.get("/", response_model=List[CustomerDto])
async def get_customers(db: AsyncSession = Depends(get_db)):
    """Get all customers"""
    customers = await customer_store.get_customers(db)
    return customer_mapper.to_dtos(customers)


@router.get("/cpf/{cpf}", response_model=CustomerDto)
async def get_customer_by_cpf(cpf: str, db: AsyncSession = Depends(get_db)):
    """Get a customer by cpf"""
    customer = await customer_store.get_customer_by_cpf(db, cpf)
    if customer is None:
        return not_found()
    return customer_mapper.to_dto(customer)


@router.get("/{customer_id}", response_model=CustomerDto, name="GetCustomerById")
async def get_customer_by_id(customer_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific customer"""
    customer = await customer_store.get_customer(db, customer_id)
    if customer is None:
        return not_found()
    return customer_mapper.to_dto(customer)


@router.post("/", response_model=CustomerDto, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: Request,
    response: Response,
    customer_for_creation: CustomerForCreationDto,
    db: AsyncSession = Depends(get_db),
):
    """Create a customer"""
    customer = customer_mapper.from_creation_dto(customer_for_creation)
    await customer_store.add_customer(db, customer)

    customer_to_return = customer_mapper.to_dto(customer)
    response.headers["Location"] = str(request.url_for("GetCustomerById", customer_id=customer_to_return.id))
    return customer_to_return


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_customer(
    customer_id: int,
    customer_for_update: CustomerForUpdateDto,
    db: AsyncSession = Depends(get_db),
):
    """Update a customer"""
    if customer_id != customer_for_update.id:
        return id_mismatch()

    customer = await customer_store.get_customer(db, customer_id)
    if customer is None:
        return not_found()

    customer_mapper.apply_update_dto(customer_for_update, customer)
    await customer_store.update_customer(db, customer)
    return no_content()


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a customer"""
    customer = await customer_store.get_customer(db, customer_id)
    if customer is None:
        return not_found()

    await customer_store.remove_customer(db, customer)
    return no_content()


@router.patch("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def partially_update_customer(
    customer_id: int,
    patch_document: List[PatchOperation],
    db: AsyncSession = Depends(get_db),
):
    """Apply a JSON Patch document to the customer's name/cpf"""
    customer = await customer_store.get_customer(db, customer_id)
    if customer is None:
        return not_found()

    # The patch only ever touches the projection; the entity sees a fully valid result or nothing
    customer_to_patch = customer_mapper.to_patch_dto(customer)
    result = apply_patch(patch_document, customer_to_patch)
    if not result.ok:
        return validation_problem(result.errors, 422)

    customer_mapper.apply_patch_dto(result.projection, customer)
    await customer_store.update_customer(db, customer, action="patched")
    return no_content()
