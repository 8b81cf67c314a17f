from pydantic import BaseModel, Field
from typing import List

from .address import AddressDto, AddressForCreationDto, AddressForUpdateDto


# ---------- Flat customer ----------
class CustomerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    cpf: str = Field(..., min_length=11, max_length=11)


class CustomerForCreationDto(CustomerBase):
    pass


class CustomerForUpdateDto(CustomerBase):
    id: int


class CustomerForPatchDto(CustomerBase):
    pass


class CustomerDto(CustomerBase):
    id: int

    class Config:
        from_attributes = True


# ---------- Customer with addresses ----------
class CustomerWithAddressesForCreationDto(CustomerBase):
    addresses: List[AddressForCreationDto] = []


class CustomerWithAddressesForUpdateDto(CustomerBase):
    id: int
    addresses: List[AddressForUpdateDto] = []


class CustomerWithAddressesDto(CustomerBase):
    id: int
    addresses: List[AddressDto] = []

    class Config:
        from_attributes = True
