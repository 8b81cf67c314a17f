from pydantic import BaseModel, Field
from typing import Optional


class AddressBase(BaseModel):
    street: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)


class AddressForCreationDto(AddressBase):
    pass


class AddressForUpdateDto(AddressBase):
    # Set when the address already belongs to the customer being updated
    id: Optional[int] = None


class AddressDto(AddressBase):
    id: int

    class Config:
        from_attributes = True
