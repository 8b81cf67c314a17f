from .address import (
    AddressBase,
    AddressForCreationDto,
    AddressForUpdateDto,
    AddressDto,
)

from .customer import (
    CustomerBase,
    CustomerForCreationDto,
    CustomerForUpdateDto,
    CustomerForPatchDto,
    CustomerDto,
    CustomerWithAddressesForCreationDto,
    CustomerWithAddressesForUpdateDto,
    CustomerWithAddressesDto,
)

from .patch import PatchOperation

__all__ = [
    # Addresses
    "AddressBase",
    "AddressForCreationDto",
    "AddressForUpdateDto",
    "AddressDto",
    # Customers
    "CustomerBase",
    "CustomerForCreationDto",
    "CustomerForUpdateDto",
    "CustomerForPatchDto",
    "CustomerDto",
    "CustomerWithAddressesForCreationDto",
    "CustomerWithAddressesForUpdateDto",
    "CustomerWithAddressesDto",
    # Patch documents
    "PatchOperation",
]
