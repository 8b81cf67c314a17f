from customer_registry.models.address import Address
from customer_registry.schemas.address import AddressDto, AddressForCreationDto, AddressForUpdateDto


def to_dto(address: Address) -> AddressDto:
    return AddressDto(id=address.id, street=address.street, city=address.city)


def from_dto(dto: AddressDto) -> Address:
    return Address(id=dto.id, street=dto.street, city=dto.city)


def from_creation_dto(dto: AddressForCreationDto) -> Address:
    return Address(street=dto.street, city=dto.city)


def apply_update_dto(dto: AddressForUpdateDto, address: Address) -> Address:
    """Copy the editable fields of ``dto`` onto ``address``; the id is never touched"""
    address.street = dto.street
    address.city = dto.city
    return address
