from .base import Base
from .customer import Customer
from .address import Address
