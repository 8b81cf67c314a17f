from . import address
from . import customer

__all__ = [
    "address",
    "customer",
]
