from locstore.models.base import Base
from locstore.models.location import Location

__all__ = [
    "Base",
    "Location",
]
