"""
Client domain model.
"""

from dataclasses import dataclass
from typing import Optional

from billtrack.domain.models.base import BaseEntity, new_id


@dataclass(frozen=True)
class Client(BaseEntity):
    """A customer owning zero or more projects."""

    name: str = ""
    email: Optional[str] = None

    @classmethod
    def create(cls, name: str, email: Optional[str] = None) -> "Client":
        """Create a client with a fresh id."""
        return cls(id=new_id(), name=name, email=email or None)
