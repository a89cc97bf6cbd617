"""
Client mapper for converting between raw records and domain entities.
"""

from typing import Any, Dict

from billtrack.domain.models.base import ValidationError
from billtrack.domain.models.client import Client
from billtrack.infrastructure.mappers.base import pick


class ClientMapper:
    """Maps between Client domain entity and raw records."""

    def to_domain(self, raw: Dict[str, Any]) -> Client:
        if isinstance(raw, Client):
            return raw
        client_id = pick(raw, "id")
        if not client_id:
            raise ValidationError("Client id is required", "id")
        return Client(
            id=str(client_id),
            name=pick(raw, "name", default="") or "",
            email=pick(raw, "email") or None,
        )

    def to_dict(self, client: Client) -> Dict[str, Any]:
        return {
            "id": client.id,
            "name": client.name,
            "email": client.email,
        }
