from dataclasses import dataclass
from typing import Any, Optional, Union

from errors import InvalidAccount

REQUIRED_FIELDS = ("id", "name", "type")


@dataclass
class Account:
    id: Union[str, int]  # client-assigned, e.g. "a1"
    name: str  # display name, also the listing sort key
    type: str  # category tag, e.g. "asset"
    label_text: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Account":
        """Build an account from one element of a submitted JSON array.

        A required field counts as missing when it is absent or falsy, so
        ``0`` and ``""`` are rejected along with ``null``. A falsy
        ``labelText`` is stored as None.

        Raises:
            InvalidAccount: If the payload is not an object or lacks a
                required field.
        """
        if not isinstance(payload, dict):
            raise InvalidAccount(list(REQUIRED_FIELDS))

        missing = [field for field in REQUIRED_FIELDS if not payload.get(field)]
        if missing:
            raise InvalidAccount(missing)

        return cls(
            id=payload["id"],
            name=payload["name"],
            type=payload["type"],
            label_text=payload.get("labelText") or None,
        )

    def to_dict(self) -> dict:
        """Convert account to the JSON shape the endpoint serves."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "labelText": self.label_text,
        }
