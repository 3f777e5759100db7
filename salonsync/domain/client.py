"""Client entity - represents a customer of the salon."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Client:
    """A registered salon client."""

    id: str
    name: str
    phone: str = ""
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Client":
        """Creates a Client from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            phone=data.get("phone") or "",
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "notes": self.notes,
        }

    def matches(self, query: str) -> bool:
        """Checks the clients-view search: name (case-insensitive) or phone."""
        return query.lower() in self.name.lower() or query in self.phone
