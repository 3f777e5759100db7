"""Service entity - represents a catalog service offered by the salon."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    """A bookable service with a duration used for calendar rendering."""

    id: str
    name: str
    duration: int
    price: int
    color: str

    @classmethod
    def from_dict(cls, data: dict) -> "Service":
        """Creates a Service from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            duration=int(data["duration"]),
            price=int(data["price"]),
            color=data["color"],
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "price": self.price,
            "color": self.color,
        }

    @property
    def short_name(self) -> str:
        """Name before the language separator ("Hungarian / English")."""
        return self.name.split("/")[0].strip()

    @property
    def price_formatted(self) -> str:
        return f"{self.price:,} Ft".replace(",", " ")

    @property
    def duration_formatted(self) -> str:
        return f"{self.duration} min"
