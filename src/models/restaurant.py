"""
Restaurant data model.

Descriptive profile of the restaurant shown on the details screen.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Restaurant:
    """
    Immutable restaurant descriptor.
    Only the name is used outside of the views.
    """
    name: str
    type: str  # Cuisine, e.g. "Indien"
    hours: str
    address: str
    website: str
    phone_number: str
    dine_in: bool = False
    take_away: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Restaurant":
        """Create Restaurant from a plain dict (seed data)."""
        return cls(
            name=data["name"],
            type=data.get("type", ""),
            hours=data.get("hours", ""),
            address=data.get("address", ""),
            website=data.get("website", ""),
            phone_number=data.get("phone_number", ""),
            dine_in=bool(data.get("dine_in", False)),
            take_away=bool(data.get("take_away", False))
        )
