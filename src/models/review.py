"""
Review data model.

Represents one customer review left on the restaurant.
"""

from dataclasses import dataclass


@dataclass(unsafe_hash=True)
class Review:
    """
    A customer review: author, avatar, comment and star rating.
    Equality and hashing cover all four fields.
    """
    username: str  # Display name of the reviewer
    picture: str  # Avatar URL, treated opaquely
    comment: str  # Review text
    rate: int  # 1-5 stars; other values are kept but ignored by stats

    @classmethod
    def from_dict(cls, data: dict) -> "Review":
        """Create Review from a plain dict (seed data)."""
        return cls(
            username=data["username"],
            picture=data.get("picture", ""),
            comment=data["comment"],
            rate=int(data["rate"])
        )

    def to_dict(self) -> dict:
        """Convert to a plain dict."""
        return {
            "username": self.username,
            "picture": self.picture,
            "comment": self.comment,
            "rate": self.rate
        }
