"""
Address value object.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Free-text address as submitted by the customer.

    Every part is optional: the backend sends either the separate parts or a
    single composed location string, sometimes both.
    """

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not any([self.street, self.city, self.state, self.zip_code])

    @property
    def full_address(self) -> str:
        """Get formatted full address, skipping missing parts."""
        region = " ".join(part for part in [self.state, self.zip_code] if part)
        return ", ".join(part for part in [self.street, self.city, region] if part)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
        }
