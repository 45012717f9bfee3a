"""IPO listing model."""

from pydantic import BaseModel


class IPO(BaseModel):
    """One IPO listing, possibly partially populated.

    Every field is free text as scraped; an empty string means the source
    did not provide it. Dates are validated lazily by the open-window filter.
    """

    name: str
    open_date: str = ""
    close_date: str = ""
    price_range: str = ""
    lot_size: str = ""
    exchange: str = ""
    subscription_details: str = ""
    gmp: str = ""
    company_info: str = ""

    @property
    def key(self) -> str:
        """Case-insensitive merge key."""
        return self.name.lower()

    def is_empty(self, field: str) -> bool:
        return not getattr(self, field)
