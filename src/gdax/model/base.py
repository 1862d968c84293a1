"""
Base model shared by all GDAX REST records.

Records parse the exchange JSON as-is: monetary amounts arrive as strings
and are validated into Decimal, ids into UUID and timestamps into datetime.
Unknown fields are ignored so that additions on the exchange side do not
break decoding.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict


class GdaxRecord(BaseModel):
    """Immutable record decoded from a REST response."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    def fill_unset_from(self, other: Self) -> Self:
        """
        Return a copy with every None field taken from another record.

        Used to complete a server response with the values that were sent
        in the request but not echoed back.

        Args:
            other: Record to take missing values from

        Returns:
            New record with unset fields filled in

        """
        update = {
            name: getattr(other, name)
            for name in type(self).model_fields
            if getattr(self, name) is None and getattr(other, name) is not None
        }
        return self.model_copy(update=update)

    def to_request_body(self) -> str:
        """Serialize as a JSON request body, omitting unset fields."""
        return self.model_dump_json(exclude_none=True)
