"""
Report models.

Reports are generated asynchronously by the exchange: creating one returns
its id and status, and the status endpoint is polled until a file is ready.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.gdax.enums import ReportFormat, ReportStatus, ReportType
from src.gdax.model.base import GdaxRecord


class ReportParams(BaseModel):
    """Date range echoed back with a report status."""

    start_date: datetime | None = None
    end_date: datetime | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class Report(GdaxRecord):
    """A fills or account report request and its generation status."""

    type: ReportType
    start_date: datetime | None = None
    end_date: datetime | None = None
    product_id: str | None = None
    account_id: UUID | None = None
    format: ReportFormat | None = None
    email: str | None = None

    # Response fields
    id: UUID | None = None
    status: str | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None
    expires_at: datetime | None = None
    file_url: str | None = None
    params: ReportParams | None = None

    @property
    def is_ready(self) -> bool:
        """Check if the report file can be downloaded."""
        return self.status == ReportStatus.READY and bool(self.file_url)
