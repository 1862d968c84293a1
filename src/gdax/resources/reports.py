"""Report resources."""

from uuid import UUID

from src.gdax.connection.access import AccessInfo
from src.gdax.model.report import Report


def create_report(access: AccessInfo, report: Report) -> Report:
    """
    POST /reports.

    Fields of the request the exchange does not echo back are filled in
    from the submitted report.
    """
    created = access.request("POST", "/reports", report.to_request_body(), Report)
    return created.fill_unset_from(report)


def get_report_status(access: AccessInfo, report_id: UUID) -> Report:
    """GET /reports/<report-id>."""
    return access.request("GET", f"/reports/{report_id}", "", Report)
