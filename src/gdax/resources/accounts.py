"""
Account resources.

GET /accounts returns every account at once; the ledger and hold endpoints
of a single account are cursor-paginated.
"""

from uuid import UUID

from src.gdax.connection.access import AccessInfo
from src.gdax.model.account import Account, AccountHistory, AccountHold
from src.gdax.pagination import CollectionTransport, PageableCollection


class AccountCollection(PageableCollection[Account]):
    """All trading accounts of the profile."""

    def __init__(self, transport: CollectionTransport) -> None:
        super().__init__(transport, Account, "GET", "/accounts", uses_cursors=False)


class AccountHistoryCollection(PageableCollection[AccountHistory]):
    """Ledger entries of one account, most recent first."""

    def __init__(self, transport: CollectionTransport, account_id: UUID) -> None:
        self.account_id = account_id
        super().__init__(
            transport, AccountHistory, "GET", f"/accounts/{account_id}/ledger"
        )


class AccountHoldCollection(PageableCollection[AccountHold]):
    """Active holds on one account."""

    def __init__(self, transport: CollectionTransport, account_id: UUID) -> None:
        self.account_id = account_id
        super().__init__(transport, AccountHold, "GET", f"/accounts/{account_id}/holds")


def get_account(access: AccessInfo, account_id: UUID) -> Account:
    """GET /accounts/<account-id>."""
    return access.request("GET", f"/accounts/{account_id}", "", Account)
