"""Test account, ledger and hold listing against a mock exchange."""

import json
from decimal import Decimal
from uuid import UUID

import pytest

from src.gdax.enums import LedgerEntryType
from src.gdax.errors import GdaxAPIError
from src.gdax.model.account import Account
from src.gdax.service.client import GdaxClient
from tests.unit.gdax.helpers import (
    ACCOUNT_JSON,
    ACCOUNTS_JSON,
    NOT_FOUND,
    MockExchange,
    drain,
    hold,
    ledger_entry,
)

ACCOUNT_ID = UUID("6cf2b1ba-3705-40e6-a41e-69be033514f7")
ORDER_1 = "d50ec984-77a8-460a-b958-66f114b0de9b"
ORDER_2 = "03a7a57f-c5d5-4e29-b7a1-118b3a6cc88d"


class TestGetAccounts:
    """Test the single-shot account list."""

    def test_lists_all_accounts(
        self, exchange: MockExchange, client: GdaxClient
    ) -> None:
        """Test both accounts are returned in server order."""
        exchange.add("GET", "/accounts", ACCOUNTS_JSON)

        accounts = client.get_accounts()
        result = drain(accounts.has_more, accounts.take_next)

        assert [a.id for a in result] == [
            UUID("71452118-efc7-4cc4-8780-a5e22d4baa53"),
            UUID("e316cb9a-0808-4fd7-8914-97829c1925de"),
        ]
        assert result[0].currency == "BTC"
        assert result[0].is_empty
        assert result[1].balance == Decimal("80.2301373066930000")
        assert result[1].holds == Decimal("1.0035025000000000")
        assert accounts.has_more() is False

    def test_single_request_even_with_cursor_header(
        self, exchange: MockExchange, client: GdaxClient
    ) -> None:
        """Test a CB-AFTER header does not trigger a second request."""
        exchange.add("GET", "/accounts", ACCOUNTS_JSON, headers={"CB-AFTER": "99"})

        assert len(list(client.get_accounts())) == 2
        assert len(exchange.requests) == 1

    def test_lazy_until_consumed(
        self, exchange: MockExchange, client: GdaxClient
    ) -> None:
        """Test creating the collection sends nothing."""
        client.get_accounts()
        assert exchange.requests == []

    def test_server_error(self, exchange: MockExchange, client: GdaxClient) -> None:
        """Test an error response is raised by take_next."""
        exchange.add("GET", "/accounts", {"message": "invalid signature"}, status=400)

        accounts = client.get_accounts()
        assert accounts.has_more()
        with pytest.raises(GdaxAPIError, match="invalid signature") as exc_info:
            accounts.take_next()
        assert exc_info.value.status_code == 400


class TestGetAccount:
    """Test fetching a single account."""

    def test_get_account(self, exchange: MockExchange, client: GdaxClient) -> None:
        """Test the account fields, including ``holds``."""
        exchange.add("GET", f"/accounts/{ACCOUNT_ID}", ACCOUNT_JSON)

        account = client.get_account(ACCOUNT_ID)

        assert account.id == ACCOUNT_ID
        assert account.balance == Decimal("1.100")
        assert account.holds == Decimal("0.100")
        assert account.available == Decimal("1.00")
        assert account.currency == "USD"
        assert account.profile_id is None

    def test_get_account_not_found(
        self, exchange: MockExchange, client: GdaxClient
    ) -> None:
        """Test a 404 raises immediately with the API message."""
        exchange.add("GET", f"/accounts/{ACCOUNT_ID}", NOT_FOUND, status=404)

        with pytest.raises(GdaxAPIError) as exc_info:
            client.get_account(ACCOUNT_ID)
        assert str(exc_info.value) == "Account id not found"
        assert exc_info.value.status_code == 404


class TestGetAccountHistory:
    """Test the paginated account ledger."""

    def test_history_across_pages(
        self, exchange: MockExchange, client: GdaxClient
    ) -> None:
        """Test two pages linked by CB-AFTER, then an empty page."""
        # Given: two single-entry pages and an empty last page
        path = f"/accounts/{ACCOUNT_ID}/ledger"
        exchange.add(
            "GET", path, [ledger_entry(ORDER_1, "239.669", 1)], headers={"CB-AFTER": "1"}
        )
        exchange.add(
            "GET",
            path,
            [ledger_entry(ORDER_2, "239.668", 2)],
            headers={"CB-AFTER": "2"},
            params={"after": "1"},
        )
        exchange.add("GET", path, [], params={"after": "2"})

        # When: the ledger is read entry by entry
        history = client.get_account_history(ACCOUNT_ID)
        entries = drain(history.has_more, history.take_next)

        # Then: both entries are returned and three requests were made
        assert [e.details.order_id for e in entries] == [UUID(ORDER_1), UUID(ORDER_2)]
        assert [e.balance for e in entries] == [Decimal("239.669"), Decimal("239.668")]
        assert all(e.type == LedgerEntryType.FEE and e.is_fee for e in entries)
        assert history.fetch_count == 3
        assert [r.url.params.get("after") for r in exchange.requests] == [
            None,
            "1",
            "2",
        ]

    def test_history_error(self, exchange: MockExchange, client: GdaxClient) -> None:
        """Test an unknown account reports more, then raises the API message."""
        exchange.add("GET", f"/accounts/{ACCOUNT_ID}/ledger", NOT_FOUND, status=404)

        history = client.get_account_history(ACCOUNT_ID)
        assert history.has_more() is True
        with pytest.raises(GdaxAPIError) as exc_info:
            history.take_next()
        assert str(exc_info.value) == "Account id not found"

    def test_history_stops_on_empty_page(
        self, exchange: MockExchange, client: GdaxClient
    ) -> None:
        """Test an empty second page ends iteration without further requests."""
        path = f"/accounts/{ACCOUNT_ID}/ledger"
        exchange.add(
            "GET", path, [ledger_entry(ORDER_1, "1.0", 1)], headers={"CB-AFTER": "1"}
        )
        exchange.add("GET", path, [], headers={"CB-AFTER": "2"})

        history = client.get_account_history(ACCOUNT_ID)

        assert len(list(history)) == 1
        assert history.has_more() is False
        assert len(exchange.requests) == 2


class TestGetAccountHolds:
    """Test the paginated hold list."""

    def test_holds(self, exchange: MockExchange, client: GdaxClient) -> None:
        """Test holds are decoded across pages."""
        path = f"/accounts/{ACCOUNT_ID}/holds"
        exchange.add(
            "GET",
            path,
            [
                hold("82dcd140-c3c7-4507-8de4-2c529cd1a28f", "4.23"),
                hold("cbf2a9a5-0e1b-4e0b-8b3b-5a2d2b5e9f11", "1.00"),
            ],
            headers={"CB-AFTER": "abc"},
        )
        exchange.add("GET", path, [], params={"after": "abc"})

        holds = list(client.get_account_holds(ACCOUNT_ID))

        assert [h.amount for h in holds] == [Decimal("4.23"), Decimal("1.00")]
        assert holds[0].type == "order"
        assert len(exchange.requests) == 2


class TestAccountModel:
    """Test account decoding details."""

    def test_hold_and_holds_are_equivalent(self) -> None:
        """Test both spellings of the hold amount decode into ``holds``."""
        listed = json.loads(ACCOUNTS_JSON)[1]
        single = {k: v for k, v in listed.items() if k != "hold"}
        single["holds"] = listed["hold"]

        assert Account.model_validate(listed).holds == Decimal("1.0035025000000000")
        assert Account.model_validate(single).holds == Decimal("1.0035025000000000")
