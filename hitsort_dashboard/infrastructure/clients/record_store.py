"""Record store HTTP client for card and expenditure collections"""

import logging
from typing import Any, Dict, List

import httpx

from hitsort_dashboard.config import settings
from hitsort_dashboard.domain.exceptions import AuthenticationError, RecordStoreError
from hitsort_dashboard.domain.models import CardRecord, ExpenditureRecord
from hitsort_dashboard.domain.parsing import parse_cards, parse_expenditures
from hitsort_dashboard.infrastructure.clients.auth import StoreSession
from hitsort_dashboard.infrastructure.observability.metrics import (
    record_store_failures_counter,
    record_store_latency_histogram,
)

logger = logging.getLogger(__name__)


class RecordStoreClient:
    """Client for the external record store API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.record_store_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_cards(self, session: StoreSession) -> List[CardRecord]:
        """
        Fetch the full card collection.

        Raises:
            AuthenticationError: Store rejected the session token
            RecordStoreError: On timeout, HTTP errors, or invalid response
        """
        data = await self._request("get_cards", "GET", "/api/cards", session)
        try:
            return parse_cards(data)
        except (KeyError, ValueError, TypeError) as e:
            record_store_failures_counter.labels(operation="get_cards").inc()
            raise RecordStoreError(f"Invalid card data from record store: {e}") from e

    async def get_expenditures(self, session: StoreSession) -> List[ExpenditureRecord]:
        """
        Fetch the full expenditure collection.

        Raises:
            AuthenticationError: Store rejected the session token
            RecordStoreError: On timeout, HTTP errors, or invalid response
        """
        data = await self._request("get_expenditures", "GET", "/api/expenditures/", session)
        try:
            return parse_expenditures(data)
        except (KeyError, ValueError, TypeError) as e:
            record_store_failures_counter.labels(operation="get_expenditures").inc()
            raise RecordStoreError(f"Invalid expenditure data from record store: {e}") from e

    async def update_card(self, session: StoreSession, card: CardRecord) -> Dict[str, Any]:
        """Register a card sale (or correct one) in the record store"""
        payload = {
            "cardId": card.card_id,
            "sellerName": card.seller_name,
            "numberOfGames": card.number_of_games,
            "amount": card.amount,
            "paymentType": card.payment_type.value if card.payment_type else None,
        }
        return await self._request("update_card", "PUT", "/api/cards/update", session, payload)

    async def update_expenditure(self, session: StoreSession, expenditure: ExpenditureRecord) -> Dict[str, Any]:
        """Register a spend event in the record store"""
        payload = {
            "usedFor": expenditure.used_for,
            "amount": expenditure.amount,
            "usedBy": expenditure.used_by,
        }
        return await self._request("update_expenditure", "PUT", "/api/expenditures/update", session, payload)

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        session: StoreSession,
        payload: Dict[str, Any] | None = None,
    ) -> Any:
        """
        Single request/response exchange with the store. No retries: a failure
        is reported once and the caller keeps whatever it showed before.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with record_store_latency_histogram.labels(operation=operation).time():
                    response = await client.request(
                        method,
                        f"{self.base_url}{path}",
                        headers=session.headers,
                        json=payload,
                    )
                    response.raise_for_status()

            except httpx.HTTPStatusError as e:
                record_store_failures_counter.labels(operation=operation).inc()
                status = e.response.status_code
                logger.warning(
                    "Record store rejected request",
                    extra={"operation": operation, "status_code": status},
                )
                if status in (401, 403):
                    raise AuthenticationError(f"Record store rejected session: {status}") from e
                raise RecordStoreError(f"Record store error: {status}") from e
            except httpx.TimeoutException as e:
                record_store_failures_counter.labels(operation=operation).inc()
                raise RecordStoreError(f"Record store timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                record_store_failures_counter.labels(operation=operation).inc()
                raise RecordStoreError(f"Record store unreachable: {e}") from e

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            # Some update endpoints answer with a plain-text confirmation
            return {"message": response.text}
