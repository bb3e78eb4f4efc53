"""Record store HTTP client for reading and creating ledger records"""

import httpx
from datetime import date
from typing import List, Optional
from coconut_ledger.domain.models import Record
from coconut_ledger.domain.records import parse_record, parse_records
from coconut_ledger.domain.exceptions import MalformedRecordError, RecordStoreError
from coconut_ledger.config import settings


class RecordStoreClient:
    """Client for the ledger's /transactions resource"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.record_store_base).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def fetch_records(self) -> List[Record]:
        """
        Fetch the full record set in one call.

        The store's ordering is not relied on. Malformed documents are
        dropped rather than failing the whole fetch.

        Raises:
            RecordStoreError: On timeout, HTTP errors, or a non-list payload
        """
        async with self._client() as client:
            try:
                response = await client.get(f"{self.base_url}/transactions")
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise RecordStoreError(f"Record store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise RecordStoreError(f"Record store error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise RecordStoreError(f"Record store unreachable: {e}") from e
            except ValueError as e:
                raise RecordStoreError(f"Invalid JSON from record store: {e}") from e

        if not isinstance(data, list):
            raise RecordStoreError(f"Expected a list of records, got {type(data).__name__}")

        return parse_records(data)

    async def create_record(
        self,
        purchase_price: float,
        sold_quantity: int,
        sell_price: float,
        record_date: Optional[date] = None,
    ) -> Record:
        """
        Create one record. The store assigns the id and defaults the date to today.

        Raises:
            RecordStoreError: On timeout, HTTP errors, or an unusable response
        """
        payload = {
            "purchasePrice": purchase_price,
            "soldQuantity": sold_quantity,
            "sellPrice": sell_price,
        }
        if record_date is not None:
            payload["date"] = record_date.isoformat()

        async with self._client() as client:
            try:
                response = await client.post(f"{self.base_url}/transactions", json=payload)
                response.raise_for_status()
                return parse_record(response.json())
            except httpx.TimeoutException as e:
                raise RecordStoreError(f"Record store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise RecordStoreError(f"Record store rejected record: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise RecordStoreError(f"Record store unreachable: {e}") from e
            except (ValueError, MalformedRecordError) as e:
                raise RecordStoreError(f"Invalid record returned by store: {e}") from e
