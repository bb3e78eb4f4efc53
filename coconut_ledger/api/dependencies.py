"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from coconut_ledger.infrastructure.clients.record_store import RecordStoreClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_record_store_client() -> RecordStoreClient:
    """Provide record store API client instance"""
    return RecordStoreClient()
