"""Dependency injection for FastAPI endpoints"""

from fastapi import Header, HTTPException, Request
from hitsort_dashboard.infrastructure.clients.auth import AuthClient, StoreSession
from hitsort_dashboard.infrastructure.clients.record_store import RecordStoreClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_store_session(authorization: str | None = Header(default=None)) -> StoreSession:
    """Wrap the caller's token in an explicit session; it is forwarded untouched"""
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    return StoreSession(token=authorization)


def get_auth_client() -> AuthClient:
    """Provide session gateway client instance"""
    return AuthClient()


def get_record_store_client() -> RecordStoreClient:
    """Provide record store client instance"""
    return RecordStoreClient()
