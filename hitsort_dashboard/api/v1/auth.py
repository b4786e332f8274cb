"""POST /v1/auth/login - Exchange staff credentials for a session token"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from hitsort_dashboard.api.v1.schemas import LoginRequest, LoginResponse
from hitsort_dashboard.api.dependencies import get_auth_client, get_request_id
from hitsort_dashboard.infrastructure.clients.auth import AuthClient
from hitsort_dashboard.domain.exceptions import AuthenticationError, RecordStoreError

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    request_body: LoginRequest,
    request: Request,
    auth_client: AuthClient = Depends(get_auth_client),
):
    """
    Forward credentials to the session gateway.

    The returned token is opaque: callers send it back verbatim in the
    Authorization header of every other endpoint.
    """
    request_id = get_request_id(request)

    try:
        session = await auth_client.login(request_body.username, request_body.password)

    except AuthenticationError as e:
        logging.warning(f"Login rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail="Login failed")

    except RecordStoreError as e:
        logging.error(f"Session gateway error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Login service unavailable")

    return LoginResponse(token=session.token)
