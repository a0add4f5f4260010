"""
Authentication endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status

from smartbizflow.core.deps import get_store
from smartbizflow.core.security import create_access_token
from smartbizflow.db.store import RecordStore
from smartbizflow.schemas.auth import LoginRequest, TokenResponse
from smartbizflow.services.audit_service import log_audit
from smartbizflow.services.user_service import authenticate_user, update_last_login

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    request: Request,
    store: RecordStore = Depends(get_store)
):
    """
    Authenticate user and return JWT token

    Validates email and password, rejects inactive accounts.
    Returns access token with user id (sub) and role.
    """
    user = authenticate_user(store, login_data.email, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    # JWT 'sub' claim must be a string
    access_token = create_access_token(data={"sub": str(user["id"]), "role": user["role"]})

    user = update_last_login(store, user["id"]) or user

    # Audit is best effort; a failed write never fails login
    log_audit(
        store,
        user_id=user["id"],
        action="LOGIN",
        table="users",
        record_id=user["id"],
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )

    return TokenResponse(access_token=access_token, token_type="bearer", user=user)
