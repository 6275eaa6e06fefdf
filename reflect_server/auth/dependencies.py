# reflect_server/auth/dependencies.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from reflect_server.db.database import get_db
from reflect_server.models.users import User
from reflect_server.auth.token_verifier import verify_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _provision_user(db: Session, payload: dict) -> User:
    """First authenticated request of a new subject creates its users row."""
    user = User(
        user_id=payload["sub"],
        email=payload.get("email"),
        username=payload.get("username") or payload.get("preferred_username"),
        full_name=payload.get("name"),
        avatar_url=payload.get("picture"),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # another request created the same user first
        db.rollback()
        existing = db.query(User).filter(User.user_id == payload["sub"]).first()
        if existing is None:
            raise HTTPException(status.HTTP_409_CONFLICT, "could not register user")
        return existing

    db.refresh(user)
    logger.info(f"registered new user {user.user_id}")
    return user


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    bearer: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
):

    # Authorization: Bearer <token>
    if bearer and getattr(bearer, "scheme", "").lower() == "bearer":
        access_token = bearer.credentials
    else:
        auth = request.headers.get("Authorization")
        if not auth or not auth.startswith("Bearer "):
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "missing Authorization header")
        access_token = auth.replace("Bearer ", "", 1).strip()

    access_payload = verify_access_token(access_token)
    if access_payload is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "invalid access token")

    subject = access_payload.get("sub")
    if not subject:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "access token has no sub")

    user = db.query(User).filter(User.user_id == subject).first()
    if not user:
        user = _provision_user(db, access_payload)

    return user
