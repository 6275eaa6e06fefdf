# reflect_server/routers/profile.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from reflect_server.auth.dependencies import get_current_user
from reflect_server.db.database import get_db
from reflect_server.models.user_profile import UserProfile
from reflect_server.models.users import User
from reflect_server.schemas.schema_profile import ProfileContents, ResponseProfile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])

PROFILE_FIELDS = list(ProfileContents.model_fields.keys())


def _to_response(user: User, profile: UserProfile | None) -> ResponseProfile:
    values = {}
    if profile is not None:
        values = {name: getattr(profile, name) for name in PROFILE_FIELDS}
        values["created_at"] = profile.created_at
        values["updated_at"] = profile.updated_at

    return ResponseProfile(
        user_id=user.user_id,
        email=user.email,
        full_name=user.full_name,
        **values,
    )


@router.get("", response_model=ResponseProfile)
def get_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Health profile of the user. Fields are empty until the first PUT."""
    profile = db.query(UserProfile).filter(UserProfile.user_id == current_user.user_id).first()
    return _to_response(current_user, profile)


@router.put("", response_model=ResponseProfile)
def put_profile(
    body: ProfileContents,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Replaces the whole profile (created on the first call).
    """
    profile = db.query(UserProfile).filter(UserProfile.user_id == current_user.user_id).first()

    if profile:
        for name in PROFILE_FIELDS:
            setattr(profile, name, getattr(body, name))
    else:
        profile = UserProfile(user_id=current_user.user_id, **body.model_dump())
        db.add(profile)

    db.commit()
    db.refresh(profile)
    logger.info(f"profile saved user={current_user.user_id}")

    return _to_response(current_user, profile)
