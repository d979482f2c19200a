# storefront/api/routers/profile.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.schemas import ProfileIn, ProfileOut, MessageOut
from storefront.services.profile_service import ProfileService

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("")
def get_profile(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    profile = ProfileService(db).get_profile(user_id)
    if not profile:
        return {}
    return ProfileOut.model_validate(profile)


@router.post("", response_model=MessageOut)
def save_profile(
    payload: ProfileIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    #exclude_unset: a field missing from the body must not overwrite the stored value
    ProfileService(db).save_profile(user_id, payload.model_dump(exclude_unset=True))
    return {"message": "Profile updated successfully"}
