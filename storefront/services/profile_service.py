# storefront/services/profile_service.py
from sqlalchemy.orm import Session

from storefront.data.models.user_profile import UserProfileModel, PROFILE_FIELDS
from storefront.repos.profile_repo import ProfileRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProfileService:
    def __init__(self, db: Session):
        self.repo = ProfileRepo(db)

    def get_profile(self, user_id: str) -> UserProfileModel | None:
        #no profile yet is a valid state, the router answers with {}
        return self.repo.get_profile(user_id)

    def save_profile(self, user_id: str, fields: dict) -> None:
        """
        Upsert keyed on user_id. `fields` holds only the keys the client sent,
        omitted keys keep their stored value.
        """
        provided = {k: v for k, v in fields.items() if k in PROFILE_FIELDS}

        self.repo.upsert_profile(user_id, provided)
        self.repo.commit()

        logger.info(f"Profile of {user_id} saved, fields: {sorted(provided)}")
