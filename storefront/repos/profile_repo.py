# storefront/repos/profile_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.user_profile import UserProfileModel
from storefront.data.upsert import dialect_insert


class ProfileRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: str) -> UserProfileModel | None:
        stmt = select(UserProfileModel).where(UserProfileModel.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_profile(self, user_id: str, fields: dict) -> None:
        """
        Insert the row with the given fields (others NULL) or, if the user already
        has one, overwrite only the given fields.
        """
        #new row: empty strings are stored as NULL
        inserted = {name: value or None for name, value in fields.items()}
        stmt = dialect_insert(self.db, UserProfileModel).values(user_id=user_id, **inserted)

        if fields:
            #existing row: SET only the columns sent by the client, values as sent
            set_ = dict(fields)
            set_["updated_at"] = func.now()
            stmt = stmt.on_conflict_do_update(
                index_elements=[UserProfileModel.user_id],
                set_=set_,
            )
        else:
            stmt = stmt.on_conflict_do_nothing(index_elements=[UserProfileModel.user_id])

        self.db.execute(stmt)

    def commit(self):
        self.db.commit()
