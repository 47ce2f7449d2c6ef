"""User repository - local mirror of admin identities"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import User


class UserRepository:
    """Repository for admin user rows (id + display name only)"""

    @staticmethod
    def get_user(db: Session, user_id: str) -> Optional[User]:
        """Get user by provider id"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def upsert_user(db: Session, user_id: str, display_name: Optional[str]) -> User:
        """Insert the user, or refresh its display name if it already exists"""
        user = UserRepository.get_user(db, user_id)
        if user is None:
            user = User(id=user_id, display_name=display_name)
            db.add(user)
        elif display_name and user.display_name != display_name:
            user.display_name = display_name
        else:
            return user

        db.commit()
        db.refresh(user)
        return user
