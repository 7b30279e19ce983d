import logging
from sqlalchemy.orm import Session

from ..models import User
from ..security import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def create_user(self, name: str, email: str, password: str) -> User:
        user = User(name=name, email=email.lower(), hashed_password=hash_password(password))
        self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user when the password matches, otherwise None."""
        user = self.get_user_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            return None
        return user
