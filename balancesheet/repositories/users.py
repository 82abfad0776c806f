import logging
from typing import Optional

from sqlmodel import Session, select

from balancesheet.models.user import User
from balancesheet.utils.dates import utcnow

logger = logging.getLogger(__name__)


def normalize_picture_url(picture: Optional[str]) -> Optional[str]:
    # Google a veces devuelve la URL sin esquema
    if not picture:
        return None
    return picture if picture.startswith("http") else f"https://{picture}"


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.username == username)).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def get_by_google_id(self, google_id: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.google_id == google_id)).first()

    def create(self, username: str, email: str, hashed_password: Optional[str]) -> User:
        user = User(username=username, email=email, password=hashed_password)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def create_google_user(
        self,
        *,
        username: str,
        email: str,
        google_id: str,
        google_name: Optional[str] = None,
        google_picture: Optional[str] = None,
    ) -> User:
        now = utcnow()
        user = User(
            username=username,
            email=email,
            password=None,
            google_id=google_id,
            google_name=google_name,
            google_picture=normalize_picture_url(google_picture),
            created_at=now,
            last_login=now,
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("Created Google user %s (%s)", user.id, user.username)
        return user

    def update(self, user: User, **changes) -> User:
        if "google_picture" in changes:
            changes["google_picture"] = normalize_picture_url(changes["google_picture"])
        for key, value in changes.items():
            setattr(user, key, value)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def touch_last_login(self, user: User) -> User:
        return self.update(user, last_login=utcnow())

    def available_username(self, base: str) -> str:
        """Devuelve `base` o `base1`, `base2`... el primero que no esté tomado."""
        candidate, suffix = base, 0
        while self.get_by_username(candidate):
            suffix += 1
            candidate = f"{base}{suffix}"
        return candidate
