# app/services/auth_service.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.auth.jwt import create_access_token, dummy_verify, get_password_hash, verify_password
from app.core.errors import EmailExists, InvalidCredentials
from app.db.ids import new_id
from app.models.user import User
from app.schemas.user import UserOut

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == normalize_email(email)))


def register(db: Session, email: str, password: str) -> UserOut:
    """Create a user. Raises EmailExists if the normalized email is taken."""
    email = normalize_email(email)
    if get_user_by_email(db, email) is not None:
        raise EmailExists()

    user = User(id=new_id(), email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # lost a race against a concurrent registration
        db.rollback()
        raise EmailExists() from exc

    logger.info("registered user id=%s", user.id)
    return UserOut.model_validate(user)


def login(db: Session, email: str, password: str) -> dict:
    """Unknown email and wrong password both raise InvalidCredentials."""
    user = get_user_by_email(db, email)
    if user is None:
        dummy_verify()
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentials()

    token = create_access_token(subject=user.id)
    return {"token": token, "user": UserOut.model_validate(user)}
