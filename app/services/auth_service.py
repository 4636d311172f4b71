import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.config import Settings
from app.database import Database
from app.exceptions import DuplicateEmail, InvalidCredentials
from app.models.ids import utcnow
from app.models.user import User
from app.schemas.user_schemas import UserLogin, UserRegister
from app.utils.hash import hash_password, verify_password
from app.utils.token import create_access_token, token_claims

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def find_user_by_email(session: Session, email: str):
    return session.exec(select(User).where(User.email == normalize_email(email))).first()


def register_user(session: Session, payload: UserRegister, settings: Settings):
    """Create a user and return ``(token, user)``."""
    email = normalize_email(payload.email)

    if find_user_by_email(session, email):
        raise DuplicateEmail()

    now = utcnow()
    user = User(
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        email=email,
        password=hash_password(payload.password, settings.bcrypt_rounds),
        created_at=now,
        updated_at=now,
    )

    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # lost a race against a concurrent registration of the same email
        session.rollback()
        raise DuplicateEmail()
    session.refresh(user)

    logger.info(f"Registered user {user.id}")
    return create_access_token(token_claims(user), settings), user


def authenticate_user(session: Session, payload: UserLogin) -> User:
    user = find_user_by_email(session, payload.email)

    if not user or not verify_password(payload.password, user.password):
        raise InvalidCredentials()

    return user


def login_user(session: Session, payload: UserLogin, settings: Settings):
    """Verify credentials and return ``(token, user)``."""
    user = authenticate_user(session, payload)
    return create_access_token(token_claims(user), settings), user


def record_last_login(database: Database, user_id: str):
    """Stamp ``last_login``; runs after the login response has been sent."""
    try:
        with database.session() as session:
            user = session.get(User, user_id)
            if user is None:
                return
            user.last_login = utcnow()
            session.add(user)
            session.commit()
    except SQLAlchemyError:
        logger.exception(f"Failed to record last login for user {user_id}")
