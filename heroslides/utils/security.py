from fastapi import HTTPException, Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session
import logging
import secrets

from heroslides.config import get_settings
from heroslides.models.user import SessionLocal, User

logger = logging.getLogger(__name__)

http_basic = HTTPBasic()


def _authenticate(db: Session, credentials: HTTPBasicCredentials) -> User:
    # Stored emails are normalized the same way by ensure_admin_user
    email = (credentials.username or "").strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if not user or not secrets.compare_digest(user.password or "", credentials.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return user


def is_admin_email(email: str) -> bool:
    if not email:
        return False
    return email.strip().lower() in get_settings().admin_emails


def require_admin(credentials: HTTPBasicCredentials = Depends(http_basic)) -> str:
    db = SessionLocal()
    try:
        user = _authenticate(db, credentials)
        if user.role != "ADMIN" and not is_admin_email(user.email):
            logger.warning("Non-admin user %s attempted an admin operation", user.email)
            raise HTTPException(status_code=403, detail="Admin access required")
        return user.email
    finally:
        db.close()


def ensure_admin_user(db: Session) -> None:
    """Create the configured admin account if it does not exist yet.

    Does nothing unless both ADMIN_EMAIL and ADMIN_PASSWORD are configured.
    """
    settings = get_settings()
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.debug("ADMIN_EMAIL/ADMIN_PASSWORD not configured; skipping admin seed")
        return
    email = settings.ADMIN_EMAIL.strip().lower()
    if db.query(User).filter(User.email == email).first():
        return
    db.add(User(email=email, password=settings.ADMIN_PASSWORD, role="ADMIN"))
    db.commit()
    logger.info("Seeded admin user %s", email)
