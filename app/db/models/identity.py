from sqlalchemy import Column, String, Boolean
from app.db.session import Base
from app.db.types import UTCDateTime
from app.core.dates import utcnow


class IdentityAccount(Base):
    """Account held by the local identity provider (app.core.identity)."""

    __tablename__ = "identity_accounts"

    uid = Column(String(64), primary_key=True, index=True)
    email = Column(String(320), unique=True, index=True, nullable=False)
    display_name = Column(String(100), nullable=True)
    disabled = Column(Boolean, default=False, nullable=False)

    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
