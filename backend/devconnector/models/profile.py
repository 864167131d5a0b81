from sqlalchemy import Column, String, DateTime, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from devconnector.core.database import Base
from devconnector.core.types import GUID, generate_uuid


class Profile(Base):
    """
    Developer profile - one per user.

    ``experience`` and ``education`` are ordered lists of entry dicts, newest
    first, each carrying its own ``id``. ``social`` maps platform name to URL
    and only holds the platforms that were supplied. The JSON columns are
    always replaced with new lists/dicts, never mutated in place, so the ORM
    sees every change.
    """
    __tablename__ = "profiles"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    user_id = Column(GUID, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)

    company = Column(String(255), nullable=True)
    website = Column(String(512), nullable=True)
    location = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    status = Column(String(255), nullable=True)
    github_username = Column(String(100), nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    social = Column(JSON, nullable=True)
    experience = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", lazy="selectin")

    def __repr__(self):
        return f"<Profile user={self.user_id}>"
