from sqlalchemy import Column, String, DateTime, Text
from datetime import datetime

from devconnector.core.database import Base
from devconnector.core.types import GUID, generate_uuid


class User(Base):
    """Registered account - the credential record behind every token"""
    __tablename__ = "users"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    avatar = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<User {self.email}>"
