from sqlalchemy import Column, String, DateTime, Text, JSON, ForeignKey
from datetime import datetime

from devconnector.core.database import Base
from devconnector.core.types import GUID, generate_uuid


class Post(Base):
    """
    Post written by a user.

    ``name`` and ``avatar`` are a snapshot of the author taken when the post
    is created; they are not updated if the user changes later. ``likes`` is
    a list of ``{"user": id}`` and ``comments`` a list of comment dicts, both
    newest first.
    """
    __tablename__ = "posts"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    user_id = Column(GUID, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    text = Column(Text, nullable=False)
    name = Column(String(255), nullable=True)
    avatar = Column(Text, nullable=True)
    likes = Column(JSON, nullable=False, default=list)
    comments = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=datetime.utcnow, index=True, nullable=False)

    def __repr__(self):
        return f"<Post {self.id} by {self.user_id}>"
