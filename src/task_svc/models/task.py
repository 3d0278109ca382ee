"""Task SQLAlchemy ORM model.

A task is created once and never modified afterwards; its integer ``id`` is
assigned by the database on insert.
"""

from sqlalchemy import Column, Integer, String, Text

from .base import Base


class Task(Base):
    """Task row with a storage-assigned integer identifier."""
    __tablename__ = 'tasks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="", server_default="")

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}')>"
