from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean, false
from sqlalchemy.orm import relationship
from taskez.database import Base
from taskez.models.user import User


class Task(Base):
    __tablename__ = "tasks"

    task_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.user_id"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    color = Column(String(50), nullable=False)
    finished = Column(Boolean, nullable=False, default=False, server_default=false())
    deleted = Column(Boolean, nullable=False, default=False, server_default=false())

    owner = relationship(User, back_populates="tasks")
