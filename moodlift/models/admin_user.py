from sqlalchemy import Column, String
from moodlift.core.db import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(String(64), primary_key=True)  # auth user id
    email = Column(String(255), nullable=False, unique=True)
    role = Column(String(32), nullable=False, default="admin")
