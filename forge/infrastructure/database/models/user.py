"""
User SQLAlchemy model.
"""

from sqlalchemy import Column, Enum, String
from sqlalchemy.orm import relationship

from forge.domain.value_objects.user_role import UserRole

from .base import BaseModel


class UserModel(BaseModel):
    """User database model."""

    __tablename__ = "users"

    email = Column(String(255), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(20))
    role = Column(
        Enum(UserRole, name="user_role_enum", native_enum=False, length=20),
        nullable=False,
    )

    # Relationships
    plumber_profile = relationship(
        "PlumberProfileModel", back_populates="user", uselist=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
