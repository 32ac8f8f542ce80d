"""User model."""

import uuid

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from blog_api.constants import Role
from blog_api.utils.exceptions import FieldValidationError

from .base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """A registered account that writes posts and comments."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    username: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda e: [m.value for m in e]),
        default=Role.USER,
        nullable=False,
    )

    # Rows are removed by ON DELETE CASCADE
    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="author", passive_deletes=True
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="author", passive_deletes=True
    )

    @validates("email")
    def validate_email_address(self, key, value):
        try:
            return validate_email(value, check_deliverability=False).normalized
        except EmailNotValidError:
            raise FieldValidationError([key])

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role={self.role})>"
