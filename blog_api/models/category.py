"""Category model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Category(Base):
    """A named bucket posts can be filed under."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Posts keep existing with category_id set to NULL
    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="category", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
