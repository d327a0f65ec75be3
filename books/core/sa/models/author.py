# books/core/sa/models/author.py
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Author(Base):
    __tablename__ = 'author'

    title: Mapped[str] = mapped_column(
        ForeignKey('book.title', ondelete='CASCADE', onupdate='CASCADE'),
        primary_key=True
    )
    author: Mapped[str] = mapped_column(String, primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='authors')

    def __repr__(self):
        return f"<Author {self.author!r} of {self.title!r}>"
