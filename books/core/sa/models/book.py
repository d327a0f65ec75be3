# books/core/sa/models/book.py
from datetime import date
from enum import Enum
from sqlalchemy import String, Date
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class BookFilter(str, Enum):
    ALL = "all"
    FINISHED = "finished"          # end_date set
    IN_PROGRESS = "in-progress"    # end_date unset
    WITHOUT_URL = "without-url"    # url unset
    UNSTARTED = "unstarted"        # start_date unset
    READING = "reading"            # started but not finished

class Book(Base):
    __tablename__ = 'book'

    title: Mapped[str] = mapped_column(String, primary_key=True)
    url: Mapped[str | None] = mapped_column(String, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Author rows follow the title through the database's ON DELETE/ON UPDATE CASCADE
    authors = relationship(
        'Author',
        back_populates='book',
        cascade='all, delete-orphan',
        passive_deletes=True,
        passive_updates=True,
        order_by='Author.author'
    )

    @property
    def author_names(self) -> list[str]:
        return [author.author for author in self.authors]

    def __repr__(self):
        return f"<Book {self.title!r}>"
