from sqlalchemy import Column, Integer, String, Text
from shortlink_app.database.connection import Base


class URL(Base):
    """
    Alias -> URL mapping.

    Rows are append-only: created once, never updated or deleted.
    The same url may appear under several aliases.
    """
    __tablename__ = "url"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique=True + index=True creates a UNIQUE index; this is what
    # rejects concurrent inserts of the same alias
    alias = Column(String(64), unique=True, nullable=False, index=True)
    url = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<URL id={self.id} alias={self.alias!r}>"
