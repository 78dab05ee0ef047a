"""SQLAlchemy ORM model for the single-row profile table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from triplog.db.schemas.base import Base

PROFILE_ROW_ID = 1


class ProfileRecord(Base):
    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    designation: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(Text)
    company: Mapped[str | None] = mapped_column(Text)
