"""Declarative base shared by the profile and trips tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
