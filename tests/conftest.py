"""Shared fixtures for ninja-forms tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal

import pytest
from pydantic import BaseModel, Field
from sqlalchemy import TIMESTAMP, Column, DateTime, ForeignKey, Numeric, String, Table, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, relationship

from ninja_forms.builder import FormBuilder
from ninja_forms.i18n import DictTranslator
from ninja_forms.providers.base import ObjectProvider
from ninja_forms.providers.sql import SQLAlchemyProvider

# ---------------------------------------------------------------------------
# SQLAlchemy models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


user_tags = Table(
    "user_tags",
    Base.metadata,
    Column("user_id", ForeignKey("users.id"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id"), primary_key=True),
)


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    active: Mapped[bool] = mapped_column(default=True)
    users: Mapped[list[User]] = relationship(back_populates="company")


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(30))


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    bio: Mapped[str | None] = mapped_column(Text)


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), info={"label": "Full name"})
    email: Mapped[str | None] = mapped_column(String(255))
    password: Mapped[str | None] = mapped_column(String(60))
    description: Mapped[str | None] = mapped_column(Text)
    age: Mapped[int | None]
    credit_limit: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    active: Mapped[bool] = mapped_column(default=False)
    born_on: Mapped[date | None]
    created_at: Mapped[datetime | None] = mapped_column(TIMESTAMP)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime)
    company_id: Mapped[int | None] = mapped_column(ForeignKey("companies.id"))

    company: Mapped[Company | None] = relationship(back_populates="users", info={"conditions": {"active": True}})
    tags: Mapped[list[Tag]] = relationship(secondary=user_tags, order_by="Tag.name")
    profile: Mapped[Profile | None] = relationship()


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                Company(id=1, name="Acme", active=True),
                Company(id=2, name="Globex", active=True),
                Company(id=3, name="Initech", active=False),
                Tag(id=1, name="ruby"),
                Tag(id=2, name="python"),
                Tag(id=3, name="go"),
            ]
        )
        session.flush()
        yield session
    engine.dispose()


@pytest.fixture
def user() -> User:
    """A new, unsaved user."""
    return User(name="Carlos", email="carlos@example.com", description="Hello", age=30)


@pytest.fixture
def builder(session, user) -> FormBuilder:
    return FormBuilder("user", user, provider=SQLAlchemyProvider(session))


# ---------------------------------------------------------------------------
# Plain objects (ObjectProvider)
# ---------------------------------------------------------------------------


class Category:
    """Association target that loads its records through ``all()``."""

    calls: list[dict[str, Any]] = []

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name

    @classmethod
    def all(cls, conditions: dict[str, Any], order_by: list[Any]) -> list[Category]:
        cls.calls.append({"conditions": conditions, "order_by": order_by})
        return [Category(1, "News"), Category(2, "Sports")]


@dataclass
class Article:
    id: int | None = None
    title: str | None = None
    body: str | None = None
    category_id: int | None = None
    country: str | None = None
    time_zone: str | None = None
    published: bool = False
    errors: dict[str, list[str]] = field(default_factory=dict)

    COLUMNS = {
        "title": {"column_type": "string", "limit": 80},
        "body": {"column_type": "text"},
        "published": {"column_type": "boolean"},
        "category_id": {"column_type": "integer"},
    }
    ASSOCIATIONS = {
        "category": {"macro": "belongs_to", "target": Category, "conditions": {"visible": True}},
        "categories": {"macro": "has_many", "target": Category},
        "cover": {"macro": "has_one", "target": Category},
    }

    def column_for_attribute(self, name: str) -> dict[str, Any] | None:
        return self.COLUMNS.get(name)

    @classmethod
    def reflect_on_association(cls, name: str) -> dict[str, Any] | None:
        return cls.ASSOCIATIONS.get(name)


class Upload:
    """Looks like an uploaded file."""

    filename = "avatar.png"

    def read(self) -> bytes:
        return b""


@pytest.fixture
def article() -> Article:
    return Article(title="Hello", body="World")


@pytest.fixture
def article_builder(article) -> FormBuilder:
    return FormBuilder("article", article, provider=ObjectProvider())


@pytest.fixture
def translator() -> DictTranslator:
    return DictTranslator(
        {
            "simple_form": {
                "labels": {
                    "user": {
                        "email": "E-mail address",
                        "edit": {"email": "Change e-mail"},
                    },
                    "age": "Your age",
                },
                "hints": {"user": {"name": "Your full name"}},
                "placeholders": {"user": {"email": "you@example.com"}},
            }
        }
    )


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class Signup(BaseModel):
    username: str = Field(max_length=20, title="User name")
    email: str
    age: int | None = None
    newsletter: bool = False
    plan: Literal["free", "pro"] = "free"
    born_on: date | None = None
    score: Decimal | None = None
