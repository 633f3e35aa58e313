# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import secrets
from datetime import UTC, datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from carshop.infrastructure.db.session import Base


def new_record_id() -> str:
    return secrets.token_hex(8)


class User(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    fullname: Mapped[str] = mapped_column(String(128))
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    is_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), index=True
    )


class Car(Base):
    __tablename__ = "cars"
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    vendor: Mapped[str] = mapped_column(String(128), index=True)
    speed: Mapped[float] = mapped_column(Float)
    price: Mapped[float] = mapped_column(Float, index=True)
    # Back-reference only; removing a user never touches their cars
    owner_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    owner_fullname: Mapped[str] = mapped_column(String(128))
    msgs: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
