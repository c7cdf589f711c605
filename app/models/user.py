# File: app/models/user.py

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"

    # Same id as the identity issued by the credential service
    id: Mapped[str] = mapped_column(String(36), ForeignKey("credentials.id"), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Single use: cleared once redeemed
    email_confirmation_token: Mapped[str | None] = mapped_column(
        String(64), unique=True, index=True, nullable=True
    )
    email_confirmed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
