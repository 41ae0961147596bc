"""Account ORM model for authentication."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import UserRole
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Account(CuidMixin, TimestampMixin, Base):
    """Login account. Table: account. Email is unique; role is Admin or User."""

    __tablename__ = "account"

    email: Mapped[str] = mapped_column(String(256), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.USER.value
    )

    __table_args__ = (
        CheckConstraint(
            "role IN ({})".format(
                ", ".join("'{}'".format(v.replace("'", "''")) for v in UserRole.values())
            ),
            name="account_role_check",
        ),
    )
