"""Skill ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntIdMixin

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.portfolio_user import PortfolioUser


class Skill(IntIdMixin, Base):
    """Skill with a free-text level (e.g. Beginner, Advanced). Table: skill."""

    __tablename__ = "skill"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    level: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    portfolio_user_id: Mapped[int] = mapped_column(
        ForeignKey("portfolio_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    portfolio_user: Mapped["PortfolioUser"] = relationship(back_populates="skills")
