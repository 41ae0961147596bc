"""Project ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntIdMixin

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.portfolio_user import PortfolioUser


class Project(IntIdMixin, Base):
    """Portfolio project. Table: project. FK portfolio_user_id with CASCADE delete."""

    __tablename__ = "project"

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    portfolio_user_id: Mapped[int] = mapped_column(
        ForeignKey("portfolio_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    portfolio_user: Mapped["PortfolioUser"] = relationship(back_populates="projects")
