"""PortfolioUser ORM model. Owns projects and skills."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntIdMixin

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.project import Project
    from app.infrastructure.persistence.models.skill import Skill


class PortfolioUser(IntIdMixin, Base):
    """Portfolio owner. Table: portfolio_user. Deleting a user deletes its projects and skills."""

    __tablename__ = "portfolio_user"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    profile_image_url: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    projects: Mapped[list["Project"]] = relationship(
        back_populates="portfolio_user",
        cascade="all, delete-orphan",
        order_by="Project.id",
    )
    skills: Mapped[list["Skill"]] = relationship(
        back_populates="portfolio_user",
        cascade="all, delete-orphan",
        order_by="Skill.id",
    )
