"""DTOs for portfolio users (no dependency on ORM)."""

from dataclasses import dataclass, field

from app.application.dtos.project import ProjectResult
from app.application.dtos.skill import SkillResult


@dataclass(frozen=True)
class PortfolioUserCreate:
    """Fields accepted when creating or replacing a portfolio user."""

    name: str
    bio: str = ""
    profile_image_url: str = ""


@dataclass(frozen=True)
class PortfolioUserResult:
    """Portfolio user with its projects and skills embedded."""

    id: int
    name: str
    bio: str
    profile_image_url: str
    projects: list[ProjectResult] = field(default_factory=list)
    skills: list[SkillResult] = field(default_factory=list)


@dataclass(frozen=True)
class PortfolioUserSummary:
    """Lightweight projection for list views: counts instead of collections."""

    id: int
    name: str
    bio: str
    profile_image_url: str
    project_count: int
    skill_count: int
