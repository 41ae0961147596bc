"""DTOs for skills (no dependency on ORM)."""

from dataclasses import dataclass

from app.application.dtos.project import OwnerRef


@dataclass(frozen=True)
class SkillCreate:
    """Fields accepted when creating or replacing a skill."""

    name: str
    portfolio_user_id: int
    level: str = ""


@dataclass(frozen=True)
class SkillResult:
    id: int
    name: str
    level: str
    portfolio_user_id: int
    portfolio_user: OwnerRef | None = None


@dataclass(frozen=True)
class SkillSummary:
    """Flat projection for list views (owner name only)."""

    id: int
    name: str
    level: str
    portfolio_user_id: int
    portfolio_user_name: str
