"""DTOs for projects (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OwnerRef:
    """Id and display name of the portfolio user that owns a project or skill."""

    id: int
    name: str


@dataclass(frozen=True)
class ProjectCreate:
    """Fields accepted when creating or replacing a project."""

    title: str
    portfolio_user_id: int
    description: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class ProjectResult:
    """Project read-model with its owner reference."""

    id: int
    title: str
    description: str
    image_url: str
    portfolio_user_id: int
    portfolio_user: OwnerRef | None = None


@dataclass(frozen=True)
class ProjectSummary:
    """Flat projection for list views (owner name only)."""

    id: int
    title: str
    description: str
    image_url: str
    portfolio_user_id: int
    portfolio_user_name: str
