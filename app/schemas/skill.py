"""Skill API schemas."""

from pydantic import BaseModel, Field

from app.application.dtos.skill import SkillCreate


class SkillRequest(BaseModel):
    """Request body for POST (create) and PUT (replace)."""

    name: str = Field(..., min_length=1, max_length=50)
    level: str = Field(default="", max_length=20)
    portfolio_user_id: int = Field(..., ge=1)

    def to_dto(self) -> SkillCreate:
        return SkillCreate(
            name=self.name, level=self.level, portfolio_user_id=self.portfolio_user_id
        )
