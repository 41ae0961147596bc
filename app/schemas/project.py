"""Project API schemas."""

from pydantic import BaseModel, Field

from app.application.dtos.project import ProjectCreate


class ProjectRequest(BaseModel):
    """Request body for POST (create) and PUT (replace)."""

    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=1000)
    image_url: str = Field(default="", max_length=255)
    portfolio_user_id: int = Field(..., ge=1)

    def to_dto(self) -> ProjectCreate:
        return ProjectCreate(
            title=self.title,
            description=self.description,
            image_url=self.image_url,
            portfolio_user_id=self.portfolio_user_id,
        )
