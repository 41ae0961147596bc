"""Portfolio user API schemas."""

from pydantic import BaseModel, Field

from app.application.dtos.portfolio_user import PortfolioUserCreate


class PortfolioUserRequest(BaseModel):
    """Request body for POST (create) and PUT (replace)."""

    name: str = Field(..., min_length=1, max_length=100)
    bio: str = Field(default="", max_length=500)
    profile_image_url: str = Field(default="", max_length=255)

    def to_dto(self) -> PortfolioUserCreate:
        return PortfolioUserCreate(
            name=self.name, bio=self.bio, profile_image_url=self.profile_image_url
        )
