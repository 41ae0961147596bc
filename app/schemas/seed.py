"""Seed API schemas."""

from pydantic import BaseModel


class SeedResponse(BaseModel):
    message: str
    portfolio_users_created: int
