"""Pydantic schemas for the read-only solution catalog."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from impactmap.schemas.goals import CamelModel


class SolutionSchema(CamelModel):
    """A product, platform, service or integration that can contribute to goals."""

    id: str
    name: str
    description: str = ""
    status: Literal["active", "archived", "draft"] = "active"
    category: Literal["product", "service", "platform", "integration"]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    owner_name: str | None = Field(None, description="Display name of the solution owner")
