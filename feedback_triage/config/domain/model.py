"""Model configuration."""

from pydantic import BaseModel, Field


class ModelConfig(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    max_tokens: int = Field(default=150, ge=1)
