"""Batch classification configuration."""

from pydantic import BaseModel, Field


class BatchConfig(BaseModel, frozen=True):
    limit: int = Field(default=50, ge=1)
