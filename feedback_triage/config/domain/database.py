"""Feedback store configuration."""

from pathlib import Path

from pydantic import BaseModel


class DatabaseConfig(BaseModel, frozen=True):
    path: Path = Path("./feedback.db")
