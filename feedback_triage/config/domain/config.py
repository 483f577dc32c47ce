"""Top-level TriageConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from feedback_triage.config.domain.batch import BatchConfig
from feedback_triage.config.domain.database import DatabaseConfig
from feedback_triage.config.domain.model import ModelConfig


class TriageConfig(BaseModel, frozen=True):
    """Root configuration aggregate for feedback-triage."""

    name: str = Field(min_length=1)
    model: ModelConfig
    database: DatabaseConfig = DatabaseConfig()
    batch: BatchConfig = BatchConfig()
