"""Base model for validated, immutable settings."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model for settings loaded from configuration files.

    Instances are frozen so settings cannot change once a run has started.
    """

    model_config = ConfigDict(frozen=True)
