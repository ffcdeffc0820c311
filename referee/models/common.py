"""Shared base model used across referee domain models."""

from pydantic import BaseModel


class RefereeBase(BaseModel):
    """Base model with common configuration for all referee Pydantic models."""

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }
