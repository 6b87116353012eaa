"""Pydantic request models for API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class AnalyzeRequest(BaseModel):
    """Request to analyze a prompt.

    ``prompt`` is accepted as any JSON value so the prompt validator can
    report a non-string prompt with its own error code.
    """

    prompt: Any = Field(default=None, description="User prompt (max 400 characters)")


class EnhanceRequest(BaseModel):
    """Request to enhance a prompt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    prompt: Any = Field(default=None, description="User prompt (max 400 characters)")
    include_web_search: StrictBool = Field(
        default=False, description="Attach trend awareness to the enhancement"
    )
