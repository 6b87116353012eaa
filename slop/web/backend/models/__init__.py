"""Pydantic models for API requests and responses."""

from .requests import AnalyzeRequest, EnhanceRequest
from .responses import (
    AnalyzeData,
    AnalyzeResponse,
    AnalyzeScenesMetadata,
    AnalyzeScenesResponse,
    ApiErrorResponse,
    EnhanceData,
    EnhanceMetadata,
    EnhanceResponse,
    SceneBreakdown,
)

__all__ = [
    # Requests
    "AnalyzeRequest",
    "EnhanceRequest",
    # Responses
    "AnalyzeData",
    "AnalyzeResponse",
    "AnalyzeScenesMetadata",
    "AnalyzeScenesResponse",
    "ApiErrorResponse",
    "EnhanceData",
    "EnhanceMetadata",
    "EnhanceResponse",
    "SceneBreakdown",
]
