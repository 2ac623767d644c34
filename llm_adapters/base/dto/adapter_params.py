"""Typed parameter object for provider adapter initialization.

Purpose
-------
Capture the common constructor parameters of every adapter in one validated
DTO used at the factory boundary, instead of long keyword lists.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Failure modes
-------------
- Pure data container. ``pydantic.ValidationError`` is raised for values of
  the wrong type or out of range.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    api_key:
        Opaque credential passed straight to the adapter.
    model:
        Model identifier to request.
    max_tokens:
        Optional completion token cap (positive).
    temperature:
        Optional sampling temperature in ``[0.0, 2.0]``.
    timeout_seconds:
        Optional SDK request timeout (positive).
    base_url:
        Optional API base URL override (OpenAI and Anthropic only).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    base_url: Optional[str] = None


__all__ = ["AdapterParams"]
