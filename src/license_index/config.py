"""Configuration models for the license indexing core."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class ClassifierConfig(BaseModel):
    """Configures a classifier session: match threshold and corpus key layout."""

    threshold: float = Field(default=0.8, gt=0.0, le=1.0)
    key_separator: str = Field(default=os.sep, min_length=1)


class TokenizerConfig(BaseModel):
    """Configures the baseline tokenizer."""

    lowercase: bool = True
    encoding: str = Field(default="utf-8", min_length=1)
