"""Pydantic schemas for the HTTP API.

Request/response models for:
- Ingredient parsing (HTML pages and plain text)
- Cup normalization
"""

from typing import Optional

from pydantic import BaseModel, Field

from .parsing.models import Ingredient


# --- Parsing ---

class ParseHtmlRequest(BaseModel):
    html: str
    name: Optional[str] = Field(None, max_length=2000)


class ParseTextRequest(BaseModel):
    text: str


class ParsedLineOut(BaseModel):
    original: str
    source: str
    ingredient: Ingredient


class RecipeOut(BaseModel):
    source_name: str
    ingredients: list[Ingredient]
    lines: list[ParsedLineOut]
    display: str


# --- Units ---

class CupsRequest(BaseModel):
    ingredient: str = Field(..., min_length=1, max_length=200)
    unit: str = Field("whole", max_length=50)
    amount: float = Field(..., ge=0)


class CupsResponse(BaseModel):
    cups: float
    weight: float
    display_amount: float
    display_unit: str
    display: str
