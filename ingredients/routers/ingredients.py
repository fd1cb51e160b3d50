"""
Router for ingredient extraction.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..errors import NoDocumentLoaded
from ..parsing.models import Recipe
from ..schemas import ParsedLineOut, ParseHtmlRequest, ParseTextRequest, RecipeOut
from ..services.ingestion import RecipeIngestor
from ..settings import settings

logger = logging.getLogger("ingredients.api")

router = APIRouter()


def _check_size(document: str) -> None:
    if len(document.encode("utf-8")) > settings.max_document_bytes:
        raise HTTPException(status_code=413, detail="Document too large")


def _recipe_out(recipe: Recipe) -> RecipeOut:
    return RecipeOut(
        source_name=recipe.source_name,
        ingredients=recipe.ingredients,
        lines=[
            ParsedLineOut(original=r.original, source=r.source, ingredient=r.ingredient)
            for r in recipe.lines
        ],
        display=str(recipe.ingredient_list()),
    )


@router.post("/parse", response_model=RecipeOut)
def parse_html(req: ParseHtmlRequest):
    """
    Extract and normalize the ingredients of an HTML recipe page.
    """
    _check_size(req.html)
    try:
        recipe = RecipeIngestor().from_html(req.name or "string", req.html)
    except NoDocumentLoaded as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _recipe_out(recipe)


@router.post("/parse-text", response_model=RecipeOut)
def parse_text(req: ParseTextRequest):
    """
    Parse one ingredient per line of plain text.
    """
    _check_size(req.text)
    try:
        recipe = RecipeIngestor().from_text(req.text)
    except NoDocumentLoaded as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _recipe_out(recipe)
