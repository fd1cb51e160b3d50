import logging

from ..errors import NoDocumentLoaded
from ..parsing.models import IngredientList, Recipe
from ..parsing.scoring import score_line
from ..parsing.tree import extract_ingredient_lines
from .assembly import assemble_recipe

logger = logging.getLogger("ingredients.ingestion")


class RecipeIngestor:
    """Document level entry points: a whole page or a block of text in, a Recipe out."""

    def from_html(self, name: str, html: str) -> Recipe:
        if not name or not html:
            raise NoDocumentLoaded("no document loaded")

        lines = extract_ingredient_lines(html)
        recipe = assemble_recipe(lines, source_name=name, source_content=html)
        logger.info(f"{name}: {len(recipe.ingredients)} ingredients from {len(lines)} candidate lines")
        return recipe

    def from_text(self, text: str, name: str = "lines") -> Recipe:
        """Each non-empty line of the text is a candidate ingredient line."""
        if not text or not text.strip():
            raise NoDocumentLoaded("no document loaded")

        records = []
        for line in text.split("\n"):
            line = line.strip()
            if not line:
                continue
            _, record = score_line(line)
            records.append(record)

        recipe = assemble_recipe(records, source_name=name, source_content=text)
        logger.info(f"{name}: {len(recipe.ingredients)} ingredients from {len(records)} lines")
        return recipe

    def ingredient_list(self, text: str) -> IngredientList:
        return self.from_text(text).ingredient_list()
