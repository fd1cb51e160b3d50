import pytest
from fastapi.testclient import TestClient

from ingredients.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def recipe_html():
    """A page with a schema.org Recipe in JSON-LD."""
    return """
    <html>
    <head>
    <script type="application/ld+json">
    {
      "@context": "https://schema.org",
      "@type": "Recipe",
      "name": "Peanut Soba Noodles",
      "recipeIngredient": [
        "8 ounces soba noodles",
        "1/4 cup peanut butter",
        "2 tablespoons soy sauce",
        "1 tablespoon chili garlic sauce",
        "salt to taste"
      ]
    }
    </script>
    </head>
    <body><h1>Peanut Soba Noodles</h1><p>Cook the noodles.</p></body>
    </html>
    """


@pytest.fixture
def list_html():
    """A page without structured data; ingredients sit in a plain list."""
    return (
        "<html><body>"
        "<h1>Pancakes</h1>"
        "<ul>"
        "<li>2 cups flour</li>"
        "<li>1 cup milk</li>"
        "<li>2 eggs</li>"
        "<li>1 tbsp sugar</li>"
        "</ul>"
        "<p>Mix everything and cook on a hot griddle.</p>"
        "</body></html>"
    )
