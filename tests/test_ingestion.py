import pytest

from ingredients.errors import NoDocumentLoaded
from ingredients.services.ingestion import RecipeIngestor


def test_from_html_structured(recipe_html):
    recipe = RecipeIngestor().from_html("soba.html", recipe_html)

    assert recipe.source_name == "soba.html"
    assert [i.name for i in recipe.ingredients] == [
        "soba noodle",
        "peanut butter",
        "soy sauce",
        "chili garlic sauce",
        "salt",
    ]

    peanut_butter = recipe.ingredients[1]
    assert peanut_butter.measure.amount == 0.25
    assert peanut_butter.measure.name == "cup"
    assert peanut_butter.measure.cups == 0.25
    assert peanut_butter.measure.weight == pytest.approx(64.5)

    salt = recipe.ingredients[4]
    assert salt.measure.amount == 0
    assert salt.measure.cups == 0


def test_from_html_tree(list_html):
    recipe = RecipeIngestor().from_html("pancakes.html", list_html)
    assert [i.name for i in recipe.ingredients] == ["flour", "milk", "egg", "sugar"]
    assert recipe.ingredients[2].measure.cups == 0.25


def test_from_html_requires_document():
    with pytest.raises(NoDocumentLoaded):
        RecipeIngestor().from_html("empty.html", "")
    with pytest.raises(NoDocumentLoaded):
        RecipeIngestor().from_html("", "<p>2 cups flour</p>")


def test_from_text():
    text = "2 cups flour\n\n1 cup flour\n1 egg\nPreheat the oven\n"
    recipe = RecipeIngestor().from_text(text)

    assert [i.name for i in recipe.ingredients] == ["flour", "egg"]
    flour = recipe.ingredients[0]
    assert flour.measure.amount == 2
    assert flour.measure.cups == 3


def test_from_text_requires_text():
    with pytest.raises(NoDocumentLoaded):
        RecipeIngestor().from_text(" \n ")


def test_ingredient_list_rendering():
    listing = RecipeIngestor().ingredient_list("1 1/2 cups chopped onion\n3 eggs\n2 tbsp olive oil")
    assert [i.line for i in listing.ingredients] == [
        "1 1/2 cups chopped onion",
        "3 eggs",
        "2 tbsp olive oil",
    ]
    assert str(listing) == (
        "1 1/2 cups onion (chopped)\n"
        "3 whole eggs\n"
        "2 tbsp olive oil\n"
    )


PISTACHIO_CAKE = """
<html>
<body>
<h1>Lemon Pistachio Cake</h1>
<div>
<p>1 cup pistachios</p>
<p>2 cups flour</p>
<p>1 cup sugar</p>
<p>1 tsp baking powder</p>
<p>1/2 tsp salt</p>
<p>2 eggs</p>
<p>1/2 cup butter</p>
<p>1 lemon</p>
<p>1 lemon, zested</p>
<p>1 cup milk</p>
<p>1 tsp vanilla extract</p>
<p>Bake at 350 degrees for 30 minutes</p>
</div>
<p>Preheat the oven.</p>
</body>
</html>
"""


def test_from_html_paragraph_list():
    recipe = RecipeIngestor().from_html("cake.html", PISTACHIO_CAKE)

    assert len(recipe.lines) == 11
    assert len(recipe.ingredients) >= 10
    names = [i.name for i in recipe.ingredients]
    assert names[0] == "pistachio"
    assert "vanilla extract" in names

    lemon = recipe.ingredients[names.index("lemon")]
    assert lemon.measure.amount == 2
    assert lemon.measure.cups == pytest.approx(0.375)


def test_from_html_structured_compound_lines():
    html = """
    <html><head><script type="application/ld+json">
    {"@context": "https://schema.org", "@type": "Recipe",
     "recipeIngredient": [
       "60 grams plus 2 tablespoons creamy peanut butter",
       "2 tablespoons hot chili-garlic sauce",
       "1 tablespoon soy sauce"
     ]}
    </script></head><body></body></html>
    """
    recipe = RecipeIngestor().from_html("noodles.html", html)

    assert all(r.source == "structured" for r in recipe.lines)
    peanut_butter = recipe.ingredients[0]
    assert peanut_butter.name == "peanut butter"
    assert peanut_butter.measure.amount == 60
    assert peanut_butter.measure.name == "grams"
    assert peanut_butter.measure.weight == 60
    assert recipe.ingredients[1].name == "chili garlic sauce"
