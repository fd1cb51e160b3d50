import json

import pytest

from ingredients.errors import MalformedEmbeddedData, NoDocumentLoaded
from ingredients.parsing.tree import extract_ingredient_lines, extract_tree_lines, lines_from_script
from ingredients.services.ingestion import RecipeIngestor

EMBEDDED_LINES = ["2 cups flour", "1 cup sugar", "2 eggs", "1 tsp salt", "1 cup milk"]


def test_extract_tree_lines_from_list(list_html):
    lines = extract_tree_lines(list_html)
    assert [r.original for r in lines] == ["2 cups flour", "1 cup milk", "2 eggs", "1 tbsp sugar"]
    assert all(r.source == "freeform" for r in lines)


def test_extract_tree_lines_ignores_short_containers():
    html = "<div><p>2 cups flour</p><p>1 cup milk</p></div>"
    assert extract_tree_lines(html) == []


def test_extract_tree_lines_ignores_prose():
    html = (
        "<div><p>Preheat the oven.</p><p>Grease a pan.</p>"
        "<p>Bake for an hour.</p><p>Let it cool.</p></div>"
    )
    assert extract_tree_lines(html) == []


def test_extract_tree_lines_skips_style_text():
    html = (
        "<ul><style>li { color: red }</style>"
        "<li>2 cups flour</li><li>1 cup milk</li><li>1 tbsp sugar</li></ul>"
    )
    lines = extract_tree_lines(html)
    assert [r.original for r in lines] == ["2 cups flour", "1 cup milk", "1 tbsp sugar"]


def test_lines_from_script():
    payload = json.dumps({"props": {"recipe": {"title": "Cake", "ingredients": EMBEDDED_LINES}}})
    lines = lines_from_script(payload)
    assert [r.original for r in lines] == EMBEDDED_LINES


def test_lines_from_script_low_score():
    payload = json.dumps({"tags": ["dessert", "easy", "quick"]})
    assert lines_from_script(payload) == []


def test_lines_from_script_malformed():
    with pytest.raises(MalformedEmbeddedData):
        lines_from_script("window.__data = {};")
    with pytest.raises(MalformedEmbeddedData):
        lines_from_script('"just a string"')


def test_extract_tree_lines_embedded_json_wins():
    payload = json.dumps({"recipe": {"ingredients": EMBEDDED_LINES}})
    html = (
        "<html><body>"
        "<ul><li>1 cup rice</li><li>2 cups water</li><li>1 tsp salt</li></ul>"
        f'<script type="application/json">{payload}</script>'
        "</body></html>"
    )
    lines = extract_tree_lines(html)
    assert [r.original for r in lines] == EMBEDDED_LINES


def test_extract_ingredient_lines_prefers_structured(recipe_html):
    lines = extract_ingredient_lines(recipe_html)
    assert len(lines) == 5
    assert lines[0].source == "structured"


def test_extract_ingredient_lines_falls_back_to_tree(list_html):
    lines = extract_ingredient_lines(list_html)
    assert len(lines) == 4
    assert lines[0].source == "freeform"


def test_extract_ingredient_lines_small_structured_recipe_falls_back():
    html = (
        '<html><head><script type="application/ld+json">'
        '{"@context": "https://schema.org", "@type": "Recipe", '
        '"recipeIngredient": ["2 cups flour", "1 cup milk"]}'
        "</script></head><body>"
        "<ul><li>2 cups flour</li><li>1 cup milk</li><li>2 eggs</li></ul>"
        "</body></html>"
    )
    lines = extract_ingredient_lines(html)
    assert [r.original for r in lines] == ["2 cups flour", "1 cup milk", "2 eggs"]


def test_extract_ingredient_lines_empty():
    with pytest.raises(NoDocumentLoaded):
        extract_ingredient_lines("   ")


INGREDIENT_LIST = "<ul><li>2 cups flour</li><li>1 cup milk</li><li>2 eggs</li><li>1 tbsp sugar</li></ul>"


def test_lines_from_script_too_deep():
    with pytest.raises(MalformedEmbeddedData):
        lines_from_script("[" * 5000 + "]" * 5000)


def test_deeply_nested_script_is_skipped():
    html = (
        "<html><body>"
        + INGREDIENT_LIST
        + '<script type="application/json">' + "[" * 5000 + "]" * 5000 + "</script>"
        + "</body></html>"
    )
    recipe = RecipeIngestor().from_html("deep.html", html)
    assert [i.name for i in recipe.ingredients] == ["flour", "milk", "egg", "sugar"]


def test_extract_tree_lines_deeply_nested_page():
    html = "<div>" * 1200 + INGREDIENT_LIST + "</div>" * 1200
    lines = extract_tree_lines(html)
    assert [r.original for r in lines] == ["2 cups flour", "1 cup milk", "2 eggs", "1 tbsp sugar"]


def test_lines_from_script_nested_arrays():
    payload = json.dumps([[[{"steps": ["Mix", "Bake"]}, {"ingredients": EMBEDDED_LINES}]]])
    assert [r.original for r in lines_from_script(payload)] == EMBEDDED_LINES


def _list_of(count):
    return "<ul>" + "<li>1 cup flour</li>" * count + "</ul>"


def test_extract_tree_lines_largest_container():
    assert len(extract_tree_lines(_list_of(24))) == 24


def test_extract_tree_lines_ignores_oversized_containers():
    assert extract_tree_lines(_list_of(25)) == []
