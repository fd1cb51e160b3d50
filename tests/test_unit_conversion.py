import pytest

from ingredients.corpus import HERB_CUPS
from ingredients.errors import UnconvertibleUnit
from ingredients.services.unit_conversion import (
    canonical_measure,
    cups_to_measure,
    density_for,
    estimate_weight,
    normalize_to_cups,
)
from ingredients.settings import settings


def test_canonical_measure():
    assert canonical_measure("Tablespoons") == "tbl"
    assert canonical_measure("tsp") == "tsp"
    assert canonical_measure("g") == "gram"
    assert canonical_measure("whole") == ""
    assert canonical_measure("") == ""
    assert canonical_measure("furlong") is None


def test_volume_units():
    assert normalize_to_cups("flour", "cups", 2) == 2.0
    assert normalize_to_cups("sugar", "tbsp", 16) == pytest.approx(1.0)
    assert normalize_to_cups("milk", "ml", 1000) == pytest.approx(4.23)


def test_weight_units_use_density():
    assert normalize_to_cups("flour", "g", 125) == pytest.approx(1.0)
    assert normalize_to_cups("all purpose flour", "grams", 250) == pytest.approx(2.0)


def test_weight_units_default_density():
    assert density_for("mystery powder") == settings.default_density_g_per_cup
    assert normalize_to_cups("mystery powder", "g", settings.default_density_g_per_cup) == pytest.approx(1.0)


def test_whole_items():
    assert normalize_to_cups("egg", "whole", 2) == 0.25
    assert normalize_to_cups("eggs", "", 4) == 0.5
    assert normalize_to_cups("onions", "whole", 2) == 2


def test_fruit_vegetable_and_herb_fallbacks():
    assert normalize_to_cups("apple", "whole", 3) == 3
    assert normalize_to_cups("zucchini", "slice", 2) == 2
    assert normalize_to_cups("basil", "sprig", 3) == pytest.approx(3 * HERB_CUPS)


def test_unconvertible():
    with pytest.raises(UnconvertibleUnit):
        normalize_to_cups("flour", "furlong", 1)
    with pytest.raises(UnconvertibleUnit):
        normalize_to_cups("salt", "whole", 1)


def test_estimate_weight():
    assert estimate_weight("flour", "g", 100, 0.8) == 100
    assert estimate_weight("flour", "lb", 1, 3.6) == pytest.approx(453.592)
    assert estimate_weight("flour", "cups", 2, 2.0) == pytest.approx(250)
    assert estimate_weight("mystery powder", "cups", 1, 1.0) == 0


def test_cups_to_measure():
    assert cups_to_measure(0.5) == (0.5, "cup", "1/2")
    assert cups_to_measure(0.0625) == (1.0, "tablespoon", "1")
    amount, measure, rendered = cups_to_measure(0.0625 / 3)
    assert measure == "teaspoon"
    assert rendered == "1"


def test_cups_to_measure_whole_items():
    assert cups_to_measure(0.375, "eggs") == (3.0, "whole", "3")


def test_density_lookup_keeps_uncountable_names():
    assert normalize_to_cups("panko breadcrumbs", "gram", 60) == pytest.approx(1.0)
