from ingredients.parsing.matcher import Trie, find_ingredients, find_measures, find_numbers


def test_trie_reports_word_start():
    trie = Trie([" cat ", " dog "])
    matches = trie.find_all(" a cat and a dog ")
    assert [(m.word, m.position) for m in matches] == [("cat", 3), ("dog", 13)]


def test_trie_prefers_longest_entry():
    trie = Trie([" sugar ", " brown sugar "])
    matches = trie.find_all(" 1 cup brown sugar ")
    assert [m.word for m in matches] == ["brown sugar"]


def test_trie_matches_whole_words_only():
    trie = Trie([" oil "])
    assert trie.find_all(" boiling water ") == []


def test_trie_empty_text():
    assert Trie([" a "]).find_all("") == []


def test_find_ingredients_longest_name():
    matches = find_ingredients(" 1 tbsp extra virgin olive oil ")
    assert [m.word for m in matches] == ["extra virgin olive oil"]


def test_find_ingredients_plurals():
    assert [m.word for m in find_ingredients(" 2 eggs ")] == ["eggs"]


def test_find_measures_and_numbers():
    line = " 2 cups chopped onion "
    assert [(m.word, m.position) for m in find_measures(line)] == [("cups", 3)]
    assert [(m.word, m.position) for m in find_numbers(line)] == [("2", 1)]
    assert [(m.word, m.position) for m in find_ingredients(line)] == [("onion", 16)]


def test_find_numbers_mixed_fraction():
    assert [m.word for m in find_numbers(" 1  ½  cups flour ")] == ["1", "½"]


def test_find_numbers_words():
    assert [m.word for m in find_numbers(" two cloves garlic ")] == ["two"]


def test_longer_compound_name_wins():
    trie = Trie([" soy ", " soy sauce "])
    assert [m.word for m in trie.find_all(" 2 tbsp soy sauce ")] == ["soy sauce"]
    assert [m.word for m in find_ingredients(" 2 tbsp soy sauce ")] == ["soy sauce"]
