import pytest

from foodnote.recipe import Ingredient, Recipe
from foodnote.store import (
    DatabaseNotFoundError,
    RecipeNotFoundError,
    RecipeStore,
    SearchResult,
)

HEADER = "id,nama,bahan,langkah"
ROW_ONE = "1,Nasi Goreng,nasi;telur,tumis|sajikan"
ROW_TWO = "2,Sayur Asem,asam;sayur,rebus"


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "recipe.csv"
    path.write_text(f"{HEADER}\n{ROW_ONE}\n{ROW_TWO}\n", encoding="utf-8")
    return RecipeStore(path)


def test_add_then_read_round_trip(tmp_path):
    store = RecipeStore(tmp_path / "recipe.csv")
    recipe = Recipe("Ayam Goreng", [Ingredient("ayam", "1 ekor")], ["goreng", "sajikan"])
    store.add(recipe)
    assert store.raw_lines() == [recipe.to_csv_row()]
    assert store.recipes() == [recipe]


def test_add_appends(tmp_path):
    store = RecipeStore(tmp_path / "recipe.csv")
    first = Recipe("A", [Ingredient("x", "1")], ["s"])
    second = Recipe("B", [Ingredient("y", "2")], ["t"])
    store.add(first)
    store.add(second)
    assert store.recipes() == [first, second]


def test_add_missing_directory(tmp_path):
    store = RecipeStore(tmp_path / "missing" / "recipe.csv")
    with pytest.raises(DatabaseNotFoundError):
        store.add(Recipe("A"))


def test_read_missing_file(tmp_path):
    store = RecipeStore(tmp_path / "recipe.csv")
    with pytest.raises(DatabaseNotFoundError):
        store.recipes()
    with pytest.raises(DatabaseNotFoundError):
        store.raw_lines()


def test_raw_lines(db):
    assert db.raw_lines() == [HEADER, ROW_ONE, ROW_TWO]


def test_search_found(db):
    result = db.search("Nasi Goreng")
    assert result == SearchResult("1", "Nasi Goreng", "nasi;telur", "tumis|sajikan")


def test_search_keeps_rest_of_line_as_steps(tmp_path):
    path = tmp_path / "recipe.csv"
    path.write_text("7,Soto,daging,rebus,aduk\n", encoding="utf-8")
    result = RecipeStore(path).search("Soto")
    assert result.steps == "rebus,aduk"


def test_search_missing_returns_none(db):
    assert db.search("Rendang") is None
    assert db.search("nasi goreng") is None


def test_get_by_id(db):
    result = db.get(2)
    assert result.name == "Sayur Asem"
    assert result.ingredients == "asam;sayur"
    assert result.step_list == ["rebus"]


def test_get_steps_stop_at_comma(tmp_path):
    path = tmp_path / "recipe.csv"
    path.write_text(f"{HEADER}\n3,Soto,daging,rebus|aduk,extra\n", encoding="utf-8")
    result = RecipeStore(path).get(3)
    assert result.steps == "rebus|aduk"
    assert result.step_list == ["rebus", "aduk"]


def test_get_skips_header(tmp_path):
    path = tmp_path / "recipe.csv"
    path.write_text("1,Header,a,b\n2,Soto,c,d\n", encoding="utf-8")
    store = RecipeStore(path)
    with pytest.raises(RecipeNotFoundError):
        store.get(1)
    assert store.get(2).name == "Soto"


def test_get_unknown_id(db):
    with pytest.raises(RecipeNotFoundError):
        db.get(99)


def test_get_non_numeric_row(tmp_path):
    path = tmp_path / "recipe.csv"
    path.write_text(f'{HEADER}\n"Nasi","a:1","s"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        RecipeStore(path).get(1)


def test_update_replaces_given_fields(db):
    updated = db.update(1, "Nasi Uduk", "", ["masak", "sajikan"])
    assert updated.name == "Nasi Uduk"
    assert updated.ingredients == "nasi;telur"
    assert updated.step_list == ["masak", "sajikan"]
    assert db.raw_lines() == [HEADER, "1,Nasi Uduk,nasi;telur,masak|sajikan", ROW_TWO]


def test_update_empty_keeps_everything(db):
    before = db.get(2)
    assert db.update(2, "", "", []) == before
    assert db.raw_lines() == [HEADER, ROW_ONE, ROW_TWO]


def test_update_leading_empty_steps_dropped(db):
    updated = db.update(2, "", "", ["", "a", "", "b"])
    assert updated.steps == "a||b"


def test_update_missing_leaves_file(db):
    with pytest.raises(RecipeNotFoundError):
        db.update(42, "X", "Y", ["Z"])
    assert db.raw_lines() == [HEADER, ROW_ONE, ROW_TWO]