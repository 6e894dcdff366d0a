# foodnote

A small console notebook for food recipes kept as lines of a CSV file.
The prompts and messages are in Indonesian.

## Installing

```
pip install .
```

## Running

```
foodnote
foodnote --database path/to/recipe.csv
```

By default the database is `database/recipe.csv`, relative to the
directory you run the program from. `--database` names another file.

The program shows a banner and then a menu:

```
[1] Buat Resep Baru
[2] Daftar Resep
[3] Cari Resep
[4] Edit Resep
[0] Keluar
```

- **Buat Resep Baru** asks for a dish name, then ingredients (a name,
  then an amount; type `end` as the name to finish), then numbered
  cooking steps (type `end` to finish). The recipe is appended to the
  database as one quoted row.
- **Daftar Resep** lists every row as a recipe, with each ingredient
  as `- name (amount)` and each step as `Langkah N: ...`.
- **Cari Resep** asks for a dish name and shows the first row whose
  second comma-separated field equals it exactly. If there is none, it
  shows "Resep tidak ditemukan" and a `[0] Kembali` prompt.
- **Edit Resep** asks for a numeric recipe ID, shows that recipe, and
  asks for a new name, new ingredients and new steps (type `end` to
  finish the steps). Anything left empty is kept. The file is then
  rewritten.
- **Keluar** (`0`) prints "Terimakasih!" and exits.

An answer outside the menu prints "Pilihan tidak valid" and the menu is
shown again. End of input also ends the program. If the database file
cannot be opened, the program reports `Database tidak ditemukan!` and
returns to the menu; adding a recipe does not create a missing
`database` directory.

## File formats

Adding and listing use rows of three quoted fields:

```
"Nasi Goreng","nasi:1 piring;kecap:2 sdm","Panaskan minyak|Masukkan nasi"
```

Ingredients are `name:amount` pairs separated by `;`; steps are
separated by `|`. Fields are split on commas, so a comma inside a field
is not supported.

Searching and editing read rows of the form `id,name,ingredients,steps`
without quotes. When editing, the first line of the file is treated as
a header and skipped, and the first field of every other row must be an
integer ID. The two row shapes are not converted into each other:
recipes added from the menu carry no ID and cannot be edited by ID.

## Using it from Python

```python
from foodnote.recipe import Ingredient, Recipe
from foodnote.store import RecipeStore

recipe = Recipe(
    name="Nasi Goreng",
    ingredients=[Ingredient("nasi", "1 piring")],
    steps=["Panaskan minyak", "Masukkan nasi"],
)
print(recipe.to_csv_row())
print(Recipe.from_csv_row(recipe.to_csv_row()).describe())

store = RecipeStore("database/recipe.csv")
store.add(recipe)
for stored in store.recipes():
    print(stored.name)
```

- `foodnote.recipe`: `Ingredient`, `Recipe` (`to_csv_row`,
  `from_csv_row`, `describe`) and the helpers `parse_ingredients`,
  `parse_steps` and `strip_quotes`.
- `foodnote.store`: `RecipeStore` with `add`, `recipes`, `raw_lines`,
  `search` (returns a `SearchResult` or `None`), `get` and `update`
  (by integer ID). Errors are `DatabaseNotFoundError` and
  `RecipeNotFoundError`.
- `foodnote.csv_reader`: `read_csv` and `format_csv_line`, which render
  each line as its values each followed by ` | `.
- `foodnote.ui`: `banner`, `title`, `menu_lines`, `parse_choice` and
  `nav`; an invalid answer raises `InvalidChoiceError`.
- `foodnote.cli`: `main` and the menu actions `run_add`, `run_list`,
  `run_search` and `run_edit`, which take a store and `read`/`write`
  callables.

## Tests

```
pip install .[test]
pytest
```