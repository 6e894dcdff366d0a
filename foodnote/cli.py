"""Interactive console for adding, listing, searching and editing recipes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from foodnote.recipe import Ingredient, Recipe
from foodnote.store import (
    DEFAULT_DATABASE,
    DatabaseNotFoundError,
    RecipeNotFoundError,
    RecipeStore,
    SearchResult,
)
from foodnote.ui import BORDER_THIN, InvalidChoiceError, banner, nav, title

Read = Callable[[], str]
Write = Callable[[str], object]

APP_NAME = "Aplikasi Catat Resep"
MAIN_PAGES = ["Buat Resep Baru", "Daftar Resep", "Cari Resep", "Edit Resep", "Keluar"]
_NOT_FOUND_DB = "Database tidak ditemukan!\n"
_LIST_HEADER = " ---------- Daftar Resep Makanan ---------- \n"


def _ask(read: Read, write: Write, prompt: str) -> str:
    write(prompt)
    return read()


def _until_end(read: Read, write: Write, prompt: Callable[[int], str]):
    number = 1
    while True:
        answer = _ask(read, write, prompt(number))
        if answer == "end":
            return
        yield answer
        number += 1


def run_add(store: RecipeStore, read: Read, write: Write) -> Recipe | None:
    """Ask for a new recipe and append it to the store."""
    name = _ask(read, write, "Nama Hidangan: ")
    write("Masukkan bahan-bahan (ketik 'end' untuk selesai): \n")
    ingredients = [
        Ingredient(ingredient, _ask(read, write, "Jumlah: "))
        for ingredient in _until_end(read, write, lambda _: "Nama bahan: ")
    ]
    write("Masukkan cara memasak (ketik 'end' untuk selesai): \n")
    steps = list(_until_end(read, write, lambda n: f"Langkah {n}: "))
    recipe = Recipe(name, ingredients, steps)
    try:
        store.add(recipe)
    except DatabaseNotFoundError:
        write(_NOT_FOUND_DB)
        return None
    write("Resep makanan berhasil ditambahkan.\n")
    return recipe


def run_list(store: RecipeStore, write: Write) -> list[Recipe]:
    """Show every recipe in the store."""
    try:
        recipes = store.recipes()
    except DatabaseNotFoundError:
        write(_NOT_FOUND_DB)
        return []
    write(_LIST_HEADER)
    for recipe in recipes:
        write(recipe.describe())
    return recipes


def run_search(store: RecipeStore, read: Read, write: Write) -> SearchResult | None:
    """Ask for a dish name and show the matching recipe."""
    write(title("Cari Resep"))
    keyword = _ask(read, write, "Nama Hidangan: ")
    write(BORDER_THIN)
    try:
        result = store.search(keyword)
    except DatabaseNotFoundError:
        write(_NOT_FOUND_DB)
        return None
    if result is None:
        write(title("Resep tidak ditemukan"))
        try:
            nav(["Kembali"], read, write)
        except InvalidChoiceError:
            pass
        return None
    write("Resep ditemukan!\n")
    write(f"Nama   : {result.name}\n")
    write(f"Bahan  : {result.ingredients}\n")
    write(f"Langkah: {result.steps}\n")
    return result


def run_edit(store: RecipeStore, read: Read, write: Write) -> SearchResult | None:
    """Ask for a recipe id, show the recipe and store the changes typed in."""
    try:
        store.raw_lines()
    except DatabaseNotFoundError:
        write(_NOT_FOUND_DB)
        return None
    answer = _ask(read, write, "Masukkan ID resep yang ingin diedit; ")
    try:
        recipe_id = int(answer.strip())
        current = store.get(recipe_id)
    except (ValueError, RecipeNotFoundError):
        write("Resep tidak ditemukan!\n")
        return None

    write("Resep ditemukan!\n")
    write(f"Nama Hidangan: {current.name}\n")
    write(f"Bahan-bahan: {current.ingredients}\n")
    write("Cara Memasak: ")
    for number, step in enumerate(current.step_list, start=1):
        write(f" {number}. {step}\n")

    name = _ask(read, write, "\nMasukkan nama hidangan baru (jika kosong = tidak diubah): ")
    ingredients = _ask(read, write, "Masukkan bahan-bahan baru (jika kosong = tidak diubah): ")
    write("Masukkan langkah memasak baru (JIKA SELESAI, KETIK end): ")
    steps = list(_until_end(read, write, lambda n: f"{n}."))

    updated = store.update(recipe_id, name, ingredients, steps)
    write("Resep berhasil diperbarui!\n")
    return updated


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu loop until the user chooses to leave."""
    parser = argparse.ArgumentParser(prog="foodnote", description=APP_NAME)
    parser.add_argument(
        "--database",
        default=str(DEFAULT_DATABASE),
        help="path of the recipe CSV file",
    )
    args = parser.parse_args(argv)
    store = RecipeStore(args.database)
    read = input
    write = sys.stdout.write

    write(banner(APP_NAME))
    try:
        while True:
            try:
                choice = nav(MAIN_PAGES, read, write)
            except InvalidChoiceError:
                continue
            if choice == 0:
                write("Terimakasih!\n")
                break
            if choice == 1:
                run_add(store, read, write)
            elif choice == 2:
                run_list(store, write)
            elif choice == 3:
                run_search(store, read, write)
            elif choice == 4:
                run_edit(store, read, write)
    except EOFError:
        write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())