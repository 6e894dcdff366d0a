"""The recipe database: a line-oriented CSV file on disk."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from foodnote.recipe import Recipe, parse_steps

DEFAULT_DATABASE = Path("database") / "recipe.csv"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DatabaseNotFoundError(FileNotFoundError):
    """Raised when the recipe database cannot be opened."""


class RecipeNotFoundError(LookupError):
    """Raised when no recipe has the requested id."""


@dataclass(frozen=True)
class SearchResult:
    """A recipe row in 'id,name,ingredients,steps' form, fields kept as text."""

    recipe_id: str
    name: str
    ingredients: str
    steps: str

    @property
    def step_list(self) -> list[str]:
        """The cooking steps split on '|'."""
        return parse_steps(self.steps)


def _parse_id(token: str) -> int:
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"invalid recipe id: {token!r}")
    return int(match.group(1))


def _join_steps(steps: Iterable[str]) -> str:
    joined = ""
    for step in steps:
        if joined:
            joined += "|"
        joined += step
    return joined


def _pad(parts: list[str], count: int) -> list[str]:
    return (parts + [""] * count)[:count]


class RecipeStore:
    """Reads and writes recipes kept one per line in a CSV file."""

    def __init__(self, path: str | PathLike[str] = DEFAULT_DATABASE) -> None:
        self.path = Path(path)

    def _read_lines(self) -> list[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as error:
            raise DatabaseNotFoundError(str(self.path)) from error
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def add(self, recipe: Recipe) -> None:
        """Append a recipe as a quoted CSV row."""
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(recipe.to_csv_row() + "\n")
        except FileNotFoundError as error:
            raise DatabaseNotFoundError(str(self.path)) from error

    def recipes(self) -> list[Recipe]:
        """Return every row parsed as a recipe."""
        return [Recipe.from_csv_row(line) for line in self._read_lines()]

    def raw_lines(self) -> list[str]:
        """Return the rows of the database exactly as stored."""
        return self._read_lines()

    def search(self, name: str) -> SearchResult | None:
        """Return the first row whose name field equals name, or None."""
        for line in self._read_lines():
            recipe_id, recipe_name, ingredients, steps = _pad(line.split(",", 3), 4)
            if recipe_name == name:
                return SearchResult(recipe_id, recipe_name, ingredients, steps)
        return None

    def _find(self, lines: list[str], recipe_id: int) -> tuple[int, SearchResult]:
        for index, line in enumerate(lines[1:], start=1):
            parts = line.split(",")
            current = _parse_id(parts[0])
            if current == recipe_id:
                name, ingredients, steps = _pad(parts[1:], 3)
                return index, SearchResult(str(current), name, ingredients, steps)
        raise RecipeNotFoundError(recipe_id)

    def get(self, recipe_id: int) -> SearchResult:
        """Return the row with the given id; the first line is a header."""
        _, result = self._find(self._read_lines(), recipe_id)
        return result

    def update(
        self,
        recipe_id: int,
        name: str,
        ingredients: str,
        steps: Iterable[str],
    ) -> SearchResult:
        """Replace the fields given non-empty and rewrite the database."""
        lines = self._read_lines()
        index, current = self._find(lines, recipe_id)
        new_steps = _join_steps(steps)
        updated = SearchResult(
            current.recipe_id,
            name or current.name,
            ingredients or current.ingredients,
            new_steps or current.steps,
        )
        lines[index] = ",".join(
            (updated.recipe_id, updated.name, updated.ingredients, updated.steps)
        )
        self.path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return updated