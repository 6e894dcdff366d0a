"""Recipe records and their quoted CSV row format."""

from __future__ import annotations

from dataclasses import dataclass, field as _field

_RULE = "-------------------------------------------"


def _split(text: str, separator: str) -> list[str]:
    if not text:
        return []
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def strip_quotes(field: str) -> str:
    """Drop the first and last character of a field that starts with a quote."""
    if field.startswith('"'):
        return field[1:-1]
    return field


def parse_ingredients(text: str) -> list[Ingredient]:
    """Parse 'name:amount;name:amount'; pairs without a colon are skipped."""
    ingredients = []
    for pair in _split(text, ";"):
        name, colon, amount = pair.partition(":")
        if colon:
            ingredients.append(Ingredient(name, amount))
    return ingredients


def parse_steps(text: str) -> list[str]:
    """Parse steps separated by '|'."""
    return _split(text, "|")


@dataclass
class Ingredient:
    """One ingredient and its amount."""

    name: str
    amount: str


@dataclass
class Recipe:
    """A dish with its ingredients and cooking steps."""

    name: str
    ingredients: list[Ingredient] = _field(default_factory=list)
    steps: list[str] = _field(default_factory=list)

    def to_csv_row(self) -> str:
        """Return the row as stored in the recipe database, without newline."""
        ingredients = ";".join(f"{i.name}:{i.amount}" for i in self.ingredients)
        steps = "|".join(self.steps)
        return f'"{self.name}","{ingredients}","{steps}"'

    @classmethod
    def from_csv_row(cls, line: str) -> Recipe:
        """Build a recipe from the first three comma-separated fields of a row."""
        fields = line.split(",")
        name, ingredients, steps = (fields + ["", "", ""])[:3]
        return cls(
            strip_quotes(name),
            parse_ingredients(strip_quotes(ingredients)),
            parse_steps(strip_quotes(steps)),
        )

    def describe(self) -> str:
        """Return the human-readable listing of the recipe."""
        lines = [f"Nama Hidangan : {self.name}", "Bahan-bahan   :"]
        lines += [f"- {i.name} ({i.amount})" for i in self.ingredients]
        lines.append("Cara Memasak  :")
        lines += [
            f"Langkah {number}: {step}"
            for number, step in enumerate(self.steps, start=1)
        ]
        lines.append(_RULE)
        return "\n".join(lines) + "\n"