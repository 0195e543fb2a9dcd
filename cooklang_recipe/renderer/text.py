"""
Render a parsed recipe as plain text, e.g. for display in a terminal.

.. autofunction:: render_recipe

.. autofunction:: render_step

.. autofunction:: render_ingredient
"""

from typing import Dict, List

from cooklang_recipe.recipe import (
    Number,
    Ingredient,
    Cookware,
    Timer,
    Text,
    Step,
    ParseResult,
)

from cooklang_recipe.number_formatting import format_scaled

__all__ = [
    "render_recipe",
    "render_step",
    "render_ingredient",
]


def _join_nonempty(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def render_ingredient(ingredient: Ingredient, factor: Number = 1) -> str:
    """
    Render an ingredient as 'name: quantity units', scaling the quantity by
    ``factor``.
    """
    amount = _join_nonempty(
        format_scaled(ingredient.quantity, factor), ingredient.units
    )
    if amount:
        return f"{ingredient.name}: {amount}"
    else:
        return ingredient.name


def render_step(step: Step) -> str:
    """
    Render a step as a sentence. Ingredients and cookware are shown by name
    while timers are shown as their (unscaled) duration.
    """
    out = ""
    for part in step:
        if isinstance(part, (Ingredient, Cookware)):
            out += part.name
        elif isinstance(part, Timer):
            out += _join_nonempty(format_scaled(part.quantity), part.units)
            if part.name:
                out += f" ({part.name})"
        elif isinstance(part, Text):
            out += part.value
    return out


def _heading(title: str, underline: str) -> List[str]:
    return [title, underline * len(title)]


def render_recipe(result: ParseResult, factor: Number = 1) -> str:
    """
    Render a complete recipe: its title and metadata, ingredient list (scaled
    by ``factor``), cookware, numbered method and shopping list. Empty
    sections are omitted.
    """
    sections: List[List[str]] = []

    metadata = dict(result.metadata)
    title = metadata.pop("title", None)
    if title:
        sections.append(_heading(title, "="))
    if metadata:
        sections.append([f"{key}: {value}" for key, value in metadata.items()])

    if result.ingredients:
        sections.append(
            _heading("Ingredients", "-")
            + [
                f"* {render_ingredient(ingredient, factor)}"
                for ingredient in result.ingredients
            ]
        )

    # Cookware is listed once per name, in order of first use
    cookwares: Dict[str, Cookware] = {}
    for cookware in result.cookwares:
        cookwares.setdefault(cookware.name, cookware)
    if cookwares:
        lines = _heading("Cookware", "-")
        for name, cookware in cookwares.items():
            amount = format_scaled(cookware.quantity)
            if amount and amount != "1":
                lines.append(f"* {name} ({amount})")
            else:
                lines.append(f"* {name}")
        sections.append(lines)

    if result.steps:
        sections.append(
            _heading("Method", "-")
            + [
                f"{number}. {render_step(step).strip()}"
                for number, step in enumerate(result.steps, 1)
            ]
        )

    if result.shopping_list:
        lines = _heading("Shopping list", "-")
        for category, items in result.shopping_list.items():
            lines.append(f"{category}:")
            for item in items:
                if item.synonym:
                    lines.append(f"* {item.name} ({item.synonym})")
                else:
                    lines.append(f"* {item.name}")
        sections.append(lines)

    return "\n\n".join("\n".join(lines) for lines in sections) + "\n"
