"""
The :py:mod:`cooklang_recipe.recipe` module defines the data structure
produced by parsing a Cooklang recipe.

Overview
========

A recipe is parsed into a :py:class:`ParseResult` which holds:

* A flat list of every :py:class:`Ingredient` occurrence in the recipe.
* A flat list of every :py:class:`Cookware` occurrence in the recipe.
* A metadata dictionary (from ``>> key: value`` lines).
* A list of steps, where each step is a list of :py:class:`Ingredient`,
  :py:class:`Cookware`, :py:class:`Timer` and :py:class:`Text` parts in the
  order they appear in the source.
* A shopping list, mapping category names to lists of :py:class:`Item`.

For example the line::

    Add @salt{1%tsp} and #pan.

Becomes the step::

    [
        Text("Add "),
        Ingredient(0, "salt", ParsedQuantity(1, False), "tsp"),
        Text(" and "),
        Cookware(0, "pan", ParsedQuantity(1, False)),
        Text("."),
    ]

The same :py:class:`Ingredient` and :py:class:`Cookware` objects appear both
in their step and in :py:attr:`ParseResult.ingredients` and
:py:attr:`ParseResult.cookwares`.

Data types
==========

.. autoclass:: ParsedQuantity

.. autoclass:: Ingredient

.. autoclass:: Cookware

.. autoclass:: Timer

.. autoclass:: Text

.. autoclass:: Item

.. autoclass:: ParseResult
    :members:
"""

from typing import Any, Dict, List, Optional, Union

from dataclasses import dataclass, field

Number = Union[int, float]

__all__ = [
    "Number",
    "ParsedQuantity",
    "Ingredient",
    "Cookware",
    "Timer",
    "Text",
    "StepPart",
    "Step",
    "Metadata",
    "Item",
    "ShoppingList",
    "ParseResult",
]


@dataclass(frozen=True)
class ParsedQuantity:
    """
    A quantity as written in a recipe.
    """

    value: Optional[Union[Number, str]]
    """
    The numerical value of the quantity, or the (stripped) text of the
    quantity if it was not a number (e.g. 'a pinch'). None if no quantity was
    written.
    """

    was_fraction: bool = False
    """
    True if the value is numeric and was written as a fraction (e.g. '1/2' or
    '1 1/2'). Used to decide how to format the value for display.
    """

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "was_fraction": self.was_fraction}


@dataclass
class Ingredient:
    """An ingredient, e.g. '@salt' or '@olive oil{2%tbsp}'."""

    step_index: int
    """The (0-based) index of the step this ingredient appears in."""

    name: str

    quantity: ParsedQuantity

    units: str
    """The units of the quantity, or the empty string if none were given."""

    def to_dict(self, include_step_index: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": "ingredient"}
        if include_step_index:
            out["step"] = self.step_index
        out["name"] = self.name
        out["quantity"] = self.quantity.to_dict()
        out["units"] = self.units
        return out


@dataclass
class Cookware:
    """A piece of cookware, e.g. '#pan' or '#baking tray{2}'."""

    step_index: int
    """The (0-based) index of the step this cookware appears in."""

    name: str

    quantity: ParsedQuantity

    def to_dict(self, include_step_index: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": "cookware"}
        if include_step_index:
            out["step"] = self.step_index
        out["name"] = self.name
        out["quantity"] = self.quantity.to_dict()
        return out


@dataclass
class Timer:
    """A timer, e.g. '~{10%minutes}' or '~proof{1%hour}'."""

    name: Optional[str]
    """The name of the timer, or None if it was not named."""

    quantity: ParsedQuantity

    units: str

    def to_dict(self, include_step_index: bool = False) -> Dict[str, Any]:
        return {
            "type": "timer",
            "name": self.name,
            "quantity": self.quantity.to_dict(),
            "units": self.units,
        }


@dataclass
class Text:
    """
    A span of literal text within a step. Whitespace and punctuation are kept
    exactly as written.
    """

    value: str

    def to_dict(self, include_step_index: bool = False) -> Dict[str, Any]:
        return {"type": "text", "value": self.value}


StepPart = Union[Ingredient, Cookware, Timer, Text]

Step = List[StepPart]

Metadata = Dict[str, str]


@dataclass(frozen=True)
class Item:
    """An entry in a shopping list category, e.g. 'Milk|2% milk'."""

    name: str

    synonym: str = ""
    """An alternative name for the item, or the empty string."""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "synonym": self.synonym}


ShoppingList = Dict[str, List[Item]]


@dataclass
class ParseResult:
    """
    Everything extracted from a single Cooklang document.
    """

    ingredients: List[Ingredient] = field(default_factory=list)
    cookwares: List[Cookware] = field(default_factory=list)
    metadata: Metadata = field(default_factory=dict)
    steps: List[Step] = field(default_factory=list)
    shopping_list: ShoppingList = field(default_factory=dict)

    include_step_index: bool = field(default=False, compare=False, repr=False)
    """
    The default for the ``include_step_index`` argument of :py:meth:`to_dict`.
    Set from the options of the parser which produced this result.
    """

    def to_dict(self, include_step_index: Optional[bool] = None) -> Dict[str, Any]:
        """
        Convert into a structure of plain dictionaries and lists suitable for
        serialising as JSON.

        When ``include_step_index`` is True, ingredients and cookware include
        a 'step' entry giving the index of the step they appear in. Defaults
        to :py:attr:`include_step_index`.
        """
        if include_step_index is None:
            include_step_index = self.include_step_index
        return {
            "ingredients": [
                ingredient.to_dict(include_step_index)
                for ingredient in self.ingredients
            ],
            "cookwares": [
                cookware.to_dict(include_step_index) for cookware in self.cookwares
            ],
            "metadata": dict(self.metadata),
            "steps": [
                [part.to_dict(include_step_index) for part in step]
                for step in self.steps
            ],
            "shopping_list": {
                category: [item.to_dict() for item in items]
                for category, items in self.shopping_list.items()
            },
        }
