"""
Cooklang recipes are parsed into a :py:class:`~cooklang_recipe.recipe.ParseResult`
using :py:func:`cooklang_recipe.parser.parse`:

.. autofunction:: cooklang_recipe.parser.parse

The defaults used for missing quantities and units may be changed using
:py:class:`ParserOptions`:

.. autoclass:: ParserOptions
    :members:

.. autoclass:: Parser
    :members:

Parsing never fails: markup which is not recognised is kept as plain text
(see :py:mod:`cooklang_recipe.lint` for a way to find such mistakes).
"""

from typing import Iterator, List, Optional, Tuple, Union

from dataclasses import dataclass

import logging
import re

from cooklang_recipe.recipe import (
    Number,
    ParsedQuantity,
    Ingredient,
    Cookware,
    Timer,
    Text,
    Step,
    Item,
    ShoppingList,
    ParseResult,
)

from cooklang_recipe.quantity_parser import parse_quantity, parse_units

from cooklang_recipe.parser.tokens import (
    shopping_list_pattern,
    line_break_pattern,
    strip_comments,
    TokenKind,
    Token,
    scan_line,
)

__all__ = [
    "ParserOptions",
    "Parser",
    "parse",
    "parse_shopping_list_category",
    "extract_shopping_lists",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserOptions:
    default_ingredient_amount: Union[str, Number] = "some"
    """The quantity given to ingredients with no quantity (e.g. '@salt')."""

    default_cookware_amount: Union[str, Number] = 1
    """The quantity given to cookware with no quantity (e.g. '#pan')."""

    include_step_index: bool = False
    """
    Whether ingredients and cookware include their step index when the result
    is converted using :py:meth:`~cooklang_recipe.recipe.ParseResult.to_dict`.
    """

    default_units: str = ""
    """The units given to ingredients and timers with no units."""


def parse_shopping_list_category(items: str) -> List[Item]:
    """
    Parse the body of a shopping list category: one 'name|synonym' entry per
    line, where the synonym is optional.
    """
    out = []
    for line in line_break_pattern.split(items):
        line = line.strip()
        if not line:
            continue
        name, *synonyms = line.split("|")
        out.append(Item(name.strip(), synonyms[0].strip() if synonyms else ""))
    return out


def extract_shopping_lists(source: str) -> Tuple[str, ShoppingList]:
    """
    Remove all shopping list blocks from a recipe.

    Returns
    =======
    (source, shopping_list)
        The recipe with shopping lists removed and the shopping list
        categories found. If a category appears twice, the later one wins.
    """
    shopping_list: ShoppingList = {}

    def extract(match: "re.Match[str]") -> str:
        name = match["name"]
        shopping_list[name] = parse_shopping_list_category(match["items"])
        logger.debug(
            "Shopping list category %r has %d items",
            name,
            len(shopping_list[name]),
        )
        return ""

    return shopping_list_pattern.sub(extract, source), shopping_list


class Parser:
    """
    A Cooklang parser with a fixed set of :py:class:`ParserOptions`.
    """

    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self.options = options if options is not None else ParserOptions()
        self.default_ingredient_amount = ParsedQuantity(
            self.options.default_ingredient_amount, False
        )
        self.default_cookware_amount = ParsedQuantity(
            self.options.default_cookware_amount, False
        )

    def parse(self, source: str) -> ParseResult:
        """
        Parse a Cooklang recipe.

        See https://cooklang.org/ for a description of the syntax.
        """
        source = strip_comments(source)
        source, shopping_list = extract_shopping_lists(source)

        result = ParseResult(
            shopping_list=shopping_list,
            include_step_index=self.options.include_step_index,
        )

        step_index = 0
        for line in line_break_pattern.split(source):
            if line.strip() == "":
                continue

            tokens = list(scan_line(line))

            if tokens[0].kind is TokenKind.metadata:
                groups = tokens[0].groups
                key = (groups["metadata_key"] or "").strip()
                result.metadata[key] = (groups["metadata_value"] or "").strip()
                continue

            step: Step = []
            for part in self._parse_tokens(tokens, step_index):
                if isinstance(part, Ingredient):
                    result.ingredients.append(part)
                elif isinstance(part, Cookware):
                    result.cookwares.append(part)
                step.append(part)

            if step:
                result.steps.append(step)
                step_index += 1

        logger.debug(
            "Parsed %d steps, %d ingredients, %d cookwares",
            len(result.steps),
            len(result.ingredients),
            len(result.cookwares),
        )

        return result

    def _parse_tokens(
        self, tokens: List[Token], step_index: int
    ) -> Iterator[Union[Ingredient, Cookware, Timer, Text]]:
        for token in tokens:
            groups = token.groups
            if token.kind is TokenKind.single_word_ingredient:
                yield Ingredient(
                    step_index,
                    groups["single_word_ingredient_name"] or "",
                    self.default_ingredient_amount,
                    self.options.default_units,
                )
            elif token.kind is TokenKind.ingredient:
                quantity = parse_quantity(groups["ingredient_quantity"])
                if quantity.value is None:
                    quantity = self.default_ingredient_amount
                yield Ingredient(
                    step_index,
                    groups["ingredient_name"] or "",
                    quantity,
                    parse_units(groups["ingredient_units"])
                    or self.options.default_units,
                )
            elif token.kind is TokenKind.single_word_cookware:
                yield Cookware(
                    step_index,
                    groups["single_word_cookware_name"] or "",
                    self.default_cookware_amount,
                )
            elif token.kind is TokenKind.cookware:
                quantity = parse_quantity(groups["cookware_quantity"])
                if quantity.value is None:
                    quantity = self.default_cookware_amount
                yield Cookware(step_index, groups["cookware_name"] or "", quantity)
            elif token.kind is TokenKind.timer:
                quantity = parse_quantity(groups["timer_quantity"])
                if quantity.value is None:
                    logger.debug("Timer %r has no quantity; kept as text", token.text)
                    yield Text(token.text)
                else:
                    yield Timer(
                        (groups["timer_name"] or "").strip() or None,
                        quantity,
                        parse_units(groups["timer_units"])
                        or self.options.default_units,
                    )
            else:
                # NB: Metadata is only recognised at the start of a line so
                # anything else here is text.
                yield Text(token.text)


def parse(source: str, options: Optional[ParserOptions] = None) -> ParseResult:
    """
    Parse a Cooklang recipe into a :py:class:`~cooklang_recipe.recipe.ParseResult`.
    """
    return Parser(options).parse(source)
