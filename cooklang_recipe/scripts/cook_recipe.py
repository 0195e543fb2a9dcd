"""
The ``cook-recipe`` command parses a single Cooklang recipe and prints it as
plain text (or JSON).

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ cook-recipe RECIPE_SOURCE

This prints the recipe's title, metadata, ingredients, cookware, method and
shopping list.

Scaling recipes
===============

You can scale the recipe by an arbitrary factor using the ``--scale`` or ``-S``
argument. This takes integers (e.g. '2'), decimal numbers (e.g. '1.5') and
fractions (e.g. '1/2' or '1 1/3').

When the recipe gives its number of servings (e.g. '>> servings: 4'), you can
alternatively use the ``--servings`` or ``-s`` argument to scale the recipe.
This argument takes a number of servings to scale the recipe to and computes
the scaling factor for you.

JSON output
===========

The ``--json`` argument prints the parsed recipe as JSON instead. Quantities
are not scaled in this form. Use ``--include-step-index`` to include the step
number of each ingredient and cookware entry.
"""

import sys

import json

import logging

from argparse import ArgumentParser

from pathlib import Path

from cooklang_recipe.quantity_parser import number

from cooklang_recipe.parser import Parser, ParserOptions

from cooklang_recipe.number_formatting import scale_for_servings

from cooklang_recipe.renderer.text import render_recipe


def main() -> None:
    parser = ArgumentParser(
        description="""
            Parse a Cooklang recipe and print it.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        help="""
            The filename of the Cooklang recipe to parse.
        """,
    )

    scaling_group = parser.add_mutually_exclusive_group()

    scaling_group.add_argument(
        "--servings",
        "-s",
        type=number,
        metavar="SERVINGS",
        default=None,
        help="""
            Rescale the recipe to serve the specified number of servings. This
            option requires that the recipe declares the number of servings it
            makes (e.g. '>> servings: 4').
        """,
    )

    scaling_group.add_argument(
        "--scale",
        "-S",
        type=number,
        metavar="MULTIPLIER",
        default=1,
        help="""
            Multiplier to scale the recipe by. May be a decimal (e.g. '3' or
            '3.14') or a fraction (e.g. '1/2' or '9 3/4').
        """,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="""
            Print the parsed recipe as JSON.
        """,
    )
    parser.add_argument(
        "--include-step-index",
        action="store_true",
        help="""
            Include the step index of each ingredient and cookware in the JSON
            output.
        """,
    )
    parser.add_argument(
        "--default-ingredient-amount",
        default="some",
        metavar="AMOUNT",
        help="""
            The amount shown for ingredients without a quantity. Defaults to
            '%(default)s'.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Log details of how the recipe was parsed.
        """,
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        source = args.recipe.read_text()
    except OSError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    result = Parser(
        ParserOptions(
            default_ingredient_amount=args.default_ingredient_amount,
            include_step_index=args.include_step_index,
        )
    ).parse(source)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    factor = args.scale
    if args.servings is not None:
        try:
            factor = scale_for_servings(result.metadata, args.servings)
        except ValueError as e:
            sys.stderr.write(f"{args.recipe}: {e}\n")
            sys.exit(1)

    sys.stdout.write(render_recipe(result, factor))


if __name__ == "__main__":
    main()
