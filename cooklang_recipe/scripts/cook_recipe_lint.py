"""
The ``cook-recipe-lint`` command reports Cooklang markup which the parser
will accept but probably not interpret the way the author meant.

Usage::

    $ cook-recipe-lint FILENAME [...] [--ignore KIND ...]

One line is printed per warning, in the form
``FILENAME:LINE:COLUMN: Warning: MESSAGE [KIND]``, where ``KIND`` is one of:

``unparsed_marker``
    An ``@``, ``#`` or ``~`` directly followed by text which does not form an
    ingredient, cookware item or timer, so that it ends up in the step text.
    A timer with empty braces (``~{}``) is reported the same way.

``unparsed_quantity``
    A quantity made only of digits, ``.``, ``/`` and spaces (e.g. ``1/0`` or
    ``1.2.3``) which is not a valid number and so is kept as plain text.

``unclosed_block_comment``
    A ``[-`` with no matching ``-]`` on the same line.

``duplicate_metadata``
    A ``>> key: value`` line repeating an earlier key, whose value replaces
    the first one.

Text inside comments and shopping list blocks is not checked. Files which
cannot be read are reported as errors. The exit status is 1 when anything was
reported and 0 otherwise. Pass ``--ignore`` (or ``-i``) with one or more kinds
to leave those warnings out.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from cooklang_recipe.lint import check, LintKind


def main() -> None:
    parser = ArgumentParser(
        description="""
            Report Cooklang markup which will probably be misread.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        nargs="*",
        help="""
            The filename of the Cooklang recipe to check. Pass multiple
            filenames to check multiple files.
        """,
    )

    parser.add_argument(
        "--ignore",
        "-i",
        action="extend",
        default=[],
        nargs="+",
        choices=[k.name for k in LintKind],
        help="""
            Warning kinds (as shown in square brackets) to leave out.
        """,
    )

    args = parser.parse_args()

    failed = False
    for page in args.recipe:
        try:
            source = page.read_text()
        except OSError as e:
            failed = True
            print(f"{page}: Error: {e}")
            continue

        for lint in check(source):
            if lint.kind.name not in args.ignore:
                failed = True
                print(
                    f"{page}:{lint.line}:{lint.column}: Warning: "
                    f"{lint.description} [{lint.kind.name}]"
                )

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
