"""
A collection of (fairly basic) linting functions for sanity checking recipes.

Since the parser (:py:mod:`cooklang_recipe.parser`) never fails, mistakes in
a recipe's markup silently turn into plain text. The following function finds
the most common cases:

.. autofunction:: check

Linting errors are described by :py:class:`Lint` objects:

.. autoclass:: Lint
    :members:
    :undoc-members:

Different categories of linting errors are identified by members of the
following enumeration.

.. autoclass:: LintKind
    :members:
    :undoc-members:

"""

from typing import Iterable, Iterator, List, Set, Tuple

from dataclasses import dataclass

from enum import Enum, auto

import re

from peggie.error_message_generation import (
    offset_to_line_and_column,
    extract_line,
    format_error_message,
)

from cooklang_recipe.quantity_parser import numeric_pattern, parse_quantity

from cooklang_recipe.parser.tokens import (
    line_comment_pattern,
    block_comment_pattern,
    shopping_list_pattern,
    TokenKind,
    Token,
    scan_line,
)

__all__ = [
    "LintKind",
    "Lint",
    "check",
]


class LintKind(Enum):
    """Kinds of lint."""

    unparsed_marker = auto()
    unparsed_quantity = auto()
    unclosed_block_comment = auto()
    duplicate_metadata = auto()


@dataclass(frozen=True)
class Lint:
    """
    A description a piece of lint found in a recipe.
    """

    kind: LintKind
    description: str

    line: int
    column: int
    snippet: str
    """The source code location (1-based) and source line of the problem."""

    def __str__(self) -> str:
        return format_error_message(
            self.line, self.column, self.snippet, self.description
        )


# Marker characters followed by something other than whitespace
unparsed_marker_pattern = re.compile(r"[@#~](?=\S)")

_quantity_groups = {
    TokenKind.ingredient: "ingredient_quantity",
    TokenKind.cookware: "cookware_quantity",
    TokenKind.timer: "timer_quantity",
}


def _blank_out(match: "re.Match[str]") -> str:
    return " " * len(match.group())


def mask_comments(source: str) -> str:
    """
    Replace all comments in a recipe with spaces, leaving all other
    characters at the same offsets.
    """
    source = line_comment_pattern.sub(_blank_out, source)
    return block_comment_pattern.sub(_blank_out, source)


def _iter_lines(source: str) -> Iterator[Tuple[int, str]]:
    """Iterate over (offset, line) pairs, without line endings."""
    offset = 0
    for line in source.split("\n"):
        yield offset, line.rstrip("\r")
        offset += len(line) + 1


class _Linter:
    def __init__(self, source: str) -> None:
        self.source = source

    def lint(self, kind: LintKind, offset: int, description: str) -> Lint:
        line, column = offset_to_line_and_column(self.source, offset)
        return Lint(
            kind=kind,
            description=description,
            line=line,
            column=column,
            snippet=extract_line(self.source, line),
        )

    def check_unclosed_block_comments(self) -> Iterable[Lint]:
        for offset, line in _iter_lines(mask_comments(self.source)):
            column = line.find("[-")
            if column >= 0:
                yield self.lint(
                    LintKind.unclosed_block_comment,
                    offset + column,
                    "Block comment is not closed with '-]' on the same line "
                    "and will be shown as text.",
                )

    def check_tokens(self, offset: int, tokens: List[Token]) -> Iterable[Lint]:
        for token in tokens:
            if token.kind is TokenKind.text:
                for match in unparsed_marker_pattern.finditer(token.text):
                    yield self.lint(
                        LintKind.unparsed_marker,
                        offset + token.start + match.start(),
                        f"'{match.group()}' is not followed by a valid "
                        f"ingredient, cookware or timer and will be shown as text.",
                    )
            elif token.kind in _quantity_groups:
                group = _quantity_groups[token.kind]
                quantity = token.groups[group] or ""
                quantity_offset = offset + token.spans[group][0]
                parsed = parse_quantity(quantity)
                if token.kind is TokenKind.timer and parsed.value is None:
                    yield self.lint(
                        LintKind.unparsed_marker,
                        offset + token.start,
                        "Timer has no duration and will be shown as text.",
                    )
                elif (
                    numeric_pattern.fullmatch(quantity)
                    and quantity.strip()
                    and isinstance(parsed.value, str)
                ):
                    yield self.lint(
                        LintKind.unparsed_quantity,
                        quantity_offset,
                        f"Quantity '{parsed.value}' looks like a number but "
                        f"could not be parsed and will be shown as text.",
                    )

    def check_lines(self) -> Iterable[Lint]:
        masked = mask_comments(self.source)

        shopping_list_spans = [
            match.span() for match in shopping_list_pattern.finditer(masked)
        ]

        metadata_keys: Set[str] = set()
        for offset, line in _iter_lines(masked):
            if line.strip() == "":
                continue
            if any(start <= offset < end for start, end in shopping_list_spans):
                continue

            tokens = list(scan_line(line))
            if tokens[0].kind is TokenKind.metadata:
                key = (tokens[0].groups["metadata_key"] or "").strip()
                if key in metadata_keys:
                    yield self.lint(
                        LintKind.duplicate_metadata,
                        offset,
                        f"Metadata '{key}' has already been given; "
                        f"this value replaces the earlier one.",
                    )
                metadata_keys.add(key)
            else:
                yield from self.check_tokens(offset, tokens)


def check(source: str) -> Iterable[Lint]:
    """
    Run all linting checks against a given recipe source.
    """
    linter = _Linter(source)
    yield from linter.check_unclosed_block_comments()
    yield from linter.check_lines()
