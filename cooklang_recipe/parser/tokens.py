"""
Regular expressions which recognise the Cooklang markup.

Document-level patterns
=======================

.. autodata:: line_comment_pattern

.. autodata:: block_comment_pattern

.. autodata:: shopping_list_pattern

.. autofunction:: strip_comments

Line-level tokens
=================

Each line of a recipe is split into a sequence of :py:class:`Token` objects
by :py:func:`scan_line`. The markers recognised are given by
:py:data:`TOKEN_RULES`, in priority order.

.. autoclass:: TokenKind
    :members:
    :undoc-members:

.. autoclass:: TokenRule

.. autodata:: TOKEN_RULES

.. autoclass:: Token

.. autofunction:: scan_line
"""

from typing import Dict, Iterator, List, Optional, Tuple

from dataclasses import dataclass, field

from enum import Enum, auto

import re

__all__ = [
    "line_comment_pattern",
    "block_comment_pattern",
    "shopping_list_pattern",
    "line_break_pattern",
    "strip_comments",
    "TokenKind",
    "TokenRule",
    "TOKEN_RULES",
    "token_pattern",
    "Token",
    "scan_line",
]


line_comment_pattern = re.compile(r"--.*")
"""A '-- comment' running to the end of the line."""

block_comment_pattern = re.compile(r"[ \t]*\[-.*?-\][ \t]*")
"""A '[- comment -]' along with any horizontal whitespace around it."""

shopping_list_pattern = re.compile(
    # Header line, e.g. '[Dairy]'
    r"^\[(?P<name>[^\]\r\n]+)\][ \t]*(?:\r?\n|\Z)"
    # Items, one per line, up to the next blank line
    r"(?P<items>(?:[ \t]*\S[^\r\n]*(?:\r?\n|\Z))*)",
    re.MULTILINE,
)
"""
A shopping list category: a '[name]' header line followed by a series of
'name|synonym' lines, ending at the first blank line.
"""

line_break_pattern = re.compile(r"\r?\n")


def strip_comments(source: str) -> str:
    """
    Remove all comments from a recipe. Block comments are replaced with a
    single space so that the words either side remain separate. Line breaks
    are preserved.
    """
    source = line_comment_pattern.sub("", source)
    return block_comment_pattern.sub(" ", source)


class TokenKind(Enum):
    """Kinds of token found within a line."""

    metadata = auto()
    ingredient = auto()
    single_word_ingredient = auto()
    cookware = auto()
    single_word_cookware = auto()
    timer = auto()
    text = auto()


@dataclass(frozen=True)
class TokenRule:
    kind: TokenKind
    pattern: str
    """
    Regular expression source. Group names must be unique across all rules
    and must not coincide with a :py:class:`TokenKind` name.
    """


# NB: A name made of word characters (excluding '_'), i.e. stopping at
# whitespace and punctuation.
_single_word = r"[^\W_]+"

# NB: Multi-word names may not contain another marker or a '['.
_multi_word = r"[^@#~\[]+?"

TOKEN_RULES: List[TokenRule] = [
    # >> key: value
    TokenRule(
        TokenKind.metadata,
        r"^>>\s*(?P<metadata_key>.+?):\s*(?P<metadata_value>.+)",
    ),
    # @multi word name{quantity%units}
    #
    # NB: Tried before the single word form so that '@salt{1%tsp}' is not
    # split into '@salt' and some text.
    TokenRule(
        TokenKind.ingredient,
        r"@(?P<ingredient_name>" + _multi_word + r")"
        r"\{(?P<ingredient_quantity>.*?)(?:%(?P<ingredient_units>[^}]+?))?\}",
    ),
    # @name
    TokenRule(
        TokenKind.single_word_ingredient,
        r"@(?P<single_word_ingredient_name>" + _single_word + r")",
    ),
    # #multi word name{quantity}
    TokenRule(
        TokenKind.cookware,
        r"#(?P<cookware_name>" + _multi_word + r")"
        r"\{(?P<cookware_quantity>.*?)\}",
    ),
    # #name
    TokenRule(
        TokenKind.single_word_cookware,
        r"#(?P<single_word_cookware_name>" + _single_word + r")",
    ),
    # ~optional name{quantity%units}
    TokenRule(
        TokenKind.timer,
        r"~(?P<timer_name>[^@#~\[]*?)"
        r"\{(?P<timer_quantity>.*?)(?:%(?P<timer_units>.+?))?\}",
    ),
]
"""
The markers which may appear within a line. Where several rules could match
at the same position, the earliest rule in this list wins.
"""

token_pattern = re.compile(
    "|".join(f"(?P<{rule.kind.name}>{rule.pattern})" for rule in TOKEN_RULES)
)
"""All of :py:data:`TOKEN_RULES` combined into a single alternation."""


@dataclass(frozen=True)
class Token:
    kind: TokenKind

    text: str
    """The exact source text of this token."""

    start: int
    end: int
    """The span of this token within the line."""

    groups: Dict[str, Optional[str]] = field(default_factory=dict, compare=False)
    """The named groups captured by the token's rule (empty for text)."""

    spans: Dict[str, Tuple[int, int]] = field(default_factory=dict, compare=False)
    """The span within the line of each group in :py:attr:`groups` which matched."""


def _matched_kind(match: "re.Match[str]") -> TokenKind:
    for rule in TOKEN_RULES:
        if match.group(rule.kind.name) is not None:
            return rule.kind
    raise AssertionError(f"No rule matched {match.group()!r}")


def scan_line(line: str) -> Iterator[Token]:
    """
    Split a line into tokens in a single left-to-right pass. The text between
    (and before and after) markers is produced as :py:attr:`TokenKind.text`
    tokens so that the tokens together cover the whole line.
    """
    pos = 0
    for match in token_pattern.finditer(line):
        if pos < match.start():
            yield Token(TokenKind.text, line[pos : match.start()], pos, match.start())

        yield Token(
            _matched_kind(match),
            match.group(),
            match.start(),
            match.end(),
            match.groupdict(),
            {
                name: match.span(name)
                for name, value in match.groupdict().items()
                if value is not None
            },
        )
        pos = match.end()

    if pos < len(line):
        yield Token(TokenKind.text, line[pos:], pos, len(line))
