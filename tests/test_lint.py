import pytest

from typing import List, Tuple

from textwrap import dedent

from cooklang_recipe.lint import check, LintKind, mask_comments

from cooklang_recipe.scripts import cook_recipe_lint


def lint_locations(source: str) -> List[Tuple[LintKind, int, int]]:
    return [(lint.kind, lint.line, lint.column) for lint in check(source)]


def test_clean_recipe() -> None:
    source = dedent(
        """
        >> title: Soup
        -- Serves @everyone
        Chop the @leeks{2} and @potatoes{500%g} [- peeled -].
        Simmer in a #large pot{} for ~{20%minutes}.

        [Veg]
        Leeks|~baby leeks
        """
    )
    assert list(check(source)) == []


@pytest.mark.parametrize(
    "source, exp",
    [
        # Markers with no valid ingredient/cookware/timer
        ("Add @{1%cup}", [(LintKind.unparsed_marker, 1, 5)]),
        ("Wait ~5 minutes", [(LintKind.unparsed_marker, 1, 6)]),
        ("Wait ~{}.", [(LintKind.unparsed_marker, 1, 6)]),
        ("Stir.\nWait ~{}.", [(LintKind.unparsed_marker, 2, 6)]),
        # A lone marker is fine
        ("Add salt @ the end", []),
        # Malformed numbers
        ("@flour{1/0%cup}", [(LintKind.unparsed_quantity, 1, 8)]),
        ("#tins{1.2.3}", [(LintKind.unparsed_quantity, 1, 7)]),
        ("~{1 2%min}", [(LintKind.unparsed_quantity, 1, 3)]),
        # Names may contain braces
        ("@{a}{1/0}", [(LintKind.unparsed_quantity, 1, 6)]),
        ("Use #{x} pan{1.2.3}", [(LintKind.unparsed_quantity, 1, 14)]),
        # Numbers too large for a float
        ("@flour{" + "1" * 400 + "/3%g}", [(LintKind.unparsed_quantity, 1, 8)]),
        # Text quantities are fine
        ("@flour{a lot}", []),
        # Unclosed block comments
        ("Mix [- gently", [(LintKind.unclosed_block_comment, 1, 5)]),
        # Duplicate metadata
        (">> a: 1\n>> b: 2\n>> a: 3", [(LintKind.duplicate_metadata, 3, 1)]),
        # Commented out mistakes are ignored
        ("Mix. -- @{oops}", []),
        ("Mix [- @{oops} -] well.", []),
    ],
)
def test_check(source: str, exp: List[Tuple[LintKind, int, int]]) -> None:
    assert lint_locations(source) == exp


def test_lint_str() -> None:
    (lint,) = check("Stir.\nWait ~{}.")
    assert str(lint).startswith("At line 2 column 6:")
    assert "Wait ~{}." in str(lint)
    assert lint.description in str(lint)


def test_mask_comments() -> None:
    source = "Mix [- a -] well -- ok\nthen"
    masked = mask_comments(source)
    assert len(masked) == len(source)
    assert masked.split() == ["Mix", "well", "then"]


def test_lint_script_documents_every_kind() -> None:
    for kind in LintKind:
        assert f"``{kind.name}``" in cook_recipe_lint.__doc__
