from cooklang_recipe.recipe import (
    ParsedQuantity,
    Ingredient,
    Cookware,
    Timer,
    Text,
    Item,
    ParseResult,
)


def make_result() -> ParseResult:
    salt = Ingredient(0, "salt", ParsedQuantity(0.5, True), "tsp")
    pan = Cookware(1, "pan", ParsedQuantity(1, False))
    return ParseResult(
        ingredients=[salt],
        cookwares=[pan],
        metadata={"title": "Salted pan"},
        steps=[
            [Text("Add "), salt, Text(".")],
            [Text("Heat "), pan, Text(" for "), Timer(None, ParsedQuantity(5), "min")],
        ],
        shopping_list={"Spices": [Item("Salt", "sea salt")]},
    )


def test_to_dict() -> None:
    assert make_result().to_dict() == {
        "ingredients": [
            {
                "type": "ingredient",
                "name": "salt",
                "quantity": {"value": 0.5, "was_fraction": True},
                "units": "tsp",
            },
        ],
        "cookwares": [
            {
                "type": "cookware",
                "name": "pan",
                "quantity": {"value": 1, "was_fraction": False},
            },
        ],
        "metadata": {"title": "Salted pan"},
        "steps": [
            [
                {"type": "text", "value": "Add "},
                {
                    "type": "ingredient",
                    "name": "salt",
                    "quantity": {"value": 0.5, "was_fraction": True},
                    "units": "tsp",
                },
                {"type": "text", "value": "."},
            ],
            [
                {"type": "text", "value": "Heat "},
                {
                    "type": "cookware",
                    "name": "pan",
                    "quantity": {"value": 1, "was_fraction": False},
                },
                {"type": "text", "value": " for "},
                {
                    "type": "timer",
                    "name": None,
                    "quantity": {"value": 5, "was_fraction": False},
                    "units": "min",
                },
            ],
        ],
        "shopping_list": {"Spices": [{"name": "Salt", "synonym": "sea salt"}]},
    }


def test_to_dict_include_step_index() -> None:
    out = make_result().to_dict(include_step_index=True)
    assert out["ingredients"][0]["step"] == 0
    assert out["cookwares"][0]["step"] == 1
    assert out["steps"][1][1]["step"] == 1
    # Timers and text never have a step index
    assert "step" not in out["steps"][1][3]
    assert "step" not in out["steps"][1][0]


def test_to_dict_default_from_result() -> None:
    result = make_result()
    result.include_step_index = True
    assert result.to_dict()["ingredients"][0]["step"] == 0
    assert "step" not in result.to_dict(include_step_index=False)["ingredients"][0]


def test_include_step_index_not_compared() -> None:
    assert ParseResult(include_step_index=True) == ParseResult()
