from setuptools import setup, find_packages

setup(
    name="cooklang_recipe",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A parser for Cooklang recipes with human-friendly quantity scaling.",
    install_requires=["peggie>=0.2.0"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "cook-recipe=cooklang_recipe.scripts.cook_recipe:main",
            "cook-recipe-lint=cooklang_recipe.scripts.cook_recipe_lint:main",
        ],
    },
)
