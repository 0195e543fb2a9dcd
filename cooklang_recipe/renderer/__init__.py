"""
Parsed recipes (:py:mod:`cooklang_recipe.recipe`) may be rendered for display
at any scale.

:py:mod:`cooklang_recipe.renderer.text`: Plain text renderer
============================================================

.. automodule:: cooklang_recipe.renderer.text

"""
