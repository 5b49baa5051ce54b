"""Functional mapping primitives for applykit.

Stateless higher-order functions that apply a user function over ordered
containers and decide the shape of the collected results:

    - ``map_elements``: one result per element, as a list.
    - ``map_simplify``: like ``map_elements`` but collapses uniform results
      into a vector or a grid.
    - ``map_typed``: requires every result to fit a declared template.
    - ``map_multi``: walks several containers in step, recycling the
      shorter ones.
    - ``map_axis``: applies a function to each row or column of a grid.
"""

from applykit.functional.axis import map_axis
from applykit.functional.element import map_elements
from applykit.functional.multi import map_multi
from applykit.functional.simplify import map_simplify, simplify_results
from applykit.functional.typed import map_typed

__all__ = [
    "map_axis",
    "map_elements",
    "map_multi",
    "map_simplify",
    "simplify_results",
    "map_typed",
]
