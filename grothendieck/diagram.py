# -*- coding: utf-8 -*-

"""
Constructions and queries on finite categories: discrete and opposite
categories, composability and path enumeration.

Summary
-------

.. autosummary::
    :template: function.rst
    :nosignatures:
    :toctree:

    discrete_category
    category_from_graph
    opposite_category
    composable
    find_paths

Example
-------
Paths found between two objects can be fed to
:meth:`grothendieck.category.Category.diagram_commutes`:

>>> C = category_from_graph('square', [
...     {'id': x, 'label': x} for x in "ABCD"], [
...     {'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f'},
...     {'id': 'g', 'source': 'B', 'target': 'D', 'label': 'g'},
...     {'id': 'h', 'source': 'A', 'target': 'C', 'label': 'h'},
...     {'id': 'k', 'source': 'C', 'target': 'D', 'label': 'k'}])
>>> paths = find_paths(C, 'A', 'D')
>>> paths
[['f', 'g'], ['h', 'k']]
>>> assert C.diagram_commutes(paths)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from grothendieck.cat import MathObject, Morphism
from grothendieck.category import Category
from grothendieck.config import (
    MAX_PATH_LENGTH,
    OPPOSITE_LABEL,
    OPPOSITE_SUFFIX,
)


def discrete_category(
        name: str, objects: Iterable[MathObject | Mapping]) -> Category:
    """
    The category with the given objects and only identity morphisms.

    Parameters:
        name : The name of the category.
        objects : Its objects.
    """
    return Category(name, objects, ())


def category_from_graph(
        name: str, objects: Iterable[MathObject | Mapping],
        morphisms: Iterable[Morphism | Mapping]) -> Category:
    """
    The category presented by a directed graph, identities are added.

    Parameters:
        name : The name of the category.
        objects : The nodes of the graph.
        morphisms : The edges of the graph.
    """
    return Category(name, objects, morphisms)


def opposite_category(category: Category) -> Category:
    """
    The opposite category, with every non-identity morphism reversed.

    Parameters:
        category : The category to dualise, it is left untouched.

    Note
    ----
    Each generator :code:`f: A → B` gives :code:`f_op: B → A` labeled
    :code:`f^op`, composites are left out and identities are generated again
    rather than copied. Functions are not carried over, they cannot be run
    backwards.

    Example
    -------
    >>> C = category_from_graph('C', [
    ...     {'id': 'A', 'label': 'A'}, {'id': 'B', 'label': 'B'}], [
    ...     {'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f'}])
    >>> f_op = opposite_category(C).get_morphism('f_op')
    >>> print(f_op.label, f_op.source, f_op.target)
    f^op B A
    """
    morphisms = [
        Morphism(
            mor.id + OPPOSITE_SUFFIX, mor.target, mor.source,
            mor.label + OPPOSITE_LABEL, definition=mor.definition)
        for mor in category.get_generators()]
    return Category(
        category.name + OPPOSITE_LABEL, category.get_objects(), morphisms,
        equality=category.equality)


def composable(f: Morphism, g: Morphism) -> bool:
    """
    Whether :code:`g` can be applied after :code:`f`.

    Parameters:
        f : The first morphism.
        g : The second morphism.
    """
    return f.target == g.source


def find_paths(
        category: Category, source_id: str, target_id: str,
        max_length: int = MAX_PATH_LENGTH) -> list[list[str]]:
    """
    Every path of non-identity morphisms from one object to another.

    Parameters:
        category : The category in which to search.
        source_id : The id of the object the paths start from.
        target_id : The id of the object the paths end at.
        max_length : The maximum number of morphisms in a path.

    Returns:
        The list of paths, each one a list of morphism ids.

    Note
    ----
    A path never repeats a morphism, but it may visit an object twice. The
    search stops extending a path as soon as it reaches the target, and the
    empty path is never returned, even when source and target coincide.

    Example
    -------
    >>> C = category_from_graph('loop', [{'id': 'A', 'label': 'A'}], [
    ...     {'id': 'e', 'source': 'A', 'target': 'A', 'label': 'e'}])
    >>> find_paths(C, 'A', 'A')
    [['e']]
    """
    graph, paths = category.graph, []

    def search(node: str, path: list[str], visited: set[str]):
        if node == target_id and path:
            paths.append(list(path))
            return
        if len(path) >= max_length or node not in graph:
            return
        for _, next_node, key in graph.out_edges(node, keys=True):
            if key in visited:
                continue
            visited.add(key)
            path.append(key)
            search(next_node, path, visited)
            path.pop()
            visited.remove(key)

    search(source_id, [], set())
    return paths
