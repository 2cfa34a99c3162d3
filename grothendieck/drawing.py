# -*- coding: utf-8 -*-

"""
Drawing a finite category as a directed multigraph, with networkx for the
layout and matplotlib for the rendering.

Summary
-------

.. autosummary::
    :template: function.rst
    :nosignatures:
    :toctree:

    draw
    edge_label_positions
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from grothendieck.config import DRAWING_DEFAULT

if TYPE_CHECKING:
    from grothendieck.category import Category


def edge_label_positions(
        graph: nx.MultiDiGraph, positions: dict, offset: float = .08
        ) -> dict[str, np.ndarray]:
    """
    Where to write the label of each edge, keyed by morphism id.

    Parallel edges and loops are spread apart so that labels do not overlap.

    Parameters:
        graph : The graph of a category, see :attr:`Category.graph`.
        positions : The position of each node.
        offset : The distance between the labels of parallel edges.
    """
    seen, result = defaultdict(int), {}
    for source, target, key in graph.edges(keys=True):
        i = seen[source, target] = seen[source, target] + 1
        start, end = (np.asarray(positions[x]) for x in (source, target))
        if source == target:
            result[key] = start + np.array([0, 2 * offset * i])
            continue
        direction = end - start
        normal = np.array([-direction[1], direction[0]])
        normal = normal / (np.linalg.norm(normal) or 1)
        result[key] = (start + end) / 2 + normal * offset * i
    return result


def draw(category: Category, path: str = None, show: bool = True,
         axis=None, **params):
    """
    Draw the objects and non-identity morphisms of a category.

    Parameters:
        category : The category to draw.
        path : Where to save the drawing, if any.
        show : Whether to show the drawing when :code:`path` is not given.
        axis : The matplotlib axis to draw on, a new figure by default.
        params : Overrides :data:`grothendieck.config.DRAWING_DEFAULT`.

    Returns:
        The matplotlib axis.
    """
    params = dict(DRAWING_DEFAULT, **params)
    graph = category.graph
    positions = nx.spring_layout(graph, seed=params['seed'])
    if axis is None:
        _, axis = plt.subplots(figsize=params['figsize'], facecolor='white')
    nx.draw_networkx_nodes(
        graph, positions, ax=axis, node_size=params['node_size'],
        node_color=params['node_color'], edgecolors=params['edgecolor'])
    nx.draw_networkx_labels(
        graph, positions, ax=axis, font_size=params['fontsize'],
        labels={node: data['label'] for node, data in graph.nodes(data=True)})
    nx.draw_networkx_edges(
        graph, positions, ax=axis, arrows=True,
        node_size=params['node_size'], edge_color=params['edgecolor'],
        connectionstyle=params['connectionstyle'])
    label_positions = edge_label_positions(graph, positions)
    for _, _, key, label in graph.edges(keys=True, data='label'):
        i, j = label_positions[key]
        axis.text(i, j, label, ha='center', va='center',
                  fontsize=params['fontsize'])
    axis.set_title(category.name)
    axis.set_axis_off()
    if path is not None:
        axis.figure.savefig(path)
        plt.close(axis.figure)
    elif show:
        plt.show()
    return axis
