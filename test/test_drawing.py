# -*- coding: utf-8 -*-

import matplotlib

matplotlib.use('Agg')

import networkx as nx  # noqa: E402
import numpy as np  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402

from grothendieck.drawing import draw, edge_label_positions  # noqa: E402
from grothendieck.zoo import set_category  # noqa: E402
from grothendieck.category import Category  # noqa: E402


def test_draw(tmp_path):
    path = tmp_path / "set.png"
    draw(set_category(), path=str(path))
    assert path.exists() and path.stat().st_size > 0


def test_draw_axis():
    _, axis = plt.subplots()
    C = set_category()
    C.compose('f', 'g')
    result = draw(C, show=False, axis=axis, fontsize=8)
    assert result is axis
    texts = {text.get_text() for text in axis.texts}
    assert {'A', 'B', 'C', 'f', 'g', 'h'} <= texts
    assert 'id_A' not in texts and 'g∘f' not in texts
    assert axis.get_title() == 'Set'
    plt.close('all')


def test_edge_label_positions():
    C = Category('C', [{'id': 'A', 'label': 'A'}, {'id': 'B', 'label': 'B'}],
                 [{'id': x, 'source': 'A', 'target': 'B', 'label': x}
                  for x in 'fg'] + [
                  {'id': 'e', 'source': 'A', 'target': 'A', 'label': 'e'}])
    positions = {'A': np.array([0., 0.]), 'B': np.array([1., 0.])}
    result = edge_label_positions(C.graph, positions, offset=.1)
    assert set(result) == {'f', 'g', 'e'}
    assert np.allclose(result['f'], [.5, .1])
    assert np.allclose(result['g'], [.5, .2])
    assert np.allclose(result['e'], [0., .2])
    assert isinstance(C.graph, nx.MultiDiGraph)


def test_draw_saves_given_axis(tmp_path):
    _, axis = plt.subplots()
    other, _ = plt.subplots()
    path = tmp_path / "set.png"
    draw(set_category(), path=str(path), axis=axis)
    assert path.exists()
    assert not plt.fignum_exists(axis.figure.number)
    assert plt.fignum_exists(other.number)
    plt.close('all')
