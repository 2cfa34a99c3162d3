# -*- coding: utf-8 -*-

import logging
from threading import Thread

import networkx as nx
from pytest import fixture, raises

from grothendieck import messages
from grothendieck.cat import ComposedMorphism, MathObject, Morphism
from grothendieck.category import Category
from grothendieck.equality import sample_equality, structural_equality
from grothendieck.utils import *


def objects(*ids):
    return [{'id': x, 'label': x} for x in ids]


def arrow(mor_id, source, target, **kwargs):
    return dict(id=mor_id, source=source, target=target, label=mor_id,
                **kwargs)


@fixture
def set_toy():
    return Category('Set-toy', objects('A', 'B', 'C'), [
        arrow('f', 'A', 'B', data=lambda x: x + 1),
        arrow('g', 'B', 'C', data=lambda x: 2 * x)])


def test_main(set_toy):
    h = set_toy.compose('f', 'g')
    assert (h.id, h.label, h.source, h.target) == ('g_o_f', 'g∘f', 'A', 'C')
    assert h.components == ('f', 'g')
    assert h(1) == 4
    assert set_toy.verify().valid


def test_Category_init():
    C = Category('Set Toy', [MathObject('A', 'A')])
    assert (C.name, C.id) == ('Set Toy', 'cat-set-toy')
    assert [obj.id for obj in C.get_objects()] == ['A']
    assert [mor.id for mor in C.get_morphisms()] == ['id_A']
    with raises(DuplicateObject):
        Category('C', objects('A', 'A'))
    with raises(TypeError):
        Category('C', ['A'])


def test_Category_repr(set_toy):
    assert repr(set_toy) == "category.Category('Set-toy', "\
        "objects=['A', 'B', 'C'], morphisms=['f', 'g'])"
    assert str(set_toy) == 'Set-toy'


def test_add_object():
    C = Category('C')
    A = C.add_object({'id': 'A', 'label': 'Alice'})
    assert C.get_object('A') is A and C.has_object('A') and A in C
    identity = C.get_identity('A')
    assert (identity.id, identity.label) == ('id_A', 'id_Alice')
    assert identity.endpoints == ('A', 'A') and identity(42) == 42
    assert identity.definition == "Identity morphism on Alice"
    with raises(DuplicateObject) as err:
        C.add_object(MathObject('A', 'Bob'))
    assert str(err.value) == messages.DUPLICATE_OBJECT.format('A')
    assert C.get_object('A').label == 'Alice'


def test_add_object_identity_collision():
    C = Category('C', objects('A'), [arrow('id_B', 'A', 'A')])
    with raises(DuplicateMorphism):
        C.add_object({'id': 'B', 'label': 'B'})
    assert not C.has_object('B')


def test_add_morphism():
    C = Category('C', objects('A', 'B'))
    f = C.add_morphism(arrow('f', 'A', 'B'))
    assert C.get_morphism('f') is f and f in C and 'f' in C
    with raises(DuplicateMorphism) as err:
        C.add_morphism(arrow('f', 'B', 'A'))
    assert str(err.value) == messages.DUPLICATE_MORPHISM.format('f')
    with raises(DuplicateMorphism):
        C.add_morphism(arrow('id_A', 'A', 'A'))


def test_add_morphism_unknown_object():
    C = Category('C', objects('A'))
    with raises(UnknownObject) as err:
        C.add_morphism(arrow('f', 'X', 'A'))
    assert str(err.value) == messages.UNKNOWN_SOURCE.format('X')
    with raises(UnknownObject) as err:
        C.add_morphism(Morphism('f', 'A', 'Y', 'f'))
    assert str(err.value) == messages.UNKNOWN_TARGET.format('Y')
    assert not C.has_morphism('f')
    with raises(UnknownObject):
        Category('C', objects('A'), [arrow('f', 'A', 'B')])


def test_lookups(set_toy):
    assert set_toy.get_object('X') is None
    assert set_toy.get_morphism('k') is None
    assert set_toy.get_identity('X') is None
    assert 'X' not in set_toy
    assert [m.id for m in set_toy.get_morphisms_from('B')] == ['id_B', 'g']
    assert [m.id for m in set_toy.get_morphisms_to('B')] == ['id_B', 'f']
    assert set_toy.get_morphisms_from('X') == []


def test_is_identity(set_toy):
    assert set_toy.is_identity('id_A')
    assert set_toy.is_identity(set_toy.get_identity('B'))
    assert not set_toy.is_identity('f') and not set_toy.is_identity('X')


def test_generators_and_composites(set_toy):
    assert [m.id for m in set_toy.get_generators()] == ['f', 'g']
    assert [m.id for m in set_toy.get_generators(identities=True)] \
        == ['id_A', 'id_B', 'id_C', 'f', 'g']
    assert set_toy.get_composites() == []
    h = set_toy.compose('f', 'g')
    assert set_toy.get_composites() == [h]
    assert [m.id for m in set_toy.get_generators()] == ['f', 'g']
    assert len(set_toy) == 6


def test_compose_memoised(set_toy):
    f, g = set_toy.get_morphism('f'), set_toy.get_morphism('g')
    assert set_toy.composite(f, g) is None
    h = set_toy.compose(f, g)
    assert isinstance(h, ComposedMorphism)
    assert set_toy.compose('f', 'g') is h
    assert set_toy.composite('f', 'g') is h
    assert set_toy.get_morphism('g_o_f') is h


def test_compose_not_composable(set_toy):
    with raises(NotComposable) as err:
        set_toy.compose('g', 'f')
    assert str(err.value) == messages.NOT_COMPOSABLE.format(
        'g', 'f', 'C', 'A')
    assert not set_toy.has_morphism('f_o_g')


def test_compose_unknown(set_toy):
    with raises(UnknownMorphism):
        set_toy.compose('f', 'k')
    with raises(UnknownMorphism):
        set_toy.compose(Morphism('k', 'A', 'B', 'k'), 'g')


def test_compose_identities(set_toy):
    f = set_toy.get_morphism('f')
    right = set_toy.compose(set_toy.get_identity('A'), f)
    left = set_toy.compose(f, set_toy.get_identity('B'))
    assert right.target == f.target and left.source == f.source
    assert right.endpoints == left.endpoints == f.endpoints
    assert right.id == 'f_o_id_A' and left.id == 'id_B_o_f'


def test_compose_without_data():
    C = Category('C', objects('A', 'B', 'C'), [
        arrow('f', 'A', 'B', data=abs), arrow('g', 'B', 'C')])
    assert C.compose('f', 'g').data is None


def test_compose_associative_ids():
    C = Category('C', objects('A', 'B', 'C', 'D'), [
        arrow('f', 'A', 'B'), arrow('g', 'B', 'C'), arrow('h', 'C', 'D')])
    left = C.compose(C.compose('f', 'g'), 'h')
    right = C.compose('f', C.compose('g', 'h'))
    assert left is right and left.id == 'h_o_g_o_f'
    assert C.composite('f', 'h_o_g') is left


def test_compose_collision():
    C = Category('C', objects('A', 'B', 'C'), [
        arrow('f', 'A', 'B'), arrow('g', 'B', 'C'), arrow('g_o_f', 'A', 'A')])
    with raises(DuplicateMorphism):
        C.compose('f', 'g')


def test_compose_same_id_different_chain():
    C = Category('C', objects('A', 'B', 'C', 'D'), [
        arrow('a', 'A', 'B'), arrow('b_o_c', 'B', 'D'),
        arrow('c_o_a', 'A', 'C'), arrow('b', 'C', 'D')])
    h = C.compose('a', 'b_o_c')
    assert h.id == 'b_o_c_o_a' and h.components == ('a', 'b_o_c')
    with raises(DuplicateMorphism):
        C.compose('c_o_a', 'b')
    assert C.get_morphism('b_o_c_o_a') is h
    assert C.composite('c_o_a', 'b') is None


def test_compose_path(set_toy):
    assert set_toy.compose_path(['f']) is set_toy.get_morphism('f')
    assert set_toy.compose_path(['f', 'g']).id == 'g_o_f'
    with raises(ValueError):
        set_toy.compose_path([])


def test_compose_threads(set_toy):
    results = []
    threads = [
        Thread(target=lambda: results.append(set_toy.compose('f', 'g')))
        for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len({id(h) for h in results}) == 1


def test_diagram_commutes():
    C = Category('Set-toy', objects('A', 'B', 'C'), [
        arrow('f', 'A', 'B'), arrow('g', 'B', 'C'), arrow('h', 'A', 'C')])
    assert C.diagram_commutes([['f', 'g'], ['h']])
    assert C.diagram_commutes([['f', 'g']])
    assert C.diagram_commutes([])
    assert not C.diagram_commutes([['f', 'g'], ['f']])
    assert not C.diagram_commutes([['f', 'g'], ['g']])


def test_diagram_commutes_errors(set_toy):
    with raises(ValueError) as err:
        set_toy.diagram_commutes([['f', 'g'], []])
    assert str(err.value) == messages.EMPTY_PATH
    with raises(UnknownMorphism):
        set_toy.diagram_commutes([['f', 'g'], ['k']])
    with raises(NotComposable):
        set_toy.diagram_commutes([['f', 'g'], ['f', 'f', 'g']])


def test_diagram_commutes_equality():
    C = Category('Set-toy', objects('A', 'B', 'C'), [
        arrow('f', 'A', 'B', data=lambda x: x + 1),
        arrow('g', 'B', 'C', data=lambda x: 2 * x),
        arrow('h', 'A', 'C', data=lambda x: 2 * x + 2),
        arrow('k', 'A', 'C', data=lambda x: 2 * x + 1)])
    paths = [['f', 'g'], ['h']]
    samples = sample_equality(range(10))
    assert C.diagram_commutes(paths, equality=samples)
    assert not C.diagram_commutes([['f', 'g'], ['k']], equality=samples)
    assert C.diagram_commutes([['f', 'g'], ['k']])
    assert not C.diagram_commutes(paths, equality=structural_equality)
    D = Category('strict', objects('A'), equality=structural_equality)
    assert D.equality is structural_equality


def test_verify(set_toy):
    report = set_toy.verify()
    assert report.valid and report.errors == []
    assert set_toy.has_morphism('f_o_id_A')
    assert set_toy.has_morphism('id_B_o_f')


def test_verify_idempotent(set_toy):
    set_toy.verify()
    morphisms = set_toy.get_morphisms()
    assert set_toy.verify().valid
    assert set_toy.get_morphisms() == morphisms


def test_verify_associativity():
    C = Category('C', objects('A', 'B'), [
        arrow('f', 'A', 'B'), arrow('g', 'B', 'A')])
    assert C.verify().valid
    assert C.has_morphism('f_o_g_o_f') and C.has_morphism('g_o_f_o_g')
    D = Category('D', objects('A', 'B'), [
        arrow('f', 'A', 'B'), arrow('g', 'B', 'A')])
    assert D.verify(associativity=False).valid
    assert not D.has_morphism('f_o_g_o_f')


def test_verify_collision_is_reported():
    C = Category('C', objects('A', 'B', 'C'), [
        arrow('f', 'A', 'B'), arrow('g', 'B', 'C'),
        arrow('f_o_id_A', 'A', 'A')])
    report = C.verify()
    assert not report.valid
    assert messages.IDENTITY_CHECK_FAILED.format(
        "Right", messages.DUPLICATE_MORPHISM.format('f_o_id_A')) \
        in report.errors


def test_verify_logs(caplog):
    C = Category('C', objects('A', 'B'), [
        arrow('f', 'A', 'B'), arrow('f_o_id_A', 'A', 'A')])
    with caplog.at_level(logging.INFO, logger='grothendieck.category'):
        assert not C.verify().valid
    assert "C fails" in caplog.text


def test_graph(set_toy):
    set_toy.compose('f', 'g')
    graph = set_toy.graph
    assert isinstance(graph, nx.MultiDiGraph)
    assert list(graph.nodes) == ['A', 'B', 'C']
    assert list(graph.edges(keys=True)) == [('A', 'B', 'f'), ('B', 'C', 'g')]
    assert graph.edges['A', 'B', 'f']['label'] == 'f'


def test_graph_ignores_composites(set_toy):
    edges = list(set_toy.graph.edges(keys=True))
    set_toy.verify()
    set_toy.compose('f', 'g')
    assert list(set_toy.graph.edges(keys=True)) == edges


def test_serialisation(set_toy):
    set_toy.compose('f', 'g')
    C = loads(dumps(set_toy))
    assert C.name == set_toy.name
    assert [obj.id for obj in C.get_objects()] == ['A', 'B', 'C']
    assert [m.id for m in C.get_generators()] == ['f', 'g']
    assert C.get_identity('C').id == 'id_C'
    assert not C.has_morphism('g_o_f')
