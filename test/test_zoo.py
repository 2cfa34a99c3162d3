# -*- coding: utf-8 -*-

from pytest import mark

from grothendieck.category import Category
from grothendieck.diagram import find_paths
from grothendieck.zoo import *


@mark.parametrize('name', list(ZOO))
def test_zoo(name):
    C = ZOO[name]()
    assert isinstance(C, Category)
    assert len(C.get_objects()) == 3
    assert C.verify().valid


def test_zoo_fresh():
    C = set_category()
    C.add_object({'id': 'D', 'label': 'D'})
    assert not set_category().has_object('D')


def test_set_category():
    Set = set_category()
    assert Set.get_object('A').data == frozenset({1, 2, 3})
    h = Set.compose('f', 'g')
    assert all(h(n) == Set.get_morphism('h')(n) for n in Set.get_object(
        'A').data)
    assert find_paths(Set, 'A', 'C') == [['f', 'g'], ['h']]


def test_vect():
    V = vect()
    assert V.get_morphism('proj')((1, 2, 3)) == (1, 2)
    assert V.get_morphism('incl')(5) == (5, 0)
