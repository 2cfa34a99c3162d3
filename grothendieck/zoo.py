# -*- coding: utf-8 -*-

"""
A gallery of familiar categories, each presented by a few objects and
morphisms.

Every constructor returns a fresh category, since categories only grow.

>>> Set = ZOO['Set']()
>>> f, g = Set.get_morphism('f'), Set.get_morphism('g')
>>> assert Set.compose(f, g)(1) == g(f(1))
>>> assert all(make().verify().valid for make in ZOO.values())
"""

from __future__ import annotations

from grothendieck.category import Category
from grothendieck.diagram import category_from_graph


def set_category() -> Category:
    """ Sets and functions, with concrete functions as data. """
    return category_from_graph('Set', [
        {'id': 'A', 'label': 'A', 'data': frozenset({1, 2, 3}),
         'definition': 'Set A = {1, 2, 3}'},
        {'id': 'B', 'label': 'B', 'data': frozenset({'a', 'b'}),
         'definition': 'Set B = {a, b}'},
        {'id': 'C', 'label': 'C', 'data': frozenset({'x', 'y', 'z'}),
         'definition': 'Set C = {x, y, z}'},
    ], [
        {'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f',
         'definition': 'Function f: A → B',
         'data': lambda n: 'a' if n % 2 else 'b'},
        {'id': 'g', 'source': 'B', 'target': 'C', 'label': 'g',
         'definition': 'Function g: B → C',
         'data': {'a': 'x', 'b': 'y'}.__getitem__},
        {'id': 'h', 'source': 'A', 'target': 'C', 'label': 'h',
         'definition': 'Composite h = g ∘ f',
         'data': lambda n: 'x' if n % 2 else 'y'},
    ])


def grp() -> Category:
    """ Groups and homomorphisms. """
    return category_from_graph('Grp', [
        {'id': 'Z', 'label': 'ℤ', 'definition': 'Integers under addition'},
        {'id': 'Z2', 'label': 'ℤ/2ℤ', 'definition': 'Integers mod 2'},
        {'id': 'S3', 'label': 'S₃',
         'definition': 'Symmetric group on 3 elements'},
    ], [
        {'id': 'phi', 'source': 'Z', 'target': 'Z2', 'label': 'φ',
         'definition': 'Quotient map φ(n) = n mod 2',
         'data': lambda n: n % 2},
        {'id': 'psi', 'source': 'Z', 'target': 'S3', 'label': 'ψ',
         'definition': 'Group homomorphism'},
    ])


def ring() -> Category:
    """ Rings and ring homomorphisms. """
    return category_from_graph('Ring', [
        {'id': 'Z', 'label': 'ℤ', 'definition': 'Ring of integers'},
        {'id': 'Q', 'label': 'ℚ', 'definition': 'Field of rationals'},
        {'id': 'R', 'label': 'ℝ', 'definition': 'Field of reals'},
    ], [
        {'id': 'incl1', 'source': 'Z', 'target': 'Q', 'label': 'ι',
         'definition': 'Inclusion ℤ ↪ ℚ'},
        {'id': 'incl2', 'source': 'Q', 'target': 'R', 'label': 'ι',
         'definition': 'Inclusion ℚ ↪ ℝ'},
    ])


def top() -> Category:
    """ Topological spaces and continuous maps. """
    return category_from_graph('Top', [
        {'id': 'R', 'label': 'ℝ',
         'definition': 'Real line with standard topology'},
        {'id': 'S1', 'label': 'S¹', 'definition': 'Circle'},
        {'id': 'D2', 'label': 'D²', 'definition': '2-dimensional disk'},
    ], [
        {'id': 'incl', 'source': 'S1', 'target': 'D2', 'label': 'ι',
         'definition': 'Boundary inclusion S¹ ↪ D²'},
        {'id': 'proj', 'source': 'R', 'target': 'S1', 'label': 'π',
         'definition': 'Exponential map ℝ → S¹'},
    ])


def vect() -> Category:
    """ Vector spaces over a field k and linear maps. """
    return category_from_graph('Vect_k', [
        {'id': 'k', 'label': 'k', 'definition': 'Base field k'},
        {'id': 'k2', 'label': 'k²', 'definition': '2-dimensional space'},
        {'id': 'k3', 'label': 'k³', 'definition': '3-dimensional space'},
    ], [
        {'id': 'proj', 'source': 'k3', 'target': 'k2', 'label': 'π',
         'definition': 'Projection π(x,y,z) = (x,y)',
         'data': lambda v: (v[0], v[1])},
        {'id': 'incl', 'source': 'k', 'target': 'k2', 'label': 'ι',
         'definition': 'Inclusion ι(x) = (x,0)',
         'data': lambda x: (x, 0)},
    ])


ZOO = {
    'Set': set_category,
    'Grp': grp,
    'Ring': ring,
    'Top': top,
    'Vect': vect,
}
