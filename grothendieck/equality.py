# -*- coding: utf-8 -*-

"""
Strategies for deciding when two parallel morphisms are equal.

A finite presented category only knows its morphisms by id, so checking that
a diagram commutes needs a notion of equality. The default compares
endpoints only, stricter strategies can be injected wherever a check takes
an :code:`equality` argument.

Summary
-------

.. autosummary::
    :template: function.rst
    :nosignatures:
    :toctree:

    endpoint_equality
    structural_equality
    sample_equality

Example
-------
>>> from grothendieck.cat import Morphism
>>> f = Morphism('f', 'A', 'B', 'f', data=lambda x: 2 * x)
>>> g = Morphism('g', 'A', 'B', 'g', data=lambda x: x + x)
>>> h = Morphism('h', 'A', 'B', 'h', data=lambda x: x * x)
>>> assert endpoint_equality(f, h) and not structural_equality(f, h)
>>> equal_on_samples = sample_equality(range(5))
>>> assert equal_on_samples(f, g) and not equal_on_samples(f, h)
"""

from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

from grothendieck.cat import Morphism

Equality = Callable[[Morphism, Morphism], bool]


def endpoint_equality(left: Morphism, right: Morphism) -> bool:
    """ Two morphisms are equal whenever they are parallel. """
    return left.is_parallel(right)


def structural_equality(left: Morphism, right: Morphism) -> bool:
    """ Two morphisms are equal whenever they have the same id. """
    return left.id == right.id


def sample_equality(domain: Iterable) -> Equality:
    """
    Two parallel morphisms are equal whenever their functions agree on every
    value of a finite sample :code:`domain`.

    Parameters:
        domain : The sample values on which to evaluate both functions.

    Note
    ----
    Outputs are compared with :func:`numpy.array_equal`, so functions may
    return arrays. When either morphism has no function, this falls back to
    :func:`structural_equality`.
    """
    samples = tuple(domain)

    def equality(left: Morphism, right: Morphism) -> bool:
        if not left.is_parallel(right):
            return False
        if left.data is None or right.data is None:
            return structural_equality(left, right)
        return all(
            np.array_equal(left(value), right(value)) for value in samples)
    return equality
