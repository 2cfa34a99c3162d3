# -*- coding: utf-8 -*-

"""
The entities of a finite, explicitly presented category.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    MathObject
    Morphism
    ComposedMorphism
    VerificationReport

Objects and morphisms are plain immutable records: they only refer to each
other by id, a :class:`grothendieck.category.Category` is what holds them
together.

>>> A, B = MathObject('A', 'A'), MathObject('B', 'B')
>>> f = Morphism('f', 'A', 'B', 'f', data=lambda x: x + 1)
>>> assert (f.source, f.target) == (A.id, B.id)
>>> assert f(41) == 42
"""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Callable, Generic, Optional, TypeVar

from grothendieck import messages
from grothendieck.utils import assert_isinstance, factory_name

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class MathObject(Generic[T]):
    """
    An object with a unique :code:`id` and a display :code:`label`.

    Parameters:
        id : The id of the object, unique within a category.
        label : The display name of the object.
        data : An optional opaque payload.
        definition : An optional human-readable description.

    Note
    ----
    Two objects with the same id are the same object.

    >>> assert MathObject('A', 'A') == MathObject('A', 'a set', data=[1, 2])
    """
    id: str
    label: str = field(compare=False)
    data: Optional[T] = field(default=None, compare=False)
    definition: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        assert_isinstance(self.id, str)
        assert_isinstance(self.label, str)

    def __str__(self):
        return self.label

    @classmethod
    def cast(cls, record: MathObject | Mapping) -> MathObject:
        """
        Cast a plain record into an object, do nothing if it is already.

        Parameters:
            record : An object or a mapping with the same field names.

        Example
        -------
        >>> MathObject.cast({'id': 'A', 'label': 'A'})
        MathObject(id='A', label='A', data=None, definition=None)
        """
        if isinstance(record, cls):
            return record
        assert_isinstance(record, (cls, Mapping))
        return cls(**record)

    def to_tree(self) -> dict:
        """
        Serialise an object, see :func:`grothendieck.utils.dumps`.

        Example
        -------
        >>> MathObject('A', 'A', data=[1, 2, 3]).to_tree()
        {'factory': 'cat.MathObject', 'id': 'A', 'label': 'A', 'data': [1, 2, 3]}
        """
        tree = {
            'factory': factory_name(type(self)),
            'id': self.id,
            'label': self.label}
        if self.definition is not None:
            tree['definition'] = self.definition
        if self.data is not None:
            tree['data'] = self.data
        return tree

    @classmethod
    def from_tree(cls, tree: dict) -> MathObject:
        """
        Decode a serialised object, see :func:`grothendieck.utils.loads`.

        Parameters:
            tree : The serialisation.
        """
        return cls(tree['id'], tree['label'], data=tree.get('data', None),
                   definition=tree.get('definition', None))


@dataclass(frozen=True)
class Morphism(Generic[T, U]):
    """
    A morphism with a unique :code:`id` from a :code:`source` object id to a
    :code:`target` object id.

    Parameters:
        id : The id of the morphism, unique within a category.
        source : The id of its source object.
        target : The id of its target object.
        label : The display name of the morphism.
        definition : An optional human-readable description.
        data : An optional function, used only for illustrative evaluation.

    Example
    -------
    >>> f = Morphism('f', 'A', 'B', 'f')
    >>> g = Morphism('g', 'B', 'C', 'g')
    >>> assert f.is_composable(g) and not g.is_composable(f)
    """
    id: str
    source: str
    target: str
    label: str = field(compare=False)
    definition: Optional[str] = field(default=None, compare=False)
    data: Optional[Callable[[T], U]] = field(
        default=None, compare=False, repr=False)

    def __post_init__(self):
        for attr in (self.id, self.source, self.target, self.label):
            assert_isinstance(attr, str)

    def __str__(self):
        return self.label

    def __call__(self, value: T) -> U:
        if self.data is None:
            raise TypeError(messages.NO_DATA.format(self.id))
        return self.data(value)

    @property
    def endpoints(self) -> tuple[str, str]:
        """ The pair of source and target object ids. """
        return self.source, self.target

    def is_composable(self, other: Morphism) -> bool:
        """
        Whether the target of :code:`self` is the source of :code:`other`.

        Parameters:
            other : The morphism to apply after :code:`self`.
        """
        return self.target == other.source

    def is_parallel(self, other: Morphism) -> bool:
        """
        Whether two morphisms have the same source and target.

        Parameters:
            other : The other morphism.
        """
        return self.endpoints == other.endpoints

    @classmethod
    def cast(cls, record: Morphism | Mapping) -> Morphism:
        """
        Cast a plain record into a morphism, do nothing if it is already.

        Parameters:
            record : A morphism or a mapping with the same field names.
        """
        if isinstance(record, Morphism):
            return record
        assert_isinstance(record, (cls, Mapping))
        return cls(**record)

    def to_tree(self) -> dict:
        """
        Serialise a morphism, its :code:`data` function is dropped.

        Example
        -------
        >>> Morphism('f', 'A', 'B', 'f', data=abs).to_tree()
        {'factory': 'cat.Morphism', 'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f'}
        """
        tree = {
            'factory': factory_name(type(self)),
            'id': self.id,
            'source': self.source,
            'target': self.target,
            'label': self.label}
        if self.definition is not None:
            tree['definition'] = self.definition
        return tree

    @classmethod
    def from_tree(cls, tree: dict) -> Morphism:
        """
        Decode a serialised morphism.

        Parameters:
            tree : The serialisation.
        """
        return cls(tree['id'], tree['source'], tree['target'], tree['label'],
                   definition=tree.get('definition', None))


@dataclass(frozen=True)
class ComposedMorphism(Morphism[T, U]):
    """
    A morphism obtained by composition, tagged with the ids of its
    :code:`components` in the order they are applied.

    Note
    ----
    Composed morphisms are only ever built by
    :meth:`grothendieck.category.Category.compose`.
    """
    components: tuple[str, ...] = ()

    def to_tree(self) -> dict:
        return dict(super().to_tree(), components=list(self.components))

    @classmethod
    def from_tree(cls, tree: dict) -> ComposedMorphism:
        return cls(tree['id'], tree['source'], tree['target'], tree['label'],
                   definition=tree.get('definition', None),
                   components=tuple(tree['components']))


@dataclass
class VerificationReport:
    """
    The outcome of checking some axioms: a list of :code:`errors`, each one
    a human-readable violation.

    Example
    -------
    >>> report = VerificationReport()
    >>> assert report.valid and bool(report)
    >>> report.errors.append("Left identity fails for f.")
    >>> assert not report.valid
    """
    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """ Whether no violation was found. """
        return not self.errors

    def __bool__(self):
        return self.valid

    def to_tree(self) -> dict:
        return {'valid': self.valid, 'errors': list(self.errors)}
