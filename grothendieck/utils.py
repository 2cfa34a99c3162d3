# -*- coding: utf-8 -*-

""" Grothendieck utility functions. """

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import (
    Any,
    Generic,
    Iterable,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from grothendieck import messages

KT = TypeVar('KT')
VT = TypeVar('VT')
T = TypeVar('T')

MappingOrPairs = Union[Mapping[KT, VT], Iterable[Tuple[KT, VT]]]


class AxiomError(Exception):
    """ The gods of category theory are not happy. """


class NotComposable(AxiomError):
    """ The target of the first arrow is not the source of the second. """


class IncompatibleFunctors(AxiomError):
    """ Two functors do not act between the same pair of categories. """


class RegistrationError(ValueError):
    """ An object or morphism cannot be registered in a category. """


class DuplicateObject(RegistrationError):
    """ An object with the same id is already registered. """


class DuplicateMorphism(RegistrationError):
    """ A morphism with the same id is already registered. """


class UnknownObject(RegistrationError):
    """ A morphism refers to an object that is not registered. """


class UnknownMorphism(RegistrationError):
    """ A morphism id does not refer to a registered morphism. """


def factory_name(cls: type) -> str:
    """
    Returns a string describing a grothendieck class.

    Example
    -------
    >>> from grothendieck.category import Category
    >>> assert factory_name(Category) == "category.Category"
    """
    module = cls.__module__.removeprefix('grothendieck.')
    return f"{module}.{cls.__name__}".removeprefix('builtins.')


def from_tree(tree: dict):
    """
    Import grothendieck and decode a serialised object.

    Parameters:
        tree : The serialisation of a grothendieck object.

    Example
    -------
    >>> tree = {'factory': 'cat.MathObject', 'id': 'A', 'label': 'A'}
    >>> from grothendieck.cat import MathObject
    >>> assert from_tree(tree) == MathObject('A', 'A')
    """
    *modules, factory = tree['factory'].removeprefix(
        'grothendieck.').split('.')
    import grothendieck
    module = grothendieck
    for attr in modules:
        module = getattr(module, attr)
    return getattr(module, factory).from_tree(tree)


def dumps(obj, **kwargs) -> str:
    """
    Serialise a grothendieck object as JSON.

    Parameters:
        obj : The grothendieck object to serialise.
        kwargs : Passed to ``json.dumps``.

    Example
    -------
    >>> from grothendieck.cat import MathObject
    >>> print(dumps(MathObject('A', 'A', definition="A set")))
    {"factory": "cat.MathObject", "id": "A", "label": "A", "definition": "A set"}
    """
    return json.dumps(obj.to_tree(), **kwargs)


def loads(raw: str | bytes):
    """
    Loads a serialised grothendieck object.

    Example
    -------
    >>> from grothendieck.cat import MathObject
    >>> raw = '{"factory": "cat.MathObject", "id": "A", "label": "A"}'
    >>> assert loads(raw) == MathObject('A', 'A')
    >>> assert loads(dumps(MathObject('B', 'B'))) == MathObject('B', 'B')
    """
    obj = json.loads(raw)
    if isinstance(obj, list):
        return [from_tree(o) for o in obj]
    return from_tree(obj)


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` if ``object`` is not instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    cls_name = ' | '.join(map(factory_name, classes))
    if not any(isinstance(object_, cls) for cls in classes):
        raise TypeError(messages.TYPE_ERROR.format(
            cls_name, factory_name(type(object_))))


def as_mapping(mapping: Optional[MappingOrPairs[KT, VT]]) -> dict[KT, VT]:
    """
    Turn a mapping or an iterable of key/value pairs into a fresh dict.

    Example
    -------
    >>> assert as_mapping({'A': 'B'}) == as_mapping([('A', 'B')]) == {'A': 'B'}
    >>> assert as_mapping(None) == {}
    """
    return dict(mapping or {})


def slugify(prefix: str, name: str) -> str:
    """
    The id of a named construction, e.g. a category or a functor.

    Example
    -------
    >>> slugify("cat", "Set  Toy")
    'cat-set-toy'
    """
    slug = re.sub(r"\s+", "-", name.lower())
    return f"{prefix}-{slug}"


class Composable(ABC, Generic[T]):
    """
    Abstract class implementing the syntactic sugar :code:`>>` and :code:`<<`
    for forward and backward composition with some method :code:`then`.

    Subclasses have a :code:`source` and a :code:`target`.
    """
    source: T
    target: T

    @abstractmethod
    def then(self, other: Composable[T]) -> Composable[T]:
        """
        Sequential composition, to be instantiated.

        Parameters:
            other : The other composable object to compose sequentially.
        """

    def is_composable(self, other: Composable[T]) -> bool:
        """
        Whether two objects are composable, i.e. the target of the first is
        the source of the second.

        Parameters:
            other : The other composable object.
        """
        return self.target is other.source

    def is_parallel(self, other: Composable[T]) -> bool:
        """
        Whether two composable objects are parallel, i.e. they have the same
        source and target.

        Parameters:
            other : The other composable object.
        """
        return self.source is other.source and self.target is other.target

    __rshift__ = lambda self, other: self.then(other)
    __lshift__ = lambda self, other: other.then(self)


def assert_iscomposable(left: Any, right: Any):
    """
    Raise :class:`NotComposable` if two objects are not composable,
    i.e. the source of ``right`` is not the target of ``left``.

    Parameters:
        left : A composable object.
        right : Another composable object.
    """
    if not left.is_composable(right):
        raise NotComposable(messages.NOT_COMPOSABLE.format(
            left, right, left.target, right.source))


def assert_isparallel(left: Any, right: Any):
    """
    Raise :class:`IncompatibleFunctors` if two functors do not have the
    same source and target categories.

    Parameters:
        left : A functor.
        right : Another functor.
    """
    if not left.is_parallel(right):
        raise IncompatibleFunctors(
            messages.INCOMPATIBLE_FUNCTORS.format(left, right))
