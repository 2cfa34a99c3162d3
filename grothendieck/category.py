# -*- coding: utf-8 -*-

"""
Finite categories, presented explicitly by their objects and morphisms.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Category

Axioms
------

Every object comes with its identity morphism:

>>> C = Category('Set-toy', [
...     {'id': 'A', 'label': 'A'},
...     {'id': 'B', 'label': 'B'},
...     {'id': 'C', 'label': 'C'}], [
...     {'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f'},
...     {'id': 'g', 'source': 'B', 'target': 'C', 'label': 'g'}])
>>> print(C.get_identity('A').id)
id_A

Composition is memoised, composing the same pair twice gives the same
morphism back:

>>> h = C.compose('f', 'g')
>>> print(h.id, h.label, h.source, h.target)
g_o_f g∘f A C
>>> assert C.compose('f', 'g') is h

We can check the identity and associativity axioms:

>>> assert C.verify().valid
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import reduce
from threading import RLock
from typing import Optional

import networkx as nx

from grothendieck import messages
from grothendieck.cat import (
    ComposedMorphism,
    MathObject,
    Morphism,
    VerificationReport,
)
from grothendieck.config import (
    COMPOSITION_INFIX,
    COMPOSITION_SYMBOL,
    IDENTITY_PREFIX,
)
from grothendieck.equality import Equality, endpoint_equality
from grothendieck.utils import (
    AxiomError,
    DuplicateMorphism,
    DuplicateObject,
    NotComposable,
    RegistrationError,
    UnknownMorphism,
    UnknownObject,
    factory_name,
    from_tree,
    slugify,
)

logger = logging.getLogger(__name__)


def identity(value):
    """ The function underlying every identity morphism. """
    return value


class Category:
    """
    A category with a finite set of :code:`objects` and :code:`morphisms`.

    Parameters:
        name : The name of the category.
        objects : The objects to register, or plain records thereof.
        morphisms : The morphisms to register, or plain records thereof.
        equality : How to compare parallel morphisms, see
            :mod:`grothendieck.equality`, default is endpoint equality.

    Raises:
        DuplicateObject : If two objects have the same id.
        DuplicateMorphism : If two morphisms have the same id.
        UnknownObject : If a morphism refers to an unregistered object.

    Note
    ----
    Objects and morphisms are append-only: once an id is valid, it remains
    valid for the lifetime of the category. Composition is the only method
    that writes while reading, it is guarded by a re-entrant lock.
    """
    ob_factory = MathObject
    ar_factory = Morphism

    def __init__(
            self, name: str,
            objects: Iterable[MathObject | Mapping] = (),
            morphisms: Iterable[Morphism | Mapping] = (),
            equality: Optional[Equality] = None):
        self.name, self.id = name, slugify("cat", name)
        self.equality = equality or endpoint_equality
        self._objects: dict[str, MathObject] = {}
        self._morphisms: dict[str, Morphism] = {}
        self._identities: dict[str, str] = {}
        self._cache: dict[tuple[str, str], str] = {}
        self._lock = RLock()
        for obj in objects:
            self.add_object(obj)
        for mor in morphisms:
            self.add_morphism(mor)

    def __repr__(self):
        objects = list(self._objects)
        morphisms = [mor.id for mor in self.get_generators()]
        return f"{factory_name(type(self))}({self.name!r}, " \
               f"objects={objects!r}, morphisms={morphisms!r})"

    def __str__(self):
        return self.name

    def __contains__(self, item):
        if isinstance(item, MathObject):
            return self.get_object(item.id) == item
        if isinstance(item, Morphism):
            return self.get_morphism(item.id) == item
        return self.has_object(item) or self.has_morphism(item)

    def __len__(self):
        return len(self._morphisms)

    def add_object(self, obj: MathObject | Mapping) -> MathObject:
        """
        Register an object together with its identity morphism.

        Parameters:
            obj : The object to add, or a plain record thereof.

        Raises:
            DuplicateObject : If an object with the same id already exists.

        Example
        -------
        >>> C = Category('C')
        >>> A = C.add_object({'id': 'A', 'label': 'A'})
        >>> print(C.get_identity('A').label)
        id_A
        >>> C.add_object(A)
        Traceback (most recent call last):
        ...
        grothendieck.utils.DuplicateObject: Object A already exists.
        """
        obj = self.ob_factory.cast(obj)
        with self._lock:
            if obj.id in self._objects:
                raise DuplicateObject(messages.DUPLICATE_OBJECT.format(obj.id))
            identity_id = IDENTITY_PREFIX + obj.id
            if identity_id in self._morphisms:
                raise DuplicateMorphism(
                    messages.DUPLICATE_MORPHISM.format(identity_id))
            self._objects[obj.id] = obj
            self._morphisms[identity_id] = self.ar_factory(
                identity_id, obj.id, obj.id, IDENTITY_PREFIX + obj.label,
                definition=f"Identity morphism on {obj.label}", data=identity)
            self._identities[obj.id] = identity_id
        logger.debug("Added object %s to %s.", obj.id, self.name)
        return obj

    def add_morphism(self, mor: Morphism | Mapping) -> Morphism:
        """
        Register a morphism between two registered objects.

        Parameters:
            mor : The morphism to add, or a plain record thereof.

        Raises:
            UnknownObject : If its source or target is not registered.
            DuplicateMorphism : If a morphism with the same id exists.
        """
        mor = self.ar_factory.cast(mor)
        with self._lock:
            if mor.source not in self._objects:
                raise UnknownObject(messages.UNKNOWN_SOURCE.format(mor.source))
            if mor.target not in self._objects:
                raise UnknownObject(messages.UNKNOWN_TARGET.format(mor.target))
            if mor.id in self._morphisms:
                raise DuplicateMorphism(
                    messages.DUPLICATE_MORPHISM.format(mor.id))
            self._morphisms[mor.id] = mor
        logger.debug("Added morphism %s to %s.", mor.id, self.name)
        return mor

    def get_object(self, obj_id: str) -> Optional[MathObject]:
        """ The object with a given id, if any. """
        return self._objects.get(obj_id)

    def get_objects(self) -> list[MathObject]:
        """ The list of all objects, in the order they were added. """
        return list(self._objects.values())

    def has_object(self, obj_id: str) -> bool:
        """ Whether there is an object with a given id. """
        return obj_id in self._objects

    def get_morphism(self, mor_id: str) -> Optional[Morphism]:
        """ The morphism with a given id, if any. """
        return self._morphisms.get(mor_id)

    def get_morphisms(self) -> list[Morphism]:
        """
        The list of all morphisms, including identities and the composed
        morphisms created so far.
        """
        return list(self._morphisms.values())

    def has_morphism(self, mor_id: str) -> bool:
        """ Whether there is a morphism with a given id. """
        return mor_id in self._morphisms

    def get_morphisms_from(self, obj_id: str) -> list[Morphism]:
        """ The morphisms with a given source. """
        return [mor for mor in self.get_morphisms() if mor.source == obj_id]

    def get_morphisms_to(self, obj_id: str) -> list[Morphism]:
        """ The morphisms with a given target. """
        return [mor for mor in self.get_morphisms() if mor.target == obj_id]

    def get_identity(self, obj_id: str) -> Optional[Morphism]:
        """ The identity morphism on a given object. """
        identity_id = self._identities.get(obj_id)
        return None if identity_id is None else self._morphisms.get(
            identity_id)

    def is_identity(self, mor: Morphism | str) -> bool:
        """ Whether a morphism is the identity of some object. """
        mor = mor if isinstance(mor, Morphism) else self.get_morphism(mor)
        return mor is not None\
            and self._identities.get(mor.source) == mor.id

    def get_composites(self) -> list[ComposedMorphism]:
        """ The composed morphisms created so far. """
        return [mor for mor in self.get_morphisms()
                if isinstance(mor, ComposedMorphism)]

    def get_generators(self, identities: bool = False) -> list[Morphism]:
        """
        The morphisms that were registered rather than composed.

        Parameters:
            identities : Whether to include the identity morphisms.
        """
        return [
            mor for mor in self.get_morphisms()
            if not isinstance(mor, ComposedMorphism)
            and (identities or not self.is_identity(mor))]

    def _resolve(self, mor: Morphism | str) -> Morphism:
        mor_id = mor.id if isinstance(mor, Morphism) else mor
        result = self._morphisms.get(mor_id)
        if result is None:
            raise UnknownMorphism(messages.UNKNOWN_MORPHISM.format(mor_id))
        return result

    def _chain(self, mor: Morphism) -> tuple[str, ...]:
        """ The generators a morphism is composed of, in order. """
        if not isinstance(mor, ComposedMorphism):
            return (mor.id, )
        return sum((self._chain(self._morphisms[mor_id])
                    for mor_id in mor.components), ())

    def composite(
            self, f: Morphism | str, g: Morphism | str
            ) -> Optional[ComposedMorphism]:
        """
        The composition of :code:`f` then :code:`g` if it has been computed
        already, without composing anything.

        Parameters:
            f : The first morphism, or its id.
            g : The second morphism, or its id.
        """
        key = tuple(x.id if isinstance(x, Morphism) else x for x in (f, g))
        composed_id = self._cache.get(key)
        return None if composed_id is None else self._morphisms[composed_id]

    def compose(self, f: Morphism | str, g: Morphism | str) -> Morphism:
        """
        The composition :code:`g ∘ f`, i.e. :code:`f` then :code:`g`.

        Parameters:
            f : The first morphism :code:`f: A → B`, or its id.
            g : The second morphism :code:`g: B → C`, or its id.

        Returns:
            The composed morphism :code:`g ∘ f: A → C`, memoised so that
            composing the same pair again returns the very same morphism.

        Raises:
            UnknownMorphism : If either morphism is not registered.
            NotComposable : If the target of :code:`f` is not the source of
                :code:`g`.
            DuplicateMorphism : If the id of the composition already names
                another morphism, registered or composed differently.

        Example
        -------
        >>> C = Category('C', [{'id': 'A', 'label': 'A'}], [
        ...     {'id': 'f', 'source': 'A', 'target': 'A', 'label': 'f',
        ...      'data': lambda x: x + 1}])
        >>> ff = C.compose('f', 'f')
        >>> print(ff.id, ff.components, ff(0))
        f_o_f ('f', 'f') 2
        """
        f, g = self._resolve(f), self._resolve(g)
        if not f.is_composable(g):
            raise NotComposable(messages.NOT_COMPOSABLE.format(
                f.id, g.id, f.target, g.source))
        with self._lock:
            cached = self.composite(f, g)
            if cached is not None:
                return cached
            composed_id = g.id + COMPOSITION_INFIX + f.id
            composed = self._morphisms.get(composed_id)
            if composed is None:
                composed = ComposedMorphism(
                    composed_id, f.source, g.target,
                    g.label + COMPOSITION_SYMBOL + f.label,
                    definition=f"Composition of {f.label} and {g.label}",
                    data=_then(f.data, g.data),
                    components=(f.id, g.id))
                self._morphisms[composed_id] = composed
                logger.debug("Composed %s in %s.", composed_id, self.name)
            elif not isinstance(composed, ComposedMorphism)\
                    or composed.endpoints != (f.source, g.target)\
                    or self._chain(composed) != (
                        self._chain(f) + self._chain(g)):
                raise DuplicateMorphism(
                    messages.DUPLICATE_MORPHISM.format(composed_id))
            self._cache[f.id, g.id] = composed_id
        return composed

    def compose_path(self, path: Iterable[Morphism | str]) -> Morphism:
        """
        Fold a non-empty path of morphisms from left to right with
        :meth:`compose`.

        Parameters:
            path : The morphisms, or their ids, in the order they apply.
        """
        morphisms = [self._resolve(mor) for mor in path]
        if not morphisms:
            raise ValueError(messages.EMPTY_PATH)
        return reduce(self.compose, morphisms)

    def diagram_commutes(
            self, paths: list[list[Morphism | str]],
            equality: Optional[Equality] = None) -> bool:
        """
        Whether all the given paths compose to equal morphisms.

        Parameters:
            paths : Each path is a list of morphisms, or of their ids.
            equality : How to compare the composites, default is
                :attr:`Category.equality`.

        Returns:
            :code:`False` if the paths do not all share the same source and
            target, otherwise whether their composites are pairwise equal.

        Example
        -------
        >>> C = Category('square', [{'id': x, 'label': x} for x in "ABCD"], [
        ...     {'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f'},
        ...     {'id': 'g', 'source': 'B', 'target': 'D', 'label': 'g'},
        ...     {'id': 'h', 'source': 'A', 'target': 'C', 'label': 'h'},
        ...     {'id': 'k', 'source': 'C', 'target': 'D', 'label': 'k'}])
        >>> assert C.diagram_commutes([['f', 'g'], ['h', 'k']])
        >>> assert not C.diagram_commutes([['f', 'g'], ['h']])
        """
        if len(paths) < 2:
            return True
        resolved = []
        for path in paths:
            morphisms = [self._resolve(mor) for mor in path]
            if not morphisms:
                raise ValueError(messages.EMPTY_PATH)
            resolved.append(morphisms)
        source, target = resolved[0][0].source, resolved[0][-1].target
        if any((path[0].source, path[-1].target) != (source, target)
               for path in resolved):
            return False
        equality = equality or self.equality
        first, *others = [reduce(self.compose, path) for path in resolved]
        return all(equality(first, other) for other in others)

    def verify(self, associativity: bool = True) -> VerificationReport:
        """
        Check the identity axioms and, optionally, associativity.

        For every object :code:`A` with identity :code:`id_A`, checks that
        :code:`id_A: A → A`, that :code:`compose(id_A, f)` has the target of
        :code:`f` for every :code:`f` out of :code:`A` and that
        :code:`compose(f, id_A)` has the source of :code:`f` for every
        :code:`f` into :code:`A`.

        Parameters:
            associativity : Whether to check :code:`(h ∘ g) ∘ f = h ∘ (g ∘ f)`
                for every composable triple of non-identity generators.

        Returns:
            A report listing every violation, this method never raises.
        """
        report = VerificationReport()
        generators = self.get_generators(identities=True)
        for obj_id, identity_id in list(self._identities.items()):
            id_A = self.get_morphism(identity_id)
            if id_A is None:
                report.errors.append(
                    messages.IDENTITY_NOT_FOUND.format(identity_id))
                continue
            if id_A.endpoints != (obj_id, obj_id):
                report.errors.append(
                    messages.IDENTITY_WRONG_ENDPOINTS.format(identity_id))
            for f in generators:
                if f.source != obj_id:
                    continue
                try:
                    if self.compose(id_A, f).target != f.target:
                        report.errors.append(
                            messages.RIGHT_IDENTITY_FAILS.format(f.label))
                except (AxiomError, RegistrationError) as error:
                    report.errors.append(
                        messages.IDENTITY_CHECK_FAILED.format("Right", error))
            for f in generators:
                if f.target != obj_id:
                    continue
                try:
                    if self.compose(f, id_A).source != f.source:
                        report.errors.append(
                            messages.LEFT_IDENTITY_FAILS.format(f.label))
                except (AxiomError, RegistrationError) as error:
                    report.errors.append(
                        messages.IDENTITY_CHECK_FAILED.format("Left", error))
        if associativity:
            self._verify_associativity(report)
        if not report.valid:
            logger.info("%s fails %d axiom checks.",
                        self.name, len(report.errors))
        return report

    def _verify_associativity(self, report: VerificationReport):
        generators = self.get_generators()
        for f in generators:
            for g in generators:
                if not f.is_composable(g):
                    continue
                for h in generators:
                    if not g.is_composable(h):
                        continue
                    try:
                        left = self.compose(self.compose(f, g), h)
                        right = self.compose(f, self.compose(g, h))
                    except (AxiomError, RegistrationError) as error:
                        report.errors.append(str(error))
                        continue
                    if not self.equality(left, right):
                        report.errors.append(messages.ASSOCIATIVITY_FAILS
                                             .format(f.label, g.label, h.label))

    @property
    def graph(self) -> nx.MultiDiGraph:
        """
        The underlying graph, with one node per object and one edge keyed by
        id for each non-identity generator.

        Note
        ----
        Composed morphisms are left out, so the graph does not depend on
        which compositions have been computed so far.
        """
        graph = nx.MultiDiGraph(name=self.name)
        for obj in self.get_objects():
            graph.add_node(obj.id, label=obj.label)
        for mor in self.get_generators():
            graph.add_edge(
                mor.source, mor.target, key=mor.id, label=mor.label)
        return graph

    def to_tree(self) -> dict:
        """
        Serialise a category, see :func:`grothendieck.utils.dumps`.

        Note
        ----
        Identities and composed morphisms are not serialised, they are
        generated again when decoding.
        """
        return {
            'factory': factory_name(type(self)),
            'name': self.name,
            'objects': [obj.to_tree() for obj in self.get_objects()],
            'morphisms': [mor.to_tree() for mor in self.get_generators()]}

    @classmethod
    def from_tree(cls, tree: dict) -> Category:
        """
        Decode a serialised category, see :func:`grothendieck.utils.loads`.

        Parameters:
            tree : The serialisation.
        """
        return cls(tree['name'],
                   map(from_tree, tree['objects']),
                   map(from_tree, tree['morphisms']))


def _then(first, second):
    if first is None or second is None:
        return None
    return lambda value: second(first(value))
