# -*- coding: utf-8 -*-

"""
Functors between finite categories, given by explicit maps on ids.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Functor

Example
-------
>>> from grothendieck.category import Category
>>> C = Category('C', [{'id': 'A', 'label': 'A'}, {'id': 'B', 'label': 'B'}],
...              [{'id': 'f', 'source': 'A', 'target': 'B', 'label': 'f'}])
>>> D = Category('D', [{'id': 'X', 'label': 'X'}])
>>> F = Functor('Collapse', C, D,
...             object_map={'A': 'X', 'B': 'X'},
...             morphism_map={'id_A': 'id_X', 'id_B': 'id_X', 'f': 'id_X'})
>>> print(F.map_object('A'), F.map_morphism('f'))
X id_X
>>> assert F.verify().valid
"""

from __future__ import annotations

import logging
from typing import Optional

from grothendieck import messages
from grothendieck.cat import (
    ComposedMorphism,
    MathObject,
    Morphism,
    VerificationReport,
)
from grothendieck.category import Category
from grothendieck.config import COMPOSITION_SYMBOL
from grothendieck.utils import (
    AxiomError,
    Composable,
    MappingOrPairs,
    RegistrationError,
    as_mapping,
    assert_iscomposable,
    assert_isinstance,
    factory_name,
    from_tree,
    slugify,
)

logger = logging.getLogger(__name__)


class Functor(Composable[Category]):
    """
    A functor is a pair of maps :code:`object_map` and :code:`morphism_map`
    from the ids of a :code:`source` category to those of a :code:`target`.

    Parameters:
        name : The name of the functor.
        source : The category it maps from.
        target : The category it maps to.
        object_map : Mapping, or pairs, from source to target object ids.
        morphism_map : Mapping, or pairs, from source to target morphism ids.

    Note
    ----
    Nothing is checked at construction: the maps may be partial and may
    refer to missing ids, see :meth:`verify`. A functor never mutates its
    source, composing in its target only populates the composition cache.
    """
    def __init__(
            self, name: str, source: Category, target: Category,
            object_map: Optional[MappingOrPairs[str, str]] = None,
            morphism_map: Optional[MappingOrPairs[str, str]] = None):
        assert_isinstance(source, Category)
        assert_isinstance(target, Category)
        self.name, self.id = name, slugify("functor", name)
        self.source, self.target = source, target
        self.object_map = as_mapping(object_map)
        self.morphism_map = as_mapping(morphism_map)

    def __repr__(self):
        return f"{factory_name(type(self))}({self.name!r}, " \
               f"source={self.source.name!r}, target={self.target.name!r})"

    def __str__(self):
        return self.name

    @classmethod
    def identity(cls, category: Category) -> Functor:
        """
        The identity functor on a given category.

        Parameters:
            category : The source and target of the functor.
        """
        return cls(
            f"Id_{category.name}", category, category,
            {obj.id: obj.id for obj in category.get_objects()},
            {mor.id: mor.id for mor in category.get_morphisms()})

    def then(self, other: Functor) -> Functor:
        """
        The composition of a functor with another, called with :code:`>>`.

        Parameters:
            other : The functor to apply after :code:`self`.

        Raises:
            NotComposable : If the target of :code:`self` is not the source
                of :code:`other`.

        Example
        -------
        >>> from grothendieck.category import Category
        >>> C = Category('C', [{'id': 'A', 'label': 'A'}])
        >>> F = Functor.identity(C)
        >>> print(F >> F)
        Id_C∘Id_C
        """
        assert_isinstance(other, Functor)
        assert_iscomposable(self, other)
        object_map = {
            key: other.object_map[value]
            for key, value in self.object_map.items()
            if value in other.object_map}
        morphism_map = {
            key: other.morphism_map[value]
            for key, value in self.morphism_map.items()
            if value in other.morphism_map}
        return type(self)(
            other.name + COMPOSITION_SYMBOL + self.name,
            self.source, other.target, object_map, morphism_map)

    def map_object(self, obj_id: str) -> Optional[MathObject]:
        """
        The image of an object, if both the mapping and its image exist.

        Parameters:
            obj_id : The id of an object in the source category.
        """
        target_id = self.object_map.get(obj_id)
        return None if target_id is None else self.target.get_object(target_id)

    def map_morphism(self, mor_id: str) -> Optional[Morphism]:
        """
        The image of a morphism, if both the mapping and its image exist.

        Parameters:
            mor_id : The id of a morphism in the source category.
        """
        target_id = self.morphism_map.get(mor_id)
        return None if target_id is None\
            else self.target.get_morphism(target_id)

    def __call__(self, other: MathObject | Morphism):
        """
        Apply the functor to an object or a morphism.

        A composed morphism that is not mapped explicitly is mapped
        component-wise, i.e. :code:`F(g ∘ f) = F(g) ∘ F(f)`.
        """
        assert_isinstance(other, (MathObject, Morphism))
        if isinstance(other, MathObject):
            return self.map_object(other.id)
        if isinstance(other, ComposedMorphism)\
                and other.id not in self.morphism_map:
            images = [
                self(self.source.get_morphism(mor_id))
                for mor_id in other.components]
            if any(image is None for image in images):
                return None
            result = images[0]
            for image in images[1:]:
                result = self.target.compose(result, image)
            return result
        return self.map_morphism(other.id)

    def verify(self, composition: bool = True) -> VerificationReport:
        """
        Check that identities are preserved and, optionally, composition.

        Parameters:
            composition : Whether to also check that every mapped generator
                :code:`f: A → B` is sent to some :code:`F(f): F(A) → F(B)` and
                that every explicitly mapped composite :code:`g ∘ f` is sent
                to :code:`F(g) ∘ F(f)`.

        Returns:
            A report listing every violation, this method never raises.
        """
        report = VerificationReport()
        for obj in self.source.get_objects():
            id_A, F_A = self.source.get_identity(obj.id), self(obj)
            if id_A is None or F_A is None:
                report.errors.append(
                    messages.MISSING_IDENTITY_OR_OBJECT.format(obj.id))
                continue
            mapped = self.map_morphism(id_A.id)
            expected = self.target.get_identity(F_A.id)
            if mapped is None or expected is None:
                report.errors.append(
                    messages.IDENTITY_NOT_PRESERVED.format(obj.id))
            elif mapped.id != expected.id:
                report.errors.append(messages.IDENTITY_WRONG_IMAGE.format(
                    obj.id, mapped.id, expected.id))
        if composition:
            self._verify_endpoints(report)
            self._verify_composites(report)
        if not report.valid:
            logger.info("%s fails %d functor checks.",
                        self.name, len(report.errors))
        return report

    def _verify_endpoints(self, report: VerificationReport):
        for f in self.source.get_generators():
            F_f = self.map_morphism(f.id)
            F_A, F_B = self.map_object(f.source), self.map_object(f.target)
            if F_f is None or F_A is None or F_B is None:
                continue
            if F_f.endpoints != (F_A.id, F_B.id):
                report.errors.append(messages.ENDPOINTS_NOT_PRESERVED.format(
                    f.id, F_f.id, F_f.source, F_f.target, F_A.id, F_B.id))

    def _verify_composites(self, report: VerificationReport):
        for composed in self.source.get_composites():
            image = self.map_morphism(composed.id)
            if image is None:
                continue
            try:
                images = [
                    self(self.source.get_morphism(mor_id))
                    for mor_id in composed.components]
                if any(x is None for x in images):
                    continue
                expected = images[0]
                for x in images[1:]:
                    expected = self.target.compose(expected, x)
            except (AxiomError, RegistrationError) as error:
                report.errors.append(messages.COMPOSITION_CHECK_FAILED.format(
                    composed.id, error))
                continue
            if not self.target.equality(image, expected):
                report.errors.append(messages.COMPOSITION_NOT_PRESERVED
                                     .format(composed.id, image.id,
                                             expected.id))

    def to_tree(self) -> dict:
        """ Serialise a functor together with its source and target. """
        return {
            'factory': factory_name(type(self)),
            'name': self.name,
            'source': self.source.to_tree(),
            'target': self.target.to_tree(),
            'object_map': dict(self.object_map),
            'morphism_map': dict(self.morphism_map)}

    @classmethod
    def from_tree(cls, tree: dict, source: Optional[Category] = None,
                  target: Optional[Category] = None) -> Functor:
        """
        Decode a serialised functor.

        Parameters:
            tree : The serialisation.
            source : The source category, decoded from the tree if omitted.
            target : The target category, decoded from the tree if omitted.
        """
        source = source or from_tree(tree['source'])
        target = target or from_tree(tree['target'])
        return cls(tree['name'], source, target,
                   tree['object_map'], tree['morphism_map'])
