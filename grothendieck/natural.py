# -*- coding: utf-8 -*-

"""
Natural transformations between parallel functors.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    NaturalTransformation

Naturality
----------

Given functors :code:`F, G: C → D`, a natural transformation
:code:`α: F ⇒ G` has a component :code:`α_A: F(A) → G(A)` for each object
:code:`A` of :code:`C` such that for every :code:`f: A → B` the square
commutes::

    F(A) --α_A--> G(A)
     |             |
    F(f)          G(f)
     |             |
     v             v
    F(B) --α_B--> G(B)

i.e. :code:`G(f) ∘ α_A = α_B ∘ F(f)`.

Example
-------
>>> from grothendieck.category import Category
>>> from grothendieck.functor import Functor
>>> C = Category('C', [{'id': 'A', 'label': 'A'}])
>>> D = Category('D', [{'id': 'X', 'label': 'X'}, {'id': 'Y', 'label': 'Y'}],
...              [{'id': 'u', 'source': 'X', 'target': 'Y', 'label': 'u'}])
>>> F = Functor('F', C, D, {'A': 'X'}, {'id_A': 'id_X'})
>>> G = Functor('G', C, D, {'A': 'Y'}, {'id_A': 'id_Y'})
>>> alpha = NaturalTransformation('alpha', F, G, {'A': 'u'})
>>> print(alpha.get_component('A'))
u
>>> assert alpha.verify().valid
"""

from __future__ import annotations

import logging
from typing import Optional

from grothendieck import messages
from grothendieck.cat import Morphism, VerificationReport
from grothendieck.equality import Equality
from grothendieck.functor import Functor
from grothendieck.utils import (
    AxiomError,
    Composable,
    MappingOrPairs,
    NotComposable,
    RegistrationError,
    as_mapping,
    assert_isinstance,
    assert_isparallel,
    factory_name,
    from_tree,
    slugify,
)

logger = logging.getLogger(__name__)


class NaturalTransformation(Composable[Functor]):
    """
    A natural transformation from a functor :code:`source` to a functor
    :code:`target`, given by one component morphism id per object.

    Parameters:
        name : The name of the natural transformation.
        source : The functor :code:`F: C → D`.
        target : The functor :code:`G: C → D`.
        components : Mapping, or pairs, from object ids of :code:`C` to
            morphism ids of :code:`D`.

    Raises:
        IncompatibleFunctors : Unless both functors have the same source
            category and the same target category.
    """
    def __init__(
            self, name: str, source: Functor, target: Functor,
            components: Optional[MappingOrPairs[str, str]] = None):
        assert_isinstance(source, Functor)
        assert_isinstance(target, Functor)
        assert_isparallel(source, target)
        self.name, self.id = name, slugify("nat", name)
        self.source, self.target = source, target
        self.components = as_mapping(components)

    def __repr__(self):
        return f"{factory_name(type(self))}({self.name!r}, " \
               f"source={self.source.name!r}, target={self.target.name!r})"

    def __str__(self):
        return self.name

    @property
    def domain(self):
        """ The category :code:`C` on which both functors act. """
        return self.source.source

    @property
    def codomain(self):
        """ The category :code:`D` in which the components live. """
        return self.source.target

    @classmethod
    def identity(cls, functor: Functor) -> NaturalTransformation:
        """
        The identity natural transformation on a functor, its components are
        the identities on the images of objects.

        Parameters:
            functor : The source and target of the natural transformation.
        """
        components = {
            obj: functor.target.get_identity(image).id
            for obj, image in functor.object_map.items()
            if functor.target.has_object(image)}
        return cls(f"id_{functor.name}", functor, functor, components)

    def then(self, other: NaturalTransformation) -> NaturalTransformation:
        """
        Vertical composition, called with :code:`>>`.

        Parameters:
            other : A natural transformation :code:`β: G ⇒ H` to apply after
                :code:`α: F ⇒ G`.

        Returns:
            The natural transformation :code:`β · α: F ⇒ H` with components
            :code:`β_A ∘ α_A`, for every object where both are defined.

        Raises:
            NotComposable : If the target of :code:`self` is not the source
                of :code:`other`.
        """
        assert_isinstance(other, NaturalTransformation)
        if not self.is_composable(other):
            raise NotComposable(messages.NOT_COMPOSABLE.format(
                self, other, self.target, other.source))
        components = {}
        for obj_id in self.components:
            alpha_A, beta_A = (
                x.get_component(obj_id) for x in (self, other))
            if alpha_A is None or beta_A is None:
                continue
            components[obj_id] = self.codomain.compose(alpha_A, beta_A).id
        return type(self)(
            f"{other.name}·{self.name}", self.source, other.target,
            components)

    def get_component(self, obj_id: str) -> Optional[Morphism]:
        """
        The component at an object, resolved in the codomain category.

        Parameters:
            obj_id : The id of an object in the domain category.
        """
        mor_id = self.components.get(obj_id)
        return None if mor_id is None\
            else self.target.target.get_morphism(mor_id)

    def verify(self, equality: Optional[Equality] = None
               ) -> VerificationReport:
        """
        Check that components have the right endpoints and that every
        naturality square commutes.

        Parameters:
            equality : How to compare :code:`G(f) ∘ α_A` and
                :code:`α_B ∘ F(f)`, default is that of the codomain.

        Returns:
            A report listing every violation, this method never raises.

        Note
        ----
        Composed morphisms of the domain that are not mapped explicitly are
        mapped component-wise, see :meth:`Functor.__call__`.
        """
        equality = equality or self.codomain.equality
        report = VerificationReport()
        self._verify_components(report)
        F, G = self.source, self.target
        for f in self.domain.get_morphisms():
            F_A, F_B = F.map_object(f.source), F.map_object(f.target)
            G_A, G_B = G.map_object(f.source), G.map_object(f.target)
            if F_A is None or F_B is None or G_A is None or G_B is None:
                report.errors.append(
                    messages.MISSING_OBJECT_MAPPINGS.format(f.id))
                continue
            alpha_A = self.get_component(f.source)
            alpha_B = self.get_component(f.target)
            try:
                F_f, G_f = F(f), G(f)
                if alpha_A is None or alpha_B is None or F_f is None\
                        or G_f is None:
                    report.errors.append(
                        messages.MISSING_MORPHISM_MAPPINGS.format(f.id))
                    continue
                left = self.codomain.compose(alpha_A, G_f)
                right = self.codomain.compose(F_f, alpha_B)
            except (AxiomError, RegistrationError) as error:
                report.errors.append(
                    messages.NATURALITY_CHECK_FAILED.format(f.label, error))
                continue
            if not equality(left, right):
                report.errors.append(
                    messages.NATURALITY_FAILS.format(f.label))
        if not report.valid:
            logger.info("%s fails %d naturality checks.",
                        self.name, len(report.errors))
        return report

    def _verify_components(self, report: VerificationReport):
        for obj in self.domain.get_objects():
            F_A, G_A = self.source(obj), self.target(obj)
            if F_A is None or G_A is None:
                continue
            alpha_A = self.get_component(obj.id)
            if alpha_A is None:
                report.errors.append(messages.MISSING_COMPONENT.format(obj.id))
            elif alpha_A.endpoints != (F_A.id, G_A.id):
                report.errors.append(messages.WRONG_COMPONENT.format(
                    alpha_A.id, obj.id, alpha_A.source, alpha_A.target,
                    F_A.id, G_A.id))

    def to_tree(self) -> dict:
        """ Serialise a natural transformation with both its functors. """
        return {
            'factory': factory_name(type(self)),
            'name': self.name,
            'source': self.source.to_tree(),
            'target': self.target.to_tree(),
            'components': dict(self.components)}

    @classmethod
    def from_tree(cls, tree: dict) -> NaturalTransformation:
        """
        Decode a serialised natural transformation, both functors share the
        categories decoded from the source functor.

        Parameters:
            tree : The serialisation.
        """
        source = from_tree(tree['source'])
        target = Functor.from_tree(
            tree['target'], source=source.source, target=source.target)
        return cls(tree['name'], source, target, tree['components'])
