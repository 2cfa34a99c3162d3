# -*- coding: utf-8 -*-

""" Grothendieck: finite categories, functors and natural transformations. """

from grothendieck import (
    cat,
    category,
    functor,
    natural,
    diagram,
    equality,
    zoo,
    drawing,
    utils,
    config,
    messages,
)

from grothendieck.cat import MathObject, Morphism, ComposedMorphism
from grothendieck.category import Category
from grothendieck.functor import Functor
from grothendieck.natural import NaturalTransformation

__version__ = '0.1.0'
