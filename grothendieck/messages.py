# -*- coding: utf-8 -*-

"""
grothendieck error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
DUPLICATE_OBJECT = "Object {} already exists."
DUPLICATE_MORPHISM = "Morphism {} already exists."
UNKNOWN_SOURCE = "Source object {} does not exist."
UNKNOWN_TARGET = "Target object {} does not exist."
UNKNOWN_MORPHISM = "Morphism {} does not exist."
NOT_COMPOSABLE = "{} does not compose with {}: {} != {}."
INCOMPATIBLE_FUNCTORS = "Functors {} and {} must have the same source and "\
                        "target categories."
EMPTY_PATH = "Expected a non-empty path of morphisms."
NO_DATA = "Morphism {} has no function to evaluate."
IDENTITY_NOT_FOUND = "Identity morphism {} not found."
IDENTITY_WRONG_ENDPOINTS = "Identity morphism {} has wrong source/target."
RIGHT_IDENTITY_FAILS = "Right identity fails for {}."
LEFT_IDENTITY_FAILS = "Left identity fails for {}."
IDENTITY_CHECK_FAILED = "{} identity check failed: {}"
ASSOCIATIVITY_FAILS = "Associativity fails for {}, {} and {}."
MISSING_IDENTITY_OR_OBJECT = "Missing identity or object mapping for {}."
IDENTITY_NOT_PRESERVED = "Identity not preserved for {}."
IDENTITY_WRONG_IMAGE = "Identity morphism not mapped correctly for {}: "\
                       "got {}, expected {}."
ENDPOINTS_NOT_PRESERVED = "Morphism {} is mapped to {}: {} -> {}, "\
                          "expected {} -> {}."
COMPOSITION_NOT_PRESERVED = "Composition not preserved for {}: "\
                            "got {}, expected {}."
COMPOSITION_CHECK_FAILED = "Composition check failed for {}: {}"
MISSING_OBJECT_MAPPINGS = "Missing object mappings for morphism {}."
MISSING_MORPHISM_MAPPINGS = "Missing morphism mappings for {}."
MISSING_COMPONENT = "Missing component at {}."
WRONG_COMPONENT = "Component {} at {} is {} -> {}, expected {} -> {}."
NATURALITY_FAILS = "Naturality fails for morphism {}."
NATURALITY_CHECK_FAILED = "Naturality check failed for {}: {}"
