# -*- coding: utf-8 -*-

""" Grothendieck configuration. """

# Naming conventions for generated morphisms.
IDENTITY_PREFIX = "id_"
COMPOSITION_INFIX = "_o_"
COMPOSITION_SYMBOL = "∘"
OPPOSITE_SUFFIX = "_op"
OPPOSITE_LABEL = "^op"

# Default bound on the number of edges in a path, see diagram.find_paths.
MAX_PATH_LENGTH = 5

# Default drawing parameters.
DRAWING_DEFAULT = {
    "figsize": (6, 4),
    "fontsize": 12,
    "node_size": 1200,
    "node_color": "white",
    "edgecolor": "black",
    "connectionstyle": "arc3,rad=0.15",
    "seed": 42,
}
