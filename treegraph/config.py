# treegraph/config.py
"""
Central configuration for tree serialization and incidence derivation.
"""

CONFIG = {
    "edge_separator": "-",
    "value_min": 0,
    "value_max": 255,  # node values are unsigned bytes
    "json_indent": 2,
    "debug_indent": 4,
    "default_format": "text",
    "figure_size": (8, 5),
    "matrix_cmap": "Greys",
}
