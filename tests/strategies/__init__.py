"""Hypothesis strategies for msgengine property-based testing.

Usage:
    from tests.strategies import templates, placeholder_free_templates
    from tests.strategies.catalog import catalog_trees
"""

from .catalog import (
    catalog_keys,
    catalog_trees,
    escaped_placeholders,
    literal_text,
    placeholder_free_templates,
    reference_placeholders,
    templates,
    variable_paths,
    variable_placeholders,
)

__all__ = [
    "catalog_keys",
    "catalog_trees",
    "escaped_placeholders",
    "literal_text",
    "placeholder_free_templates",
    "reference_placeholders",
    "templates",
    "variable_paths",
    "variable_placeholders",
]
