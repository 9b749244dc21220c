"""
Type system module for the JSX type generator.

This module provides the fixed name tables, attribute type normalization
and qualified name lookup used to adapt React's declarations.
"""

from .mappings import (
    INTRINSIC_ELEMENTS_PATH,
    TEMPLATE_JSX_PATH,
    HOST_NAMESPACE,
    WRAPPER_TYPE_NAME,
    ALWAYS_INCLUDED_TYPE_NAMES,
    DROPPED_PARENT_INTERFACES,
    ALLOWED_PARENT_INTERFACES,
    DROPPED_PROPERTIES,
    PRESERVED_CASE_PROPERTIES,
    UNNORMALIZED_TYPE_PROPERTIES,
    ALIASED_PROPERTIES,
    is_event_handler_type,
    normalize_attribute_type,
)
from .references import QualifiedName, iter_qualified_names, find_qualified_name

__all__ = [
    'INTRINSIC_ELEMENTS_PATH',
    'TEMPLATE_JSX_PATH',
    'HOST_NAMESPACE',
    'WRAPPER_TYPE_NAME',
    'ALWAYS_INCLUDED_TYPE_NAMES',
    'DROPPED_PARENT_INTERFACES',
    'ALLOWED_PARENT_INTERFACES',
    'DROPPED_PROPERTIES',
    'PRESERVED_CASE_PROPERTIES',
    'UNNORMALIZED_TYPE_PROPERTIES',
    'ALIASED_PROPERTIES',
    'is_event_handler_type',
    'normalize_attribute_type',
    'QualifiedName',
    'iter_qualified_names',
    'find_qualified_name',
]
