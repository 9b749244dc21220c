"""
Name tables and type rewrites for adapting React's JSX declarations.

This module contains the fixed allow-lists the generator checks React's
declarations against, and the attribute type normalization that turns
React's typings into typings for a runtime that serializes every
attribute to a string.
"""

import re


# =============================================================================
# LOOKUP CONSTANTS
# =============================================================================

# Namespace path of the intrinsic elements table in React's declarations
INTRINSIC_ELEMENTS_PATH = ('global', 'JSX', 'IntrinsicElements')

# Path of the namespace the generated declarations are merged into
TEMPLATE_JSX_PATH = ('global', 'JSX')

# Left-hand side of the qualified names that point at attribute interfaces
HOST_NAMESPACE = 'React'

# Wrapper type whose first type argument holds the real attributes type
WRAPPER_TYPE_NAME = 'DetailedHTMLProps'

# Interfaces and type aliases that are always extracted
ALWAYS_INCLUDED_TYPE_NAMES = (
    'AriaAttributes',
    'DOMAttributes',
    'HTMLAttributeReferrerPolicy',
    'HTMLAttributes',
    'MediaHTMLAttributes',
    'SVGAttributes',
)


# =============================================================================
# INTERFACE REWRITE CONSTANTS
# =============================================================================

# Parent interfaces removed outright
DROPPED_PARENT_INTERFACES = frozenset({'ClassAttributes'})

# Parent interfaces kept (without type arguments)
ALLOWED_PARENT_INTERFACES = frozenset({
    'AriaAttributes',
    'DOMAttributes',
    'HTMLAttributes',
    'MediaHTMLAttributes',
    'SVGAttributes',
})

# React-specific properties with no meaning outside React
DROPPED_PROPERTIES = frozenset({
    'defaultChecked',
    'defaultValue',
    'suppressContentEditableWarning',
    'suppressHydrationWarning',
})

# Properties whose names keep their casing
PRESERVED_CASE_PROPERTIES = frozenset({'className', 'dangerouslySetInnerHTML', 'htmlFor'})

# Properties whose types are kept as declared
UNNORMALIZED_TYPE_PROPERTIES = frozenset({'dangerouslySetInnerHTML'})

# Properties that are also emitted under the plain HTML attribute name
ALIASED_PROPERTIES = {
    'className': 'class',
    'htmlFor': 'for',
}


# =============================================================================
# TYPE NORMALIZATION
# =============================================================================

EVENT_HANDLER_PATTERN = re.compile(r'EventHandler', re.IGNORECASE)

REACT_NODE_TYPE = 'ReactNode'
ANY_TYPE = 'any'
STRING_TYPE = 'string'

# Whole-word replacements applied to every other attribute type
TYPE_REPLACEMENTS = (
    (re.compile(r'\bCSSProperties\b'), STRING_TYPE),
    (re.compile(r'\bBooleanish\b'), "(boolean | 'true' | 'false')"),
)


def is_event_handler_type(attr_type: str) -> bool:
    """Check whether an attribute type is an event handler."""
    return EVENT_HANDLER_PATTERN.search(attr_type) is not None


def normalize_attribute_type(attr_type: str) -> str:
    """
    Normalize a React attribute type for a string-only JSX runtime.

    Event handlers become `string` since callbacks cannot be serialized.
    `ReactNode` becomes `any` since children are flattened to strings.
    Style objects (`CSSProperties`) become `string` and `Booleanish` is
    inlined as a union.

    Args:
        attr_type: Type expression text of the attribute

    Returns:
        Normalized type expression text
    """
    if is_event_handler_type(attr_type):
        return STRING_TYPE

    if attr_type == REACT_NODE_TYPE:
        return ANY_TYPE

    for pattern, replacement in TYPE_REPLACEMENTS:
        attr_type = pattern.sub(replacement, attr_type)
    return attr_type
