# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Recognize nullable wrapper types by their path shape.

Matching is purely syntactic. A type alias that resolves to ``Option`` is not
recognized, because recognizing it would require a type-resolution pass the
generator does not have.
"""

from ctorgen.model import TypeDescriptor, TypePath

NULLABLE_WRAPPER_NAME = "Option"
NULLABLE_ROOT_MODULES: frozenset[str] = frozenset({"core", "std"})
NULLABLE_SUBMODULE = "option"


def is_nullable_wrapper(type_: TypeDescriptor) -> bool:
    """Check whether a declared type is spelled as the nullable wrapper.

    Accepted spellings are ``Option`` and ``[::]core::option::Option`` or
    ``[::]std::option::Option``. Generic arguments are not examined.

    Args:
        type_: Declared field type.

    Returns:
        True when the type path matches a recognized spelling.
    """
    if not isinstance(type_, TypePath):
        return False
    segments = type_.segments
    if len(segments) == 1:
        return not type_.leading_colon and segments[0] == NULLABLE_WRAPPER_NAME
    if len(segments) == 3:
        root, submodule, name = segments
        return (
            root in NULLABLE_ROOT_MODULES
            and submodule == NULLABLE_SUBMODULE
            and name == NULLABLE_WRAPPER_NAME
        )
    return False
