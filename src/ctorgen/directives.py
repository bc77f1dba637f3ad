# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Resolve per-field directives into a constructor classification."""

import logging
from typing import Literal

from ctorgen.diagnostics import ConflictingDirectives
from ctorgen.model import FieldDescriptor
from ctorgen.type_shape import is_nullable_wrapper

logger = logging.getLogger(__name__)

FieldClassification = Literal["parameter", "defaulted"]

RECOGNIZED_FIELD_DIRECTIVES: frozenset[str] = frozenset({"required", "default"})


def classify(field: FieldDescriptor) -> FieldClassification | ConflictingDirectives:
    """Classify a field as a constructor parameter or a defaulted field.

    Directives win over the type shape: ``required`` forces a parameter,
    ``default`` forces a defaulted field. Without directives, nullable wrapper
    types are defaulted and every other type is a parameter.

    Args:
        field: Field to classify.

    Returns:
        The field classification, or a diagnostic when both directives are set.
    """
    if field.required and field.default:
        logger.debug(f"Conflicting field directives (field={field.name})")
        return ConflictingDirectives(field_name=field.name, location=field.location)
    if field.required:
        return "parameter"
    if field.default:
        return "defaulted"
    if is_nullable_wrapper(field.type):
        return "defaulted"
    return "parameter"
