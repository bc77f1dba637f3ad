# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Structured diagnostics reported by constructor synthesis."""

from dataclasses import dataclass
from typing import Literal

from ctorgen.model import RecordShape, SourceLocation

CONFLICTING_DIRECTIVES_MESSAGE = (
    "Field cannot use `required` and `default` at the same time."
)
UNSUPPORTED_SHAPE_MESSAGE = (
    "Constructor generation supports only records with named fields."
)


@dataclass(frozen=True)
class ConflictingDirectives:
    """Report a field that declares both ``required`` and ``default``."""

    field_name: str
    location: SourceLocation | None = None
    message: str = CONFLICTING_DIRECTIVES_MESSAGE
    kind: Literal["conflicting_directives"] = "conflicting_directives"


@dataclass(frozen=True)
class UnsupportedShape:
    """Report a record that is not a plain named-field record."""

    record_name: str
    shape: RecordShape
    location: SourceLocation | None = None
    message: str = UNSUPPORTED_SHAPE_MESSAGE
    kind: Literal["unsupported_shape"] = "unsupported_shape"


Diagnostic = ConflictingDirectives | UnsupportedShape
