# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for constructor synthesis."""

from ctorgen.codec import (
    DescriptorFormatError,
    encode_results,
    function_to_dict,
    generate,
    record_from_dict,
)
from ctorgen.diagnostics import ConflictingDirectives, Diagnostic, UnsupportedShape
from ctorgen.directives import FieldClassification, classify
from ctorgen.logs import configure_logging
from ctorgen.model import (
    FieldDescriptor,
    FieldInit,
    FunctionDescriptor,
    OpaqueType,
    Parameter,
    RecordDescriptor,
    RecordLiteral,
    SourceLocation,
    TypePath,
)
from ctorgen.synthesizer import (
    DEFAULT_CONSTRUCTOR_NAME,
    SynthesisResult,
    synthesize,
    synthesize_all,
)
from ctorgen.type_shape import is_nullable_wrapper

__all__ = [
    "DEFAULT_CONSTRUCTOR_NAME",
    "ConflictingDirectives",
    "DescriptorFormatError",
    "Diagnostic",
    "FieldClassification",
    "FieldDescriptor",
    "FieldInit",
    "FunctionDescriptor",
    "OpaqueType",
    "Parameter",
    "RecordDescriptor",
    "RecordLiteral",
    "SourceLocation",
    "SynthesisResult",
    "TypePath",
    "UnsupportedShape",
    "classify",
    "configure_logging",
    "encode_results",
    "function_to_dict",
    "generate",
    "is_nullable_wrapper",
    "record_from_dict",
    "synthesize",
    "synthesize_all",
]
