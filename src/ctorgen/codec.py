# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Convert descriptors to and from JSON-ready mappings.

The front-end hands records over as mappings shaped like::

    {
        "name": "Movie",
        "visibility": "pub",
        "generics": ["T"],
        "shape": "named",
        "directives": {"name": "make", "visibility": "pub(crate)"},
        "fields": [
            {"name": "title", "type": {"path": ["String"]}},
            {
                "name": "year",
                "type": {"path": ["Option"], "arguments": [{"path": ["u16"]}]},
                "directives": {"required": true},
                "location": {"line": 4, "column": 4},
            },
        ],
    }
"""

import logging
from typing import Any, cast, get_args

from ctorgen.diagnostics import Diagnostic
from ctorgen.directives import RECOGNIZED_FIELD_DIRECTIVES
from ctorgen.model import (
    FieldDescriptor,
    FunctionDescriptor,
    OpaqueType,
    RecordDescriptor,
    RecordShape,
    SourceLocation,
    TypeDescriptor,
    TypePath,
)
from ctorgen.synthesizer import RECOGNIZED_RECORD_DIRECTIVES, synthesize_all

logger = logging.getLogger(__name__)

_RECORD_SHAPES: frozenset[str] = frozenset(get_args(RecordShape))


class DescriptorFormatError(ValueError):
    """Represent a payload that violates the front-end descriptor contract."""


def type_from_dict(payload: Any) -> TypeDescriptor:
    """Decode a type descriptor.

    Args:
        payload: ``{"path": [...], "leading_colon": bool, "arguments": [...]}``
            or ``{"opaque": "text"}``.

    Returns:
        Decoded type descriptor.

    Raises:
        DescriptorFormatError: If the payload is not a valid type mapping.
    """
    if not isinstance(payload, dict):
        raise DescriptorFormatError(f"Type must be a mapping, got {payload!r}")
    if "opaque" in payload:
        return OpaqueType(text=_require_str(payload, "opaque", context="type"))
    segments = payload.get("path")
    if (
        not isinstance(segments, list)
        or not segments
        or not all(isinstance(segment, str) and segment for segment in segments)
    ):
        raise DescriptorFormatError(
            f"Type path must be a non-empty list of names, got {segments!r}"
        )
    arguments = payload.get("arguments", [])
    if not isinstance(arguments, list):
        raise DescriptorFormatError(
            f"Type arguments must be a list, got {arguments!r}"
        )
    return TypePath(
        segments=tuple(segments),
        leading_colon=_optional_bool(payload, "leading_colon", context="type"),
        arguments=tuple(type_from_dict(argument) for argument in arguments),
    )


def record_from_dict(payload: Any) -> RecordDescriptor:
    """Decode a record descriptor handed over by the front-end.

    Args:
        payload: Record mapping.

    Returns:
        Decoded record descriptor.

    Raises:
        DescriptorFormatError: If the payload is malformed, uses unknown
            directives, repeats a field name or overrides the name with a
            non-identifier.
    """
    if not isinstance(payload, dict):
        raise DescriptorFormatError(f"Record must be a mapping, got {payload!r}")
    name = _require_str(payload, "name", context="record")
    context = f"record {name}"
    visibility = payload.get("visibility", "")
    if not isinstance(visibility, str):
        raise DescriptorFormatError(f"Visibility of {context} must be a string")
    shape = payload.get("shape", "named")
    if shape not in _RECORD_SHAPES:
        raise DescriptorFormatError(f"Unknown shape {shape!r} for {context}")
    generics = payload.get("generics", [])
    if not isinstance(generics, list) or not all(
        isinstance(item, str) for item in generics
    ):
        raise DescriptorFormatError(f"Generics of {context} must be a list of strings")

    directives = _directives(
        payload, allowed=RECOGNIZED_RECORD_DIRECTIVES, context=context
    )
    name_override = directives.get("name")
    if name_override is not None and (
        not isinstance(name_override, str) or not name_override.isidentifier()
    ):
        raise DescriptorFormatError(
            f"Directive `name` of {context} must be an identifier, got {name_override!r}"
        )
    visibility_override = directives.get("visibility")
    if visibility_override is not None and not isinstance(visibility_override, str):
        raise DescriptorFormatError(
            f"Directive `visibility` of {context} must be a string"
        )

    raw_fields = payload.get("fields", [])
    if not isinstance(raw_fields, list):
        raise DescriptorFormatError(f"Fields of {context} must be a list")
    fields = tuple(_field_from_dict(item, context=context) for item in raw_fields)
    seen: set[str] = set()
    for field in fields:
        if field.name in seen:
            raise DescriptorFormatError(f"Duplicate field {field.name!r} in {context}")
        seen.add(field.name)

    return RecordDescriptor(
        name=name,
        visibility=visibility,
        fields=fields,
        generics=tuple(generics),
        shape=cast(RecordShape, shape),
        name_override=name_override,
        visibility_override=visibility_override,
        location=_location_from_dict(payload.get("location"), context=context),
    )


def function_to_dict(function: FunctionDescriptor) -> dict[str, Any]:
    """Encode a synthesized constructor for the back-end.

    Args:
        function: Synthesized constructor.

    Returns:
        JSON-ready mapping with types rendered as text.
    """
    return {
        "owner": function.owner,
        "generics": list(function.generics),
        "name": function.name,
        "visibility": function.visibility,
        "parameters": [
            {"name": parameter.name, "type": parameter.type.render()}
            for parameter in function.parameters
        ],
        "body": {
            "record": function.body.record,
            "fields": [
                {"name": init.name, "source": init.source, "type": init.type.render()}
                for init in function.body.fields
            ],
        },
    }


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    """Encode a diagnostic for the back-end.

    Args:
        diagnostic: Synthesis diagnostic.

    Returns:
        JSON-ready mapping.
    """
    payload: dict[str, Any] = {
        "kind": diagnostic.kind,
        "message": diagnostic.message,
        "location": None,
    }
    if diagnostic.location is not None:
        payload["location"] = {
            "line": diagnostic.location.line,
            "column": diagnostic.location.column,
        }
    if diagnostic.kind == "conflicting_directives":
        payload["field"] = diagnostic.field_name
    else:
        payload["record"] = diagnostic.record_name
        payload["shape"] = diagnostic.shape
    return payload


def encode_results(
    functions: list[FunctionDescriptor], diagnostics: list[Diagnostic]
) -> dict[str, Any]:
    """Encode a batch of synthesis results.

    Args:
        functions: Synthesized constructors.
        diagnostics: Synthesis diagnostics.

    Returns:
        ``{"functions": [...], "diagnostics": [...]}``.
    """
    return {
        "functions": [function_to_dict(function) for function in functions],
        "diagnostics": [diagnostic_to_dict(item) for item in diagnostics],
    }


def generate(payloads: list[Any]) -> dict[str, Any]:
    """Decode records, synthesize their constructors and encode the results.

    Args:
        payloads: Record mappings from the front-end.

    Returns:
        Encoded functions and diagnostics.

    Raises:
        DescriptorFormatError: If any record payload is malformed.
    """
    records = [record_from_dict(payload) for payload in payloads]
    functions, diagnostics = synthesize_all(records)
    return encode_results(functions=functions, diagnostics=diagnostics)


def _field_from_dict(payload: Any, context: str) -> FieldDescriptor:
    if not isinstance(payload, dict):
        raise DescriptorFormatError(f"Field of {context} must be a mapping")
    name = _require_str(payload, "name", context=f"field of {context}")
    field_context = f"field {name} of {context}"
    if "type" not in payload:
        raise DescriptorFormatError(f"Missing type for {field_context}")
    directives = _directives(
        payload, allowed=RECOGNIZED_FIELD_DIRECTIVES, context=field_context
    )
    return FieldDescriptor(
        name=name,
        type=type_from_dict(payload["type"]),
        required=_optional_bool(directives, "required", context=field_context),
        default=_optional_bool(directives, "default", context=field_context),
        location=_location_from_dict(payload.get("location"), context=field_context),
    )


def _directives(
    payload: dict[str, Any], allowed: frozenset[str], context: str
) -> dict[str, Any]:
    """Read and validate the directive mapping of a record or field.

    Args:
        payload: Record or field mapping.
        allowed: Directive names recognized at this level.
        context: Human-readable owner description for error messages.

    Returns:
        Directive mapping, empty when absent.

    Raises:
        DescriptorFormatError: If directives are not a mapping or contain
            unknown or non-string names.
    """
    directives = payload.get("directives", {})
    if not isinstance(directives, dict):
        raise DescriptorFormatError(f"Directives of {context} must be a mapping")
    if not all(isinstance(key, str) for key in directives):
        raise DescriptorFormatError(f"Directive names of {context} must be strings")
    unknown = sorted(set(directives) - allowed)
    if unknown:
        logger.warning(
            f"Unrecognized directives (owner={context} directives={', '.join(unknown)})"
        )
        raise DescriptorFormatError(
            f"Unrecognized directives for {context}: {', '.join(unknown)}"
        )
    return directives


def _location_from_dict(payload: Any, context: str) -> SourceLocation | None:
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise DescriptorFormatError(f"Location of {context} must be a mapping")
    line = payload.get("line")
    column = payload.get("column", 0)
    if not isinstance(line, int) or not isinstance(column, int):
        raise DescriptorFormatError(f"Location of {context} must hold integers")
    return SourceLocation(line=line, column=column)


def _optional_bool(payload: dict[str, Any], key: str, context: str) -> bool:
    value = payload.get(key, False)
    if not isinstance(value, bool):
        raise DescriptorFormatError(
            f"{key!r} of {context} must be a boolean, got {value!r}"
        )
    return value


def _require_str(payload: dict[str, Any], key: str, context: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise DescriptorFormatError(f"Missing or empty {key!r} for {context}")
    return value
