# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Synthesize constructor descriptors from record descriptors."""

import logging
from dataclasses import dataclass

from ctorgen.diagnostics import Diagnostic, UnsupportedShape
from ctorgen.directives import classify
from ctorgen.model import (
    FieldInit,
    FunctionDescriptor,
    Parameter,
    RecordDescriptor,
    RecordLiteral,
)

logger = logging.getLogger(__name__)

DEFAULT_CONSTRUCTOR_NAME = "new"
RECOGNIZED_RECORD_DIRECTIVES: frozenset[str] = frozenset({"name", "visibility"})


@dataclass(frozen=True)
class SynthesisResult:
    """Store the outcome of one synthesis call.

    Exactly one of ``function`` and ``diagnostic`` is set.

    Args:
        record_name: Name of the record the result belongs to.
        function: Synthesized constructor on success.
        diagnostic: First diagnostic that stopped synthesis.
    """

    record_name: str
    function: FunctionDescriptor | None = None
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.function is not None


def synthesize(record: RecordDescriptor) -> SynthesisResult:
    """Synthesize the constructor for one record.

    Synthesis is all-or-nothing: the first field classification failure
    stops it and no function is produced. Field names are not re-checked for
    uniqueness; records decoded with ``codec.record_from_dict`` already are.

    Args:
        record: Record declaration to synthesize a constructor for.

    Returns:
        Synthesis result carrying the function or the diagnostic.
    """
    if record.shape != "named":
        logger.warning(
            f"Unsupported record shape (record={record.name} shape={record.shape})"
        )
        return SynthesisResult(
            record_name=record.name,
            diagnostic=UnsupportedShape(
                record_name=record.name,
                shape=record.shape,
                location=record.location,
            ),
        )

    parameters: list[Parameter] = []
    initializers: list[FieldInit] = []
    for field in record.fields:
        classification = classify(field)
        if classification == "parameter":
            parameters.append(Parameter(name=field.name, type=field.type))
            initializers.append(
                FieldInit(name=field.name, source="argument", type=field.type)
            )
        elif classification == "defaulted":
            initializers.append(
                FieldInit(name=field.name, source="default", type=field.type)
            )
        else:
            logger.warning(
                f"Field classification failed (record={record.name} "
                f"field={field.name} error={classification.message})"
            )
            return SynthesisResult(record_name=record.name, diagnostic=classification)

    visibility = (
        record.visibility_override
        if record.visibility_override is not None
        else record.visibility
    )
    name = record.name_override or DEFAULT_CONSTRUCTOR_NAME
    function = FunctionDescriptor(
        owner=record.name,
        generics=record.generics,
        name=name,
        visibility=visibility,
        parameters=tuple(parameters),
        body=RecordLiteral(record=record.name, fields=tuple(initializers)),
    )
    logger.debug(
        "Synthesized constructor",
        extra={
            "record": record.name,
            "function": name,
            "parameters": len(parameters),
            "defaulted": len(initializers) - len(parameters),
        },
    )
    return SynthesisResult(record_name=record.name, function=function)


def synthesize_all(
    records: list[RecordDescriptor],
) -> tuple[list[FunctionDescriptor], list[Diagnostic]]:
    """Synthesize constructors for independent records.

    A diagnostic for one record does not affect any other record.

    Args:
        records: Record declarations in input order.

    Returns:
        A tuple of synthesized functions and diagnostics, each in input order.
    """
    functions: list[FunctionDescriptor] = []
    diagnostics: list[Diagnostic] = []
    for record in records:
        result = synthesize(record)
        if result.function is not None:
            functions.append(result.function)
        elif result.diagnostic is not None:
            diagnostics.append(result.diagnostic)
    logger.info(
        f"Constructor synthesis completed (records={len(records)} "
        f"functions={len(functions)} diagnostics={len(diagnostics)})"
    )
    return functions, diagnostics
