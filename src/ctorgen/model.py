# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Descriptor models consumed and produced by constructor synthesis."""

from dataclasses import dataclass
from typing import Literal

RecordShape = Literal["named", "tuple", "unit", "enum", "union"]
InitSource = Literal["argument", "default"]


@dataclass(frozen=True)
class SourceLocation:
    """Point at a declaration in the front-end's source.

    Attributes:
        line: Line number (1-based).
        column: Column number (0-based).
    """

    line: int
    column: int = 0


@dataclass(frozen=True)
class TypePath:
    """Represent a path type such as ``::std::option::Option<u16>``.

    Attributes:
        segments: Path segment identifiers in order.
        leading_colon: Whether the path starts with the ``::`` root qualifier.
        arguments: Generic arguments attached to the final segment.
    """

    segments: tuple[str, ...]
    leading_colon: bool = False
    arguments: tuple["TypeDescriptor", ...] = ()

    @property
    def arity(self) -> int:
        return len(self.arguments)

    def render(self) -> str:
        """Render the path back to its declared text.

        Returns:
            Path text including generic arguments.
        """
        text = "::".join(self.segments)
        if self.leading_colon:
            text = f"::{text}"
        if self.arguments:
            rendered = ", ".join(argument.render() for argument in self.arguments)
            text = f"{text}<{rendered}>"
        return text


@dataclass(frozen=True)
class OpaqueType:
    """Represent a type that is not a simple path (references, tuples, arrays)."""

    text: str

    def render(self) -> str:
        return self.text


TypeDescriptor = TypePath | OpaqueType


@dataclass(frozen=True)
class FieldDescriptor:
    """Represent one declared record field.

    Attributes:
        name: Field identifier, unique within the record.
        type: Declared field type.
        required: Whether the ``required`` directive is present.
        default: Whether the ``default`` directive is present.
        location: Optional declaration location for diagnostics.
    """

    name: str
    type: TypeDescriptor
    required: bool = False
    default: bool = False
    location: SourceLocation | None = None


@dataclass(frozen=True)
class RecordDescriptor:
    """Represent one record declaration handed over by the front-end.

    Attributes:
        name: Record identifier.
        visibility: Record visibility text; empty string means private.
        fields: Fields in declaration order. Names must be unique; the front-end
            guarantees this and ``codec.record_from_dict`` enforces it.
        generics: Generic parameter declarations, carried through verbatim.
        shape: Declaration shape; only ``named`` records are supported.
        name_override: Constructor name from the ``name`` directive.
        visibility_override: Constructor visibility from the ``visibility`` directive.
        location: Optional declaration location for diagnostics.
    """

    name: str
    visibility: str
    fields: tuple[FieldDescriptor, ...]
    generics: tuple[str, ...] = ()
    shape: RecordShape = "named"
    name_override: str | None = None
    visibility_override: str | None = None
    location: SourceLocation | None = None


@dataclass(frozen=True)
class Parameter:
    """Represent one constructor argument."""

    name: str
    type: TypeDescriptor


@dataclass(frozen=True)
class FieldInit:
    """Represent one field assignment inside the constructed record literal.

    Attributes:
        name: Field identifier.
        source: ``argument`` to take the like-named argument, ``default`` to
            use the default value of ``type``.
        type: Declared field type.
    """

    name: str
    source: InitSource
    type: TypeDescriptor


@dataclass(frozen=True)
class RecordLiteral:
    """Represent the constructor body as a record construction expression."""

    record: str
    fields: tuple[FieldInit, ...]


@dataclass(frozen=True)
class FunctionDescriptor:
    """Represent the synthesized constructor handed over to the back-end.

    Attributes:
        owner: Name of the record the function is associated with.
        generics: Generic parameters of the owning record, unmodified.
        name: Constructor function name.
        visibility: Constructor visibility text.
        parameters: Constructor arguments in declaration order.
        body: Record literal built by the constructor.
    """

    owner: str
    generics: tuple[str, ...]
    name: str
    visibility: str
    parameters: tuple[Parameter, ...]
    body: RecordLiteral
