# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for constructor synthesis."""

from dataclasses import replace

import pytest

from ctorgen import (
    DEFAULT_CONSTRUCTOR_NAME,
    ConflictingDirectives,
    FieldDescriptor,
    FieldInit,
    Parameter,
    RecordDescriptor,
    TypePath,
    UnsupportedShape,
    synthesize,
    synthesize_all,
)

_STRING = TypePath(segments=("String",))
_U16 = TypePath(segments=("u16",))


def _sources(record: RecordDescriptor) -> dict[str, str]:
    result = synthesize(record)
    assert result.function is not None
    return {init.name: init.source for init in result.function.body.fields}


def test_ph3_syn_001_optional_field_is_left_out_of_arguments(
    movie: RecordDescriptor,
) -> None:
    result = synthesize(movie)

    assert result.ok
    assert result.diagnostic is None
    function = result.function
    assert function is not None
    assert function.name == DEFAULT_CONSTRUCTOR_NAME == "new"
    assert function.visibility == "pub"
    assert function.owner == "Movie"
    assert function.parameters == (Parameter(name="title", type=_STRING),)
    assert function.body.record == "Movie"
    assert function.body.fields == (
        FieldInit(name="title", source="argument", type=_STRING),
        FieldInit(name="year", source="default", type=movie.fields[1].type),
    )


def test_ph3_syn_002_default_directive_yields_zero_argument_constructor(
    movie: RecordDescriptor,
) -> None:
    title = replace(movie.fields[0], default=True)
    record = replace(movie, fields=(title, movie.fields[1]))

    result = synthesize(record)

    assert result.function is not None
    assert result.function.parameters == ()
    assert _sources(record) == {"title": "default", "year": "default"}


def test_ph3_syn_003_required_directive_keeps_optional_field_as_argument(
    movie: RecordDescriptor,
) -> None:
    year = replace(movie.fields[1], required=True)
    record = replace(movie, fields=(movie.fields[0], year))

    result = synthesize(record)

    assert result.function is not None
    assert [parameter.name for parameter in result.function.parameters] == [
        "title",
        "year",
    ]
    assert _sources(record) == {"title": "argument", "year": "argument"}


def test_ph3_syn_004_every_wrapper_spelling_is_defaulted() -> None:
    argument = (_U16,)
    record = RecordDescriptor(
        name="Movie",
        visibility="",
        fields=(
            FieldDescriptor(name="title", type=_STRING),
            FieldDescriptor(
                name="year", type=TypePath(segments=("Option",), arguments=argument)
            ),
            FieldDescriptor(
                name="genres",
                type=TypePath(segments=("core", "option", "Option"), arguments=argument),
            ),
            FieldDescriptor(
                name="director",
                type=TypePath(
                    segments=("core", "option", "Option"),
                    leading_colon=True,
                    arguments=argument,
                ),
            ),
            FieldDescriptor(
                name="composer",
                type=TypePath(segments=("std", "option", "Option"), arguments=argument),
            ),
            FieldDescriptor(
                name="cast",
                type=TypePath(
                    segments=("std", "option", "Option"),
                    leading_colon=True,
                    arguments=argument,
                ),
            ),
        ),
    )

    result = synthesize(record)

    assert result.function is not None
    assert [parameter.name for parameter in result.function.parameters] == ["title"]
    assert _sources(record) == {
        "title": "argument",
        "year": "default",
        "genres": "default",
        "director": "default",
        "composer": "default",
        "cast": "default",
    }


def test_ph3_syn_005_parameters_follow_declaration_order() -> None:
    record = RecordDescriptor(
        name="Config",
        visibility="pub(crate)",
        fields=(
            FieldDescriptor(name="zeta", type=_U16),
            FieldDescriptor(
                name="note", type=TypePath(segments=("Option",), arguments=(_STRING,))
            ),
            FieldDescriptor(name="alpha", type=_STRING),
            FieldDescriptor(name="count", type=_U16, default=True),
            FieldDescriptor(name="mid", type=_U16),
        ),
    )

    result = synthesize(record)

    assert result.function is not None
    assert [parameter.name for parameter in result.function.parameters] == [
        "zeta",
        "alpha",
        "mid",
    ]
    assert [init.name for init in result.function.body.fields] == [
        "zeta",
        "note",
        "alpha",
        "count",
        "mid",
    ]


def test_ph3_syn_006_overrides_replace_name_and_visibility(
    movie: RecordDescriptor,
) -> None:
    record = replace(
        movie, visibility="", name_override="make", visibility_override="pub(super)"
    )

    result = synthesize(record)

    assert result.function is not None
    assert result.function.name == "make"
    assert result.function.visibility == "pub(super)"
    assert result.function.owner == "Movie"


def test_ph3_syn_007_private_visibility_override_is_respected(
    movie: RecordDescriptor,
) -> None:
    result = synthesize(replace(movie, visibility_override=""))

    assert result.function is not None
    assert result.function.visibility == ""
    assert result.function.name == "new"


def test_ph3_syn_008_generics_are_carried_through(movie: RecordDescriptor) -> None:
    record = replace(movie, generics=("'a", "T: Clone"))

    result = synthesize(record)

    assert result.function is not None
    assert result.function.generics == ("'a", "T: Clone")


def test_ph3_syn_009_conflicting_field_aborts_synthesis(
    movie: RecordDescriptor,
) -> None:
    broken = FieldDescriptor(name="rating", type=_U16, required=True, default=True)
    record = replace(movie, fields=(*movie.fields, broken))

    result = synthesize(record)

    assert not result.ok
    assert result.function is None
    assert isinstance(result.diagnostic, ConflictingDirectives)
    assert result.diagnostic.field_name == "rating"


def test_ph3_syn_010_first_conflict_is_reported() -> None:
    record = RecordDescriptor(
        name="Pair",
        visibility="pub",
        fields=(
            FieldDescriptor(name="left", type=_U16, required=True, default=True),
            FieldDescriptor(name="right", type=_U16, required=True, default=True),
        ),
    )

    result = synthesize(record)

    assert isinstance(result.diagnostic, ConflictingDirectives)
    assert result.diagnostic.field_name == "left"


@pytest.mark.parametrize("shape", ["tuple", "unit", "enum", "union"])
def test_ph3_syn_011_non_named_shapes_are_unsupported(
    movie: RecordDescriptor, shape: str
) -> None:
    result = synthesize(replace(movie, shape=shape))

    assert result.function is None
    assert isinstance(result.diagnostic, UnsupportedShape)
    assert result.diagnostic.record_name == "Movie"
    assert result.diagnostic.shape == shape


def test_ph3_syn_012_batch_isolates_failing_records(movie: RecordDescriptor) -> None:
    broken = RecordDescriptor(
        name="Broken",
        visibility="pub",
        fields=(FieldDescriptor(name="x", type=_U16, required=True, default=True),),
    )
    other = replace(movie, name="Series")

    functions, diagnostics = synthesize_all([movie, broken, other])

    assert [function.owner for function in functions] == ["Movie", "Series"]
    assert len(diagnostics) == 1
    assert isinstance(diagnostics[0], ConflictingDirectives)


def test_ph3_syn_013_record_without_fields_yields_empty_constructor() -> None:
    result = synthesize(RecordDescriptor(name="Marker", visibility="pub", fields=()))

    assert result.function is not None
    assert result.function.parameters == ()
    assert result.function.body.fields == ()
