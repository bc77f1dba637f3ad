import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()

from ctorgen.model import FieldDescriptor, RecordDescriptor, TypePath  # noqa: E402


def _option_of(name: str) -> TypePath:
    return TypePath(segments=("Option",), arguments=(TypePath(segments=(name,)),))


@pytest.fixture
def movie() -> RecordDescriptor:
    return RecordDescriptor(
        name="Movie",
        visibility="pub",
        fields=(
            FieldDescriptor(name="title", type=TypePath(segments=("String",))),
            FieldDescriptor(name="year", type=_option_of("u16")),
        ),
    )
