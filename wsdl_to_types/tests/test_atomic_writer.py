import pytest

from wsdl_to_types.pipeline.atomic_writer import AtomicWriter
from wsdl_to_types.pipeline.errors import GenerationError, OutputWriteError


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "out" / "nested" / "types.ts"
    AtomicWriter().write(target, "export type A = string;\n")
    assert target.read_text(encoding="utf-8") == "export type A = string;\n"


def test_write_replaces_existing_file_without_leftovers(tmp_path):
    target = tmp_path / "types.ts"
    target.write_text("old", encoding="utf-8")
    AtomicWriter().write(target, "new")
    assert target.read_text(encoding="utf-8") == "new"
    assert [p.name for p in tmp_path.iterdir()] == ["types.ts"]


def test_write_failure_raises_output_error(tmp_path):
    blocker = tmp_path / "not_a_directory"
    blocker.write_text("")
    with pytest.raises(OutputWriteError, match="Cannot write output file"):
        AtomicWriter().write(blocker / "types.ts", "content")


def test_output_error_is_a_generation_error():
    assert issubclass(OutputWriteError, GenerationError)
