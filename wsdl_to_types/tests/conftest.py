import json
from collections.abc import Callable
from pathlib import Path

import pytest

from wsdl_to_types.pipeline.analyzer.ir_nodes import Declaration
from wsdl_to_types.pipeline.backends import TypeScriptBackend
from wsdl_to_types.pipeline.config import GeneratorConfig

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture
def sample_dirs() -> dict[str, Path]:
    sample = TEST_DATA / "wsdl_sample"
    return {
        "complex": sample / "complex",
        "simple": sample / "simple",
        "overrides": sample / "overrides.json",
    }


@pytest.fixture
def fragment_dirs(tmp_path: Path) -> dict[str, Path]:
    complex_dir = tmp_path / "json" / "complex"
    simple_dir = tmp_path / "json" / "simple"
    complex_dir.mkdir(parents=True)
    simple_dir.mkdir(parents=True)
    return {"complex": complex_dir, "simple": simple_dir, "root": tmp_path}


@pytest.fixture
def write_fragment() -> Callable[[Path, dict, str | None], Path]:
    def _write_fragment(directory: Path, fragment: dict, file_name: str | None = None) -> Path:
        path = directory / (file_name or f"{fragment['@name']}.json")
        path.write_text(json.dumps(fragment, indent=2), encoding="utf-8")
        return path

    return _write_fragment


@pytest.fixture
def render() -> Callable[..., str]:
    def _render(declaration: Declaration, config: GeneratorConfig | None = None) -> str:
        return TypeScriptBackend(config or GeneratorConfig()).generate([declaration])

    return _render
