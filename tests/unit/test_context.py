"""Unit tests for generation requests and results."""

from pathlib import Path

import pytest
from messages_wrapper.core.context import (
    GenerationRequest,
    BuildResult,
    BuildStatus,
)
from messages_wrapper.core.config import WrapperOptions


class TestGenerationRequest:
    """Tests for GenerationRequest."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "intl_en.g.dart"
        path.write_text("class Messages {\n}\n", encoding="utf-8")
        request = GenerationRequest.from_file(path)
        assert request.input_path == path
        assert request.input_text == "class Messages {\n}\n"
        assert request.config == WrapperOptions()

    def test_from_file_with_options(self, tmp_path):
        path = tmp_path / "intl_en.g.dart"
        path.write_text("", encoding="utf-8")
        options = WrapperOptions(header="H")
        assert GenerationRequest.from_file(str(path), options).config is options

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GenerationRequest.from_file(tmp_path / "missing.g.dart")

    def test_immutable(self):
        request = GenerationRequest(input_path=Path("a.g.dart"), input_text="")
        with pytest.raises(AttributeError):
            request.input_text = "changed"


class TestBuildResult:
    """Tests for BuildResult."""

    def test_success_flags(self):
        assert BuildResult(Path("a"), BuildStatus.WRITTEN).success
        assert BuildResult(Path("a"), BuildStatus.SKIPPED).success
        assert BuildResult(Path("a"), BuildStatus.DRY_RUN).success
        assert not BuildResult(Path("a"), BuildStatus.FAILED).success

    def test_to_json(self):
        result = BuildResult(
            input_path=Path("lib/a.g.dart"),
            status=BuildStatus.WRITTEN,
            output_path=Path("lib/a.flutter.g.dart"),
            contents="ignored",
        )
        assert result.to_json() == {
            "input_path": "lib/a.g.dart",
            "status": "written",
            "output_path": "lib/a.flutter.g.dart",
            "error_message": None,
        }
