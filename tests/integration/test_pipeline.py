"""Integration tests for the full pipeline."""

import json
from pathlib import Path

import pytest
import yaml

import main as frontend
from messages_wrapper.cli import main, run_pipeline
from messages_wrapper.core.config import WrapperOptions
from messages_wrapper.core.context import BuildStatus, GenerationRequest
from messages_wrapper.generator import WrapperBuilder, WrapperGenerator


CATALOGUE = """// Generated by package:messages_builder.

import 'package:messages/messages_async.dart';

class FooMessages {
  FooMessages(this._assetLoader, this._intlObject);

  static const knownLocales = ['en', 'pt_BR', 'fr'];

  String get helloWorld => _currentMessages.generateStringAtIndex(0, []);
}
"""

EXPECTED_WRAPPER = """// Generated by the wrapper generator

import 'package:flutter/services.dart';
import 'package:flutter/widgets.dart';
import 'package:flutter_localizations/flutter_localizations.dart';
import 'package:messages/package_intl_object.dart';

import 'intl_en.g.dart';

class FooLocalizations {
  static Iterable<LocalizationsDelegate<dynamic>> localizationsDelegates = [
    delegate,
    GlobalMaterialLocalizations.delegate,
    GlobalCupertinoLocalizations.delegate,
    GlobalWidgetsLocalizations.delegate,
  ];

  static LocalizationsDelegate<FooMessages> delegate = FooLocalizationsDelegate();

  static List<Locale> get supportedLocales {
    return FooMessages.knownLocales.map((e) {
      var split = e.split('_');
      var code = split.length > 1 ? split[1] : null;
      return Locale(split.first, code);
    }).toList();
  }

  static FooMessages? of(BuildContext context) => Localizations.of<FooMessages>(context, FooMessages);
}

class FooLocalizationsDelegate extends LocalizationsDelegate<FooMessages> {
  @override
  bool isSupported(Locale locale) => FooMessages.knownLocales.contains(locale.toString());

  @override
  Future<FooMessages> load(Locale locale) async {
    await messages.loadLocale(locale.toString());
    return messages;
  }

  @override
  bool shouldReload(LocalizationsDelegate<FooMessages> old) => false;
}

FooMessages messages = FooMessages(rootBundle.loadString, const OldIntlObject());

extension FooLocalizationsExtension on BuildContext {
  FooMessages? get fooLocalizations => FooLocalizations.of(this);
}
"""


@pytest.fixture
def project(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "intl_en.g.dart").write_text(CATALOGUE, encoding="utf-8")
    return tmp_path


class TestWrapperGenerator:
    """End-to-end tests for a single request."""

    @pytest.fixture
    def generator(self):
        return WrapperGenerator()

    def test_render_matches_expected(self, generator):
        request = GenerationRequest(Path("lib/intl_en.g.dart"), CATALOGUE)
        assert generator.render(request) == EXPECTED_WRAPPER

    def test_render_is_deterministic(self, generator):
        request = GenerationRequest(Path("lib/intl_en.g.dart"), CATALOGUE)
        assert generator.render(request) == generator.render(request)
        assert WrapperGenerator().render(request) == generator.render(request)

    def test_render_is_already_formatted(self, generator):
        request = GenerationRequest(Path("lib/intl_en.g.dart"), CATALOGUE)
        rendered = generator.render(request)
        assert generator.formatter.format(rendered) == rendered

    def test_generate_writes_output(self, generator, project):
        input_path = project / "lib" / "intl_en.g.dart"
        result = generator.generate(GenerationRequest.from_file(input_path))
        assert result.status == BuildStatus.WRITTEN
        assert result.output_path == project / "lib" / "intl_en.flutter.g.dart"
        assert result.output_path.read_text(encoding="utf-8") == EXPECTED_WRAPPER

    def test_regenerate_is_byte_identical(self, generator, project):
        input_path = project / "lib" / "intl_en.g.dart"
        first = generator.generate(GenerationRequest.from_file(input_path))
        before = first.output_path.read_bytes()
        generator.generate(GenerationRequest.from_file(input_path))
        assert first.output_path.read_bytes() == before

    def test_no_declaration_is_skipped(self, generator, tmp_path):
        input_path = tmp_path / "other.g.dart"
        input_path.write_text("class Other {\n}\n", encoding="utf-8")
        result = generator.generate(GenerationRequest.from_file(input_path))
        assert result.status == BuildStatus.SKIPPED
        assert not (tmp_path / "other.flutter.g.dart").exists()

    def test_path_mismatch_fails_without_writing(self, generator, tmp_path):
        input_path = tmp_path / "intl_en.dart"
        input_path.write_text(CATALOGUE, encoding="utf-8")
        result = generator.generate(GenerationRequest.from_file(input_path))
        assert result.status == BuildStatus.FAILED
        assert ".g.dart" in result.error_message
        assert [p.name for p in tmp_path.iterdir()] == ["intl_en.dart"]

    def test_formatting_failure_writes_nothing(self, generator, tmp_path):
        input_path = tmp_path / "intl_en.g.dart"
        input_path.write_text(CATALOGUE, encoding="utf-8")
        options = WrapperOptions(naming="config", class_name="My Messages")
        result = generator.generate(GenerationRequest.from_file(input_path, options))
        assert result.status == BuildStatus.FAILED
        assert not (tmp_path / "intl_en.flutter.g.dart").exists()

    def test_empty_prefix_names(self, generator):
        request = GenerationRequest(Path("lib/intl.g.dart"), "class Messages {\n}\n")
        rendered = generator.render(request)
        assert "class MessagesLocalizations {" in rendered
        assert "class MessagesLocalizationsDelegate extends LocalizationsDelegate<Messages> {" in rendered
        assert "Messages? get messagesLocalizations => MessagesLocalizations.of(this);" in rendered

    def test_private_delegate_without_extension(self, generator):
        options = WrapperOptions(private_delegate=True, extension=False, header="Custom\nheader")
        rendered = generator.render(GenerationRequest(Path("lib/intl_en.g.dart"), CATALOGUE, options))
        assert rendered.startswith("// Custom\n// header\n\n")
        assert "class _FooLocalizationsDelegate extends" in rendered
        assert "delegate = _FooLocalizationsDelegate();" in rendered
        assert "extension" not in rendered

    def test_blank_header_keeps_generated_marker(self, generator):
        options = WrapperOptions.from_dict({"header": ""})
        rendered = generator.render(GenerationRequest(Path("lib/intl_en.g.dart"), CATALOGUE, options))
        assert rendered.startswith("// Generated by the wrapper generator\n\n")

    def test_abstract_declaration_is_wrapped(self, generator):
        catalogue = CATALOGUE.replace("class FooMessages {", "abstract class FooMessages {")
        rendered = generator.render(GenerationRequest(Path("lib/intl_en.g.dart"), catalogue))
        assert rendered == EXPECTED_WRAPPER


class TestWrapperBuilder:
    """Tests for asset discovery and build passes."""

    def test_discover_skips_outputs_and_config(self, project):
        lib = project / "lib"
        (lib / "intl_en.flutter.g.dart").write_text("", encoding="utf-8")
        (lib / "main.dart").write_text("", encoding="utf-8")
        (project / "build.yaml").write_text("", encoding="utf-8")
        assets = WrapperBuilder().discover([project, project / "build.yaml"])
        assert assets == [lib / "intl_en.g.dart"]

    def test_failure_does_not_stop_other_assets(self, project):
        lib = project / "lib"
        (lib / "broken.g.dart").write_bytes(b"\xff\xfe\x00 not utf-8")
        (lib / "intl_fr.g.dart").write_text(CATALOGUE, encoding="utf-8")

        results = WrapperBuilder().build_all([lib])
        statuses = {r.input_path.name: r.status for r in results}
        assert statuses == {
            "broken.g.dart": BuildStatus.FAILED,
            "intl_en.g.dart": BuildStatus.WRITTEN,
            "intl_fr.g.dart": BuildStatus.WRITTEN,
        }

    def test_parallel_build_matches_sequential(self, project):
        lib = project / "lib"
        for name in ("a", "b", "c"):
            (lib / f"intl_{name}.g.dart").write_text(CATALOGUE, encoding="utf-8")

        parallel = WrapperBuilder(jobs=4).build_all([lib])
        sequential = WrapperBuilder(jobs=1).build_all([lib])
        assert [r.input_path for r in parallel] == [r.input_path for r in sequential]
        assert [r.contents for r in parallel] == [r.contents for r in sequential]

    def test_run_pipeline_dry_run(self, project):
        results = run_pipeline([project / "lib"], dry_run=True)
        assert [r.status for r in results] == [BuildStatus.DRY_RUN]
        assert results[0].contents == EXPECTED_WRAPPER
        assert not (project / "lib" / "intl_en.flutter.g.dart").exists()


class TestCLI:
    """Tests for the command-line interface."""

    def test_build_with_config(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        config = {"targets": {"$default": {"builders": {"messages_wrapper": {"options": {
            "header": "Project header",
            "extension": False,
        }}}}}}
        (project / "build.yaml").write_text(yaml.safe_dump(config), encoding="utf-8")

        assert main(["build", "lib", "--json"]) == 0

        report = json.loads(capsys.readouterr().out)
        assert report["summary"] == {"written": 1, "dry_run": 0, "skipped": 0, "failed": 0}
        output = (project / "lib" / "intl_en.flutter.g.dart").read_text(encoding="utf-8")
        assert output.startswith("// Project header\n")
        assert "extension" not in output

    def test_build_dry_run_reports_nothing_written(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        assert main(["build", "lib", "--dry-run", "--json"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["summary"] == {"written": 0, "dry_run": 1, "skipped": 0, "failed": 0}
        assert not (project / "lib" / "intl_en.flutter.g.dart").exists()

    def test_undecodable_config_falls_back_to_defaults(self, project, monkeypatch):
        monkeypatch.chdir(project)
        (project / "build.yaml").write_bytes(b"\xff\xfe")
        assert main(["build", "lib"]) == 0
        output = (project / "lib" / "intl_en.flutter.g.dart").read_text(encoding="utf-8")
        assert output == EXPECTED_WRAPPER

    def test_build_reports_failure(self, project, monkeypatch):
        monkeypatch.chdir(project)
        (project / "lib" / "broken.g.dart").write_bytes(b"\xff\xfe")
        assert main(["build", "lib"]) == 1

    def test_inspect(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        assert main(["inspect", "lib/intl_en.g.dart"]) == 0
        out = capsys.readouterr().out
        assert "FooLocalizations" in out
        assert "en, pt_BR, fr" in out

    def test_config(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        assert main(["config"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["wrapper"]["header"] == "Generated by the wrapper generator"


class TestTerminalFrontEnd:
    """Tests for the coloured main.py front-end."""

    def test_inspect_uses_private_delegate_option(self, project, capsys):
        config = {"targets": {"$default": {"builders": {"messages_wrapper": {"options": {
            "private_delegate": True,
        }}}}}}
        config_path = project / "build.yaml"
        config_path.write_text(yaml.safe_dump(config), encoding="utf-8")

        assert frontend.inspect_command(project / "lib" / "intl_en.g.dart", config_path) == 0
        assert "_FooLocalizationsDelegate" in capsys.readouterr().out

    def test_build_dry_run_summary(self, project, capsys):
        assert frontend.build_command([project / "lib"], dry_run=True) == 0
        out = capsys.readouterr().out
        assert "1 not written (dry run)" in out
        assert "[WRITTEN]" not in out
