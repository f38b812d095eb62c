"""Tests for argument parsing, configuration and the revlister entry point."""

import json
import textwrap
from types import SimpleNamespace

import pytest

from args import parse_args
from cli_config import apply_http_overrides, load_config, resolve_settings
from constants import Constants, ExitCodes
from revlister import main
from versioning.errors import ConfigError
from versioning.patterns import IvyResourcePattern, M2ResourcePattern


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    """Keep Constants overrides local to each test."""
    monkeypatch.setattr(Constants, "REQUEST_TIMEOUT", Constants.REQUEST_TIMEOUT)
    monkeypatch.setattr(Constants, "HTTP_RETRY_MAX", Constants.HTTP_RETRY_MAX)
    monkeypatch.delenv(Constants.ENV_REQUEST_TIMEOUT, raising=False)
    monkeypatch.delenv(Constants.ENV_HTTP_RETRIES, raising=False)
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "INFO")


@pytest.fixture
def ivy_repo(tmp_path):
    """Local Ivy-style repository with two revisions of org.acme:proj1."""
    for version in ("1.0", "2.0"):
        (tmp_path / "org.acme" / "proj1" / version / "jars").mkdir(parents=True)
    return tmp_path


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        ns = parse_args(["-g", "org.acme", "-m", "proj1"])
        assert ns.GROUP == "org.acme"
        assert ns.MODULE == "proj1"
        assert ns.TYPE == "jar"
        assert ns.PATTERNS == []
        assert ns.OUTPUT_FORMAT == "text"
        assert ns.LOG_LEVEL == "INFO"
        assert ns.UNIQUE is False

    def test_repeatable_patterns(self):
        ns = parse_args(["-g", "g", "-m", "m", "-p", "a/[revision]", "-p", "b/[revision]", "--layout", "IVY"])
        assert ns.PATTERNS == ["a/[revision]", "b/[revision]"]
        assert ns.LAYOUT == "ivy"

    def test_module_required(self):
        with pytest.raises(SystemExit):
            parse_args(["-g", "org.acme"])


class TestConfig:
    """Tests for load_config, apply_http_overrides and resolve_settings."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "revlister.yml"
        path.write_text(textwrap.dedent("""
            repository: https://repo.example.com/ivy
            patterns:
              - "[organisation]/[module]/[revision]/ivy.xml"
            headers:
              Authorization: Bearer t
        """))
        config = load_config(str(path))
        assert config["repository"] == "https://repo.example.com/ivy"
        assert config["headers"] == {"Authorization": "Bearer t"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "nope.yml"))

    def test_patterns_must_be_strings(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("patterns: [1, 2]\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_no_path(self):
        assert load_config(None) == {}

    def test_http_override_precedence(self, monkeypatch):
        monkeypatch.setenv(Constants.ENV_REQUEST_TIMEOUT, "20")
        args = SimpleNamespace(REQUEST_TIMEOUT=None, HTTP_RETRIES=5)

        apply_http_overrides(args, {"request_timeout": 10, "retries": 2})

        assert Constants.REQUEST_TIMEOUT == 20
        assert Constants.HTTP_RETRY_MAX == 5

    def test_invalid_integer(self):
        args = SimpleNamespace(REQUEST_TIMEOUT=None, HTTP_RETRIES=None)
        with pytest.raises(ConfigError):
            apply_http_overrides(args, {"request_timeout": "soon"})

    def test_cli_patterns_win_over_config(self):
        args = SimpleNamespace(REPOSITORY=None, PATTERNS=["x/[revision]"], M2COMPATIBLE=True, LAYOUT=None)
        settings = resolve_settings(args, {"repository": "/r", "patterns": ["y/[revision]"]})
        assert settings.repository == "/r"
        assert settings.patterns == [M2ResourcePattern("x/[revision]")]

    def test_config_patterns(self):
        args = SimpleNamespace(REPOSITORY="/r", PATTERNS=[], M2COMPATIBLE=False, LAYOUT=None)
        settings = resolve_settings(args, {"patterns": ["y/[revision]"]})
        assert settings.patterns == [IvyResourcePattern("y/[revision]")]

    def test_repository_required(self):
        args = SimpleNamespace(REPOSITORY=None, PATTERNS=[], M2COMPATIBLE=False, LAYOUT=None)
        with pytest.raises(ConfigError):
            resolve_settings(args, {})

    def test_unknown_layout(self):
        args = SimpleNamespace(REPOSITORY="/r", PATTERNS=[], M2COMPATIBLE=False, LAYOUT=None)
        with pytest.raises(ConfigError, match="Unknown layout"):
            resolve_settings(args, {"layout": "p2"})


class TestMain:
    """End-to-end runs of main() against a local repository."""

    def test_lists_versions(self, ivy_repo, capsys):
        code = main(["-g", "org.acme", "-m", "proj1", "-r", str(ivy_repo), "--layout", "ivy"])

        assert code == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out.splitlines() == ["1.0", "2.0"]

    def test_unique_json_output(self, ivy_repo, capsys):
        code = main([
            "-g", "org.acme", "-m", "proj1", "-r", str(ivy_repo), "-u", "-f", "json",
            "-p", "[organisation]/[module]/[revision]/[type]s/[artifact].[ext]",
            "-p", "[organisation]/[module]/[revision]",
        ])

        assert code == ExitCodes.SUCCESS.value
        document = json.loads(capsys.readouterr().out)
        assert document["module"] == "org.acme:proj1"
        assert document["versions"] == ["1.0", "2.0"]
        assert document["attempted"] == ["org.acme/proj1/"]

    def test_requested_revision_present(self, ivy_repo, capsys):
        code = main(["-g", "org.acme", "-m", "proj1", "-r", str(ivy_repo), "--layout", "ivy",
                     "--revision", "2.0", "-f", "json"])

        assert code == ExitCodes.SUCCESS.value
        document = json.loads(capsys.readouterr().out)
        assert document["requested"] == "org.acme:proj1:2.0"
        assert document["found"] is True

    def test_requested_revision_missing(self, ivy_repo, capsys):
        code = main(["-g", "org.acme", "-m", "proj1", "-r", str(ivy_repo), "--layout", "ivy",
                     "--revision", "3.0"])

        assert code == ExitCodes.NO_VERSIONS.value
        assert capsys.readouterr().out.splitlines() == ["1.0", "2.0"]

    def test_no_versions(self, tmp_path, capsys):
        code = main(["-g", "org.acme", "-m", "proj1", "-r", str(tmp_path), "-p", "[organisation]/[revision]"])

        assert code == ExitCodes.NO_VERSIONS.value
        assert capsys.readouterr().out == ""

    def test_bad_config(self, tmp_path):
        code = main(["-g", "org.acme", "-m", "proj1", "-c", str(tmp_path / "missing.yml")])
        assert code == ExitCodes.FILE_ERROR.value

    def test_listing_failure(self, ivy_repo, monkeypatch):
        def boom(self, location):
            raise OSError("disk gone")

        monkeypatch.setattr("registry.filesystem.FileResourceRepository.list", boom)
        argv = ["-g", "org.acme", "-m", "proj1", "-r", str(ivy_repo), "-p", "[organisation]/[revision]"]

        assert main(argv) == ExitCodes.CONNECTION_ERROR.value
        assert main(argv + ["--fail-fast"]) == ExitCodes.CONNECTION_ERROR.value
