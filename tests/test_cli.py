"""Tests for the click CLI."""

import json

import pytest
from click.testing import CliRunner

from jsonnet_deps import __version__
from jsonnet_deps.cli import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("JSONNET_PATH", raising=False)
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_deps_text(runner, project_dir):
    result = runner.invoke(cli, ["deps", str(project_dir / "main.jsonnet")])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == sorted([
        str(project_dir / "banner.txt"),
        str(project_dir / "config.jsonnet"),
        str(project_dir / "lib" / "schema.json"),
        str(project_dir / "lib" / "util.libsonnet"),
        str(project_dir / "main.jsonnet"),
    ])


def test_deps_json_several_roots(runner, project_dir):
    main = str(project_dir / "main.jsonnet")
    other = str(project_dir / "other.jsonnet")
    result = runner.invoke(cli, ["deps", "--format", "json", main, other])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert set(data) == {main, other}
    assert str(project_dir / "logo.png") in data[other]
    assert str(project_dir / "logo.png") not in data[main]


def test_deps_make_to_file(runner, project_dir, tmp_path):
    depfile = tmp_path / "main.d"
    main = project_dir / "main.jsonnet"
    result = runner.invoke(cli, ["deps", "-f", "make", "-o", str(depfile), str(main)])
    assert result.exit_code == 0, result.output
    assert result.output == ""
    target, prereqs = depfile.read_text().split(":", 1)
    assert target == str(main)
    assert str(project_dir / "config.jsonnet") in prereqs.split()
    assert str(main) not in prereqs.split()


def test_deps_with_jpath(runner, tmp_path):
    vendor = tmp_path / "vendor"
    vendor.mkdir()
    (vendor / "k.libsonnet").write_text("{ version: importstr 'VERSION' }")
    root = tmp_path / "app" / "main.jsonnet"
    root.parent.mkdir()
    root.write_text("(import 'k.libsonnet') + { app: true }")

    result = runner.invoke(cli, ["deps", "-J", str(vendor), str(root)])
    assert result.exit_code == 0, result.output
    assert set(result.output.splitlines()) == {
        str(root), str(vendor / "k.libsonnet"), str(vendor / "VERSION"),
    }


def test_deps_with_jsonnet_path_env(runner, tmp_path):
    vendor = tmp_path / "vendor"
    vendor.mkdir()
    (vendor / "k.libsonnet").write_text("{}")
    root = tmp_path / "main.jsonnet"
    root.write_text("import 'k.libsonnet'")

    result = runner.invoke(cli, ["deps", str(root)], env={"JSONNET_PATH": str(vendor)})
    assert result.exit_code == 0, result.output
    assert str(vendor / "k.libsonnet") in result.output.splitlines()


def test_deps_fails_fast(runner, project_dir):
    missing = project_dir / "missing.jsonnet"
    result = runner.invoke(cli, ["deps", str(missing), str(project_dir / "main.jsonnet")])
    assert result.exit_code == 1
    assert "Error" in result.output
    assert str(missing) in result.output
    assert str(project_dir / "banner.txt") not in result.output


def test_deps_keep_going(runner, project_dir):
    missing = project_dir / "missing.jsonnet"
    result = runner.invoke(cli, ["deps", "-k", str(missing), str(project_dir / "main.jsonnet")])
    assert result.exit_code == 1
    assert str(project_dir / "banner.txt") in result.output
    assert f"Error: failed to resolve dependencies of {missing}" in result.output


def test_deps_keep_going_keeps_root_headers(runner, project_dir):
    missing = project_dir / "missing.jsonnet"
    main = project_dir / "main.jsonnet"
    result = runner.invoke(cli, ["deps", "--keep-going", str(missing), str(main)])
    assert result.exit_code == 1
    lines = result.stdout.splitlines()
    assert lines[0] == f"{main}:"
    assert f"  {project_dir / 'banner.txt'}" in lines
    assert f"{missing}:" not in lines


def test_deps_parse_error(runner, tmp_path):
    root = tmp_path / "bad.jsonnet"
    root.write_text("{ a: }")
    result = runner.invoke(cli, ["deps", str(root)])
    assert result.exit_code == 1
    assert f"{root}:1:" in result.output


def test_deps_requires_root(runner):
    result = runner.invoke(cli, ["deps"])
    assert result.exit_code == 2


def test_analyze(runner, project_dir):
    util = project_dir / "lib" / "util.libsonnet"
    result = runner.invoke(cli, ["analyze", str(util)])
    assert result.exit_code == 0, result.output
    assert result.output == (
        f"{util}:\n"
        f"  leaf: {project_dir / 'lib' / 'schema.json'}\n"
        f"  deep: {project_dir / 'main.jsonnet'}\n"
    )


def test_analyze_error(runner, tmp_path):
    result = runner.invoke(cli, ["analyze", str(tmp_path / "missing.jsonnet")])
    assert result.exit_code == 1
    assert "failed to read" in result.output
