from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from component_index.cli import cli


def _invoke(root_home: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["component", "--root-home", str(root_home), *args])


def test_list_all_components(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home)

    assert result.exit_code == 0
    assert "serverless registry [http://registry.devsapp.cn/simple]" in result.output
    assert "github registry [https://api.github.com/repos]" in result.output
    assert "devsapp/fc" in result.output
    assert "website" in result.output
    assert "alice/tool" in result.output
    assert "empty-dir" not in result.output
    assert "Component" in result.output


def test_list_with_no_registries_prints_nothing(mock_root_home: Path) -> None:
    result = _invoke(mock_root_home)

    assert result.exit_code == 0
    assert result.output.strip() == ""


def test_list_renders_table_for_empty_existing_root(mock_root_home: Path, serverless_root: Path) -> None:
    result = _invoke(mock_root_home)

    assert result.exit_code == 0
    assert "serverless registry" in result.output
    assert "Version" in result.output
    assert "github registry" not in result.output


def test_list_json(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--json")

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [c["component"] for c in data["serverless registry"]] == ["devsapp/fc", "website"]
    assert data["github registry"][0]["version"] == "2.0.0"


def test_show_single_component(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--component", "devsapp/fc")

    assert result.exit_code == 0
    assert "0.1.2" in result.output
    assert "Function Compute" in result.output
    assert "MB" in result.output
    assert "s clean --component devsapp/fc" in result.output


def test_show_single_component_json(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--component", "devsapp/fc", "--json")

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["Version"] == "0.1.2"
    assert data["Description"] == "Function Compute"
    assert data["Registry"] == "serverless registry [http://registry.devsapp.cn/simple]"


def test_show_missing_component_warns(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--component", "nope")

    assert result.exit_code == 0
    assert "the [nope] component was not found." in result.output
    assert "s component" in result.output
    assert "s clean" not in result.output


def test_show_invalid_component_is_silent(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--component", "app")

    assert result.exit_code == 0
    assert result.output.strip() == ""


def test_registry_from_set_config(populated_root_home: Path) -> None:
    (populated_root_home / "set-config.yml").write_text("registry: https://api.github.com/repos\n")

    result = _invoke(populated_root_home, "--component", "alice/tool")

    assert result.exit_code == 0
    assert "2.0.0" in result.output
    assert "github registry" in result.output


def test_registry_option_overrides_config(populated_root_home: Path) -> None:
    (populated_root_home / "set-config.yml").write_text("registry: https://api.github.com/repos\n")

    result = _invoke(populated_root_home, "--component", "website", "--registry", "serverless")

    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_unknown_registry_warns(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--component", "website", "--registry", "https://example.com")

    assert result.exit_code == 0
    assert "[https://example.com] is not supported" in result.output


def test_unrecognised_arguments_show_help(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "extra")

    assert result.exit_code == 0
    assert "Get details of installed components." in result.output
    assert "devsapp/fc" not in result.output


def test_empty_component_flag_shows_help(populated_root_home: Path) -> None:
    result = _invoke(populated_root_home, "--component")

    assert result.exit_code == 0
    assert "Get details of installed components." in result.output


def test_root_home_from_environment(populated_root_home: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["component", "--component", "website"],
        env={"SERVERLESS_DEVS_CONFIG_HOME": str(populated_root_home)},
    )

    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_non_directory_entries_are_ignored(tmp_path: Path) -> None:
    root_home = tmp_path / ".s"
    components = root_home / "components"
    components.mkdir(parents=True)
    # A file where the github root directory should be
    (components / "github.com").write_text("")
    (components / "devsapp.cn").mkdir()
    (components / "devsapp.cn" / "fc").write_text("")

    result = _invoke(root_home)

    assert result.exit_code == 0
    assert "serverless registry" in result.output
    assert "github registry" not in result.output
    assert "fc" not in result.output


def test_filesystem_errors_abort(populated_root_home: Path, monkeypatch) -> None:
    import component_index.scanners.base as base

    def denied(path):
        raise PermissionError(f"Permission denied: {path}")

    monkeypatch.setattr(base, "folder_size", denied)

    result = _invoke(populated_root_home)

    assert result.exit_code != 0
    assert "Permission denied" in result.output


def test_version_and_debug_flags(populated_root_home: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output

    result = runner.invoke(cli, ["--debug", "component", "--root-home", str(populated_root_home)])
    assert result.exit_code == 0
    assert "devsapp/fc" in result.output


def test_registry_option_is_ignored_when_listing(populated_root_home: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["--debug", "component", "--root-home", str(populated_root_home), "--registry", "github"],
    )

    assert result.exit_code == 0
    assert "devsapp/fc" in result.output
    assert "alice/tool" in result.output
    assert "--registry github is ignored when listing all components" in result.output
