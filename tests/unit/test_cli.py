"""Unit tests for the orb lookup CLI (src.cli.lookup)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.cli.lookup import main
from src.models.release import GetReleasesConfig, ReleaseInfo, ReleaseResult


def _components(result: ReleaseResult | None) -> dict:
    datasource = MagicMock()
    datasource.get_releases = AsyncMock(return_value=result)
    return {"http_client": MagicMock(), "cache": MagicMock(), "orb_datasource": datasource}


def _run(argv: list[str], components: dict) -> int:
    close = AsyncMock()
    with patch("src.main.build_components", return_value=components), patch(
        "src.main.close_components", close
    ):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
    close.assert_awaited_once_with(components)
    return exc_info.value.code


@pytest.fixture()
def config_arg(tmp_path: Path) -> list[str]:
    return ["--config", str(tmp_path / "missing.yaml")]


@pytest.fixture()
def node_result() -> ReleaseResult:
    return ReleaseResult(
        name="circleci/node",
        homepage="https://circleci.com/orbs/registry/orb/circleci/node",
        releases=[
            ReleaseInfo(version="5.1.0", release_timestamp="2023-02-14T18:03:12.000Z"),
            ReleaseInfo(version="4.0.0", release_timestamp=None),
        ],
    )


class TestLookupCommand:
    def test_prints_releases(self, capsys, config_arg, node_result) -> None:
        components = _components(node_result)

        code = _run([*config_arg, "lookup", "circleci/node"], components)

        assert code == 0
        out = capsys.readouterr().out
        assert "circleci/node  (2 release(s))" in out
        assert "5.1.0" in out
        assert "2023-02-14T18:03:12.000Z" in out
        components["orb_datasource"].get_releases.assert_awaited_once_with(
            GetReleasesConfig(lookup_name="circleci/node")
        )

    def test_json_output_uses_aliases(self, capsys, config_arg, node_result) -> None:
        code = _run([*config_arg, "lookup", "circleci/node", "--json"], _components(node_result))

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["name"] == "circleci/node"
        assert payload["releases"][1] == {"version": "4.0.0", "releaseTimestamp": None}
        assert payload["versions"] == {}

    def test_not_found_exits_1(self, capsys, config_arg) -> None:
        code = _run([*config_arg, "lookup", "nobody/nothing"], _components(None))

        assert code == 1
        assert "nobody/nothing" in capsys.readouterr().err


class TestParser:
    def test_no_command_prints_help_and_exits_1(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "lookup" in capsys.readouterr().out

    def test_lookup_requires_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["lookup"])
        assert exc_info.value.code == 2


class TestConfigFile:
    def test_invalid_yaml_exits_1_without_lookup(self, capsys, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("app: [unclosed\n")

        with patch("src.main.build_components") as build:
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", str(path), "lookup", "circleci/node"])

        assert exc_info.value.code == 1
        assert "Error: Cannot parse" in capsys.readouterr().err
        build.assert_not_called()

    def test_wrong_value_type_exits_1(self, capsys, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("http:\n  timeout: soon\n")

        with patch("src.main.build_components") as build:
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", str(path), "lookup", "circleci/node"])

        assert exc_info.value.code == 1
        assert "Invalid configuration value" in capsys.readouterr().err
        build.assert_not_called()

    def test_yaml_endpoint_reaches_components(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, node_result
    ) -> None:
        monkeypatch.delenv("CIRCLECI_GRAPHQL_URL", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("circleci:\n  graphql_url: https://mirror.test/graphql\n")
        components = _components(node_result)

        with patch("src.main.build_components", return_value=components) as build, patch(
            "src.main.close_components", AsyncMock()
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", str(path), "lookup", "circleci/node"])

        assert exc_info.value.code == 0
        (app_settings,), _ = build.call_args
        assert app_settings.circleci_graphql_url == "https://mirror.test/graphql"
