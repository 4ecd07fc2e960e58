"""Tests for the gqlhttp command line (gqlhttp.cli)."""

import textwrap

import pytest
import yaml

from gqlhttp.cli import app
from gqlhttp.cli.main import load_target
from gqlhttp.config import HandlerConfig

TARGET_MODULE = textwrap.dedent(
    """
    from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString

    from gqlhttp import HandlerConfig

    schema = GraphQLSchema(
        query=GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)})
    )
    config = HandlerConfig(schema=schema, root_value={"hello": "world"})
    number = 42
    """
)


@pytest.fixture
def target_module(tmp_path, monkeypatch):
    (tmp_path / "gqlhttp_cli_target.py").write_text(TARGET_MODULE)
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "gqlhttp_cli_target"


class TestLoadTarget:
    def test_schema(self, target_module) -> None:
        config = load_target(f"{target_module}:schema")
        assert isinstance(config, HandlerConfig)
        assert config.root_value is None

    def test_handler_config(self, target_module) -> None:
        config = load_target(f"{target_module}:config")
        assert config.root_value == {"hello": "world"}

    def test_missing_attribute_separator(self, target_module) -> None:
        with pytest.raises(ValueError):
            load_target(target_module)

    def test_wrong_type(self, target_module) -> None:
        with pytest.raises(TypeError):
            load_target(f"{target_module}:number")


class TestApp:
    def test_no_command_prints_help(self, capsys) -> None:
        assert app([]) == 0
        assert "serve" in capsys.readouterr().out

    def test_settings(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GQLHTTP_PATH", raising=False)
        path = tmp_path / "gqlhttp.yaml"
        path.write_text("path: /api\n")

        assert app(["settings", "--config", str(path)]) == 0
        printed = yaml.safe_load(capsys.readouterr().out)
        assert printed["path"] == "/api"

    def test_settings_missing_file(self, tmp_path, capsys) -> None:
        assert app(["settings", "--config", str(tmp_path / "missing.yaml")]) == 1
        assert "Error" in capsys.readouterr().out

    def test_serve_bad_target(self, target_module, capsys) -> None:
        assert app(["serve", f"{target_module}:number"]) == 1
        assert "expected GraphQLSchema or HandlerConfig" in capsys.readouterr().out

    def test_settings_path_flag_overrides_file(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GQLHTTP_PATH", raising=False)
        monkeypatch.delenv("GQLHTTP_PORT", raising=False)
        path = tmp_path / "gqlhttp.yaml"
        path.write_text("path: /api\nport: 9000\n")

        assert app(["settings", "--config", str(path), "--path", "/v2/graphql"]) == 0
        printed = yaml.safe_load(capsys.readouterr().out)
        assert printed["path"] == "/v2/graphql"
        assert printed["port"] == 9000

    def test_serve_with_config_and_path(self, target_module, tmp_path, monkeypatch, capsys) -> None:
        import uvicorn

        monkeypatch.delenv("GQLHTTP_PATH", raising=False)
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
        path = tmp_path / "gqlhttp.yaml"
        path.write_text("port: 9001\n")

        assert app(["serve", f"{target_module}:schema", "--config", str(path), "--path", "/gql"]) == 0
        assert "http://127.0.0.1:9001/gql" in capsys.readouterr().out
        assert calls[0]["port"] == 9001
