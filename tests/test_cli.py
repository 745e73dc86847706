# tests/test_cli.py
import os
import pytest
from unittest.mock import patch

from app.cli import build_parser, apply_overrides, main
from app.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """main() rebuilds settings from the environment; drop them afterwards."""
    yield
    get_settings.cache_clear()


class TestParser:

    def test_no_flags(self):
        args = build_parser().parse_args([])
        assert args.port is None
        assert args.apikey is None
        assert args.service is None
        assert args.host == "0.0.0.0"

    def test_all_flags(self):
        args = build_parser().parse_args(
            ["--port", "8080", "--apikey", "abc", "--service", "http://localhost:3000", "--host", "127.0.0.1"]
        )
        assert args.port == 8080
        assert args.apikey == "abc"
        assert args.service == "http://localhost:3000"
        assert args.host == "127.0.0.1"

    def test_invalid_port(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--port", "http"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "zeropay-gateway" in capsys.readouterr().out


class TestApplyOverrides:

    def test_only_given_flags_exported(self):
        environ = {"PORT": "9001", "APIKEY": "from-env"}
        args = build_parser().parse_args(["--apikey", "from-flag"])

        apply_overrides(args, environ)

        assert environ == {"PORT": "9001", "APIKEY": "from-flag"}

    def test_port_exported_as_string(self):
        environ = {}
        args = build_parser().parse_args(["--port", "8080", "--service", "http://localhost:3000"])

        apply_overrides(args, environ)

        assert environ == {"PORT": "8080", "SERVICE": "http://localhost:3000"}


class TestMain:

    @patch("uvicorn.run")
    def test_flags_reach_server(self, mock_run):
        with patch.dict(os.environ, {"APIKEY": "test-key"}):
            main(["--port", "8123", "--host", "127.0.0.1"])

        mock_run.assert_called_once()
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8123

    @patch("uvicorn.run")
    def test_invalid_configuration_exits(self, mock_run):
        with patch.dict(os.environ, {"APIKEY": "test-key"}):
            with pytest.raises(SystemExit) as exc_info:
                main(["--service", "not a url"])

        assert exc_info.value.code == 2
        mock_run.assert_not_called()
