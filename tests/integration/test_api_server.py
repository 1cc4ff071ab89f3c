"""
Integration tests for the ``python -m pyncg.api`` launcher.
"""
import sys
import types

import pytest

# Skip API tests if fastapi/httpx are not installed.
fastapi = pytest.importorskip("fastapi")
httpx = pytest.importorskip("httpx")

from fastapi.testclient import TestClient
from pyncg.api.api_server import build_parser, defaults_from_args, main
from pyncg.core.config import DEFAULT_SAFE_MIN, MinimizerConfig


@pytest.fixture
def fake_uvicorn(monkeypatch):
    """Stand-in uvicorn module recording run() calls."""
    calls = []
    module = types.ModuleType("uvicorn")
    module.run = lambda app, **kwargs: calls.append((app, kwargs))
    monkeypatch.setitem(sys.modules, "uvicorn", module)
    return calls


class TestDefaultsFromArgs:
    def test_stock_defaults(self):
        args = build_parser().parse_args([])
        assert defaults_from_args(args) == MinimizerConfig()
        assert args.port == 8000

    def test_flags_override(self):
        args = build_parser().parse_args(
            ["--epsilon", "1e-10", "--safe-min", "1e-20", "--max-iterations", "500"]
        )
        config = defaults_from_args(args)
        assert config.epsilon == 1e-10
        assert config.safe_min == 1e-20
        assert config.max_iterations == 500

    def test_config_file_then_flags(self, tmp_path):
        path = tmp_path / "server.yaml"
        path.write_text("minimizer:\n  safe_min: 1.0e-20\n  initial_step: 0.5\n")
        args = build_parser().parse_args(["--config", str(path), "--initial-step", "2"])
        config = defaults_from_args(args)
        assert config.safe_min == 1e-20
        assert config.initial_step == 2.0

    def test_invalid_flag_value(self):
        with pytest.raises(ValueError):
            defaults_from_args(build_parser().parse_args(["--safe-min", "-1"]))


class TestMain:
    def test_serves_app_with_defaults(self, fake_uvicorn):
        assert main(["--port", "9000", "--safe-min", "1e-20"]) == 0

        (app, kwargs), = fake_uvicorn
        assert kwargs == {"host": "127.0.0.1", "port": 9000, "log_level": "info"}
        defaults = TestClient(app).get("/api/defaults").json()["defaults"]
        assert defaults["safe_min"] == 1e-20

    def test_stock_defaults_served(self, fake_uvicorn):
        assert main([]) == 0
        (app, _), = fake_uvicorn
        assert app.state.minimizer_defaults.safe_min == DEFAULT_SAFE_MIN

    def test_invalid_defaults_exit_code(self, fake_uvicorn, capsys):
        assert main(["--epsilon", "0"]) == 2
        assert fake_uvicorn == []
        assert "epsilon must be positive" in capsys.readouterr().err

    def test_missing_config_exit_code(self, fake_uvicorn, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 2
        assert fake_uvicorn == []
