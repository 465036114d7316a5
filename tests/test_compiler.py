from __future__ import annotations

import json
from pathlib import Path

from gateway_shortcuts.gateway.compiler import compile_toml_config, main


def test_compile_toml_config(tmp_path: Path) -> None:
    out_path = tmp_path / "routes.json"
    compile_toml_config(Path(__file__).with_name("test_routes.toml"), out_path)

    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["description"] == "test routes"

    path_route, cookie_route = payload["routes"]
    assert path_route["id"] == "path_route"
    assert path_route["predicates"][0] == {
        "name": "Path",
        "config": {"patterns": ["/red/**", "/blue/**"], "matchTrailingSlash": False},
    }
    assert path_route["predicates"][1]["config"] == {"header": "X-Request-Id", "regexp": "\\d+"}
    assert path_route["filters"][0]["config"] == {
        "replenishRate": 10,
        "burstCapacity": 20,
        "requestedTokens": 1,
    }
    assert path_route["metadata"] == {"owner": "edge"}

    assert cookie_route["predicates"][1]["config"] == {"methods": ["GET", "POST"]}
    assert cookie_route["filters"][1]["config"] == {"parts": 2}


def test_main_writes_output(tmp_path: Path) -> None:
    out_path = tmp_path / "out.json"
    code = main([str(Path(__file__).with_name("test_routes.toml")), str(out_path), "--indent", "0"])
    assert code == 0
    assert json.loads(out_path.read_text(encoding="utf-8"))["routes"]
