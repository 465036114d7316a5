from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from gateway_shortcuts.errors import ConfigurationError, ShortcutSyntaxError
from gateway_shortcuts.shortcut.frontend import RouteFrontend


def _load_routes():
    path = Path(__file__).with_name("test_routes.toml")
    frontend = RouteFrontend()
    config = frontend.load_toml(path)
    return frontend.parse_config(config)


def test_parse_config_basic() -> None:
    routes = _load_routes()

    assert [r.id for r in routes] == ["cookie_route", "path_route"]

    cookie_route = routes[0]
    assert cookie_route.uri == "https://example.org"
    assert cookie_route.order == 10
    assert [p.name for p in cookie_route.predicates] == ["Cookie", "Method"]
    assert cookie_route.predicates[0].args == {"_genkey_0": "chocolate", "_genkey_1": "ch.p"}
    assert cookie_route.filters[1].args == {"_genkey_0": "2"}
    assert cookie_route.metadata == {}


def test_parse_config_expanded_definitions() -> None:
    path_route = _load_routes()[1]

    assert path_route.order == 0
    assert path_route.metadata == {"owner": "edge"}

    header = path_route.predicates[1]
    assert header.name == "Header"
    assert header.args == {"header": "X-Request-Id", "regexp": "\\d+"}

    limiter = path_route.filters[0]
    # expanded args are stringified in declaration order
    assert list(limiter.args.items()) == [
        ("redis-rate-limiter.replenishRate", "10"),
        ("redis-rate-limiter.burstCapacity", "20"),
    ]


def test_parse_config_expanded_booleans_become_literals() -> None:
    config = {
        "routes": [
            {
                "id": "r",
                "uri": "http://localhost",
                "predicates": [{"name": "Path", "args": {"p": "/a", "flag": True}}],
            }
        ]
    }
    routes = RouteFrontend().parse_config(config)
    assert routes[0].predicates[0].args == {"p": "/a", "flag": "true"}


def test_parse_config_rejects_bad_shorthand() -> None:
    config = {"routes": [{"id": "r", "uri": "http://localhost", "predicates": ["Cookie"]}]}
    with pytest.raises(ShortcutSyntaxError):
        RouteFrontend().parse_config(config)


def test_parse_config_requires_route_id() -> None:
    with pytest.raises(ValidationError):
        RouteFrontend().parse_config({"routes": [{"uri": "http://localhost"}]})


def _expanded(name: str, args: dict) -> dict:
    return {"routes": [{"id": "r", "uri": "http://localhost", "predicates": [{"name": name, "args": args}]}]}


def test_parse_config_expanded_lists_flatten_to_indexed_keys() -> None:
    routes = RouteFrontend().parse_config(
        _expanded("Path", {"patterns": ["/a/**", "/b/**"], "matchTrailingSlash": False})
    )
    assert list(routes[0].predicates[0].args.items()) == [
        ("patterns[0]", "/a/**"),
        ("patterns[1]", "/b/**"),
        ("matchTrailingSlash", "false"),
    ]


def test_parse_config_rejects_nested_tables() -> None:
    with pytest.raises(ConfigurationError, match="unsupported nested value for 'Cookie'"):
        RouteFrontend().parse_config(_expanded("Cookie", {"name": {"inner": "x"}}))
