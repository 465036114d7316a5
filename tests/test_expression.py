from __future__ import annotations

import pytest

from gateway_shortcuts.errors import ExpressionEvaluationError
from gateway_shortcuts.shortcut.expression import TemplateExpressionResolver


class Greeter:
    prefix = "hello"

    def greet(self, name: str, times: int = 1) -> str:
        return " ".join([f"{self.prefix} {name}"] * times)

    def fail(self) -> None:
        raise RuntimeError("boom")


@pytest.fixture
def resolver() -> TemplateExpressionResolver:
    return TemplateExpressionResolver()


@pytest.fixture
def registry() -> dict[str, object]:
    return {"greeter": Greeter(), "limits": {"burst": 20}, "key-resolver": "ip"}


def test_single_block_returns_raw_object(resolver, registry) -> None:
    assert resolver.resolve("#{@greeter}", registry) is registry["greeter"]
    assert resolver.resolve("#{@limits.burst}", registry) == 20
    assert resolver.resolve("#{@key-resolver}", registry) == "ip"


def test_method_calls_with_literal_args(resolver, registry) -> None:
    assert resolver.resolve("#{@greeter.greet('bob')}", registry) == "hello bob"
    assert resolver.resolve('#{@greeter.greet("it\'s", 2)}', registry) == "hello it's hello it's"
    assert resolver.resolve("#{@greeter.prefix.upper()}", registry) == "HELLO"


def test_literals(resolver) -> None:
    assert resolver.resolve("#{42}", {}) == 42
    assert resolver.resolve("#{1.5}", {}) == 1.5
    assert resolver.resolve("#{true}", {}) is True
    assert resolver.resolve("#{null}", {}) is None
    assert resolver.resolve("#{'it''s'}", {}) == "it's"
    assert resolver.resolve("#{('x')}", {}) == "x"


def test_mixed_template_is_rendered(resolver, registry) -> None:
    assert resolver.resolve("#{@limits.burst}-#{@key-resolver}", registry) == "20-ip"
    assert resolver.resolve("#{'a'}/b/#{'{c}'}", registry) == "a/b/{c}"


@pytest.mark.parametrize(
    "template",
    [
        "#{@missing}",
        "#{@greeter.nope}",
        "#{@greeter.fail()}",
        "#{@greeter.prefix()}",
        "#{@greeter.greet('x'}",
        "#{@greeter + 1}",
        "#{unknown}",
        "#{ }",
        "#{'open}",
        "#{42 43}",
    ],
)
def test_invalid_expressions_raise(resolver, registry, template: str) -> None:
    with pytest.raises(ExpressionEvaluationError):
        resolver.resolve(template, registry)


def test_call_errors_are_chained(resolver, registry) -> None:
    with pytest.raises(ExpressionEvaluationError) as excinfo:
        resolver.resolve("#{@greeter.fail()}", registry)
    assert isinstance(excinfo.value.__cause__, RuntimeError)
