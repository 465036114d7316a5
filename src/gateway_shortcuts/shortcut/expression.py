from __future__ import annotations

import re
from typing import Any, List, Mapping, Protocol, Tuple

from ..errors import ExpressionEvaluationError


EXPRESSION_PREFIX = "#{"
EXPRESSION_SUFFIX = "}"

_TOKEN_RE = re.compile(
    r"""
    \s*(?:
        (?P<number>\d+(?:\.\d+)?)
      | (?P<string>'(?:[^']|'')*'|"(?:[^"]|"")*")
      | (?P<service>@[A-Za-z_][\w-]*)
      | (?P<ident>[A-Za-z_]\w*)
      | (?P<op>[.(),])
    )
    """,
    re.VERBOSE,
)

_LITERALS = {"true": True, "false": False, "null": None}


class ExpressionResolver(Protocol):
    """Evaluate a `#{...}` template value against a service registry."""

    def resolve(self, raw_value: str, registry: Mapping[str, Any]) -> Any: ...


class TemplateExpressionResolver:
    """Template resolver for service lookups, attribute access and method calls.

    Supported inside a block: `@service` references, quoted strings, numbers,
    `true`/`false`/`null`, `.attr` and `.method(args)` chains, parentheses.
    A value made of a single block returns the evaluated object; mixed
    templates are rendered to a string.
    """

    def resolve(self, raw_value: str, registry: Mapping[str, Any]) -> Any:
        parts = _split_template(raw_value)
        if len(parts) == 1 and parts[0][0]:
            return _evaluate(parts[0][1], registry)

        rendered: List[str] = []
        for is_expr, text in parts:
            if is_expr:
                rendered.append(str(_evaluate(text, registry)))
            else:
                rendered.append(text)
        return "".join(rendered)


def _split_template(template: str) -> List[Tuple[bool, str]]:
    parts: List[Tuple[bool, str]] = []
    pos = 0
    while True:
        start = template.find(EXPRESSION_PREFIX, pos)
        if start < 0:
            if pos < len(template):
                parts.append((False, template[pos:]))
            return parts
        if start > pos:
            parts.append((False, template[pos:start]))
        end = _find_block_end(template, start + len(EXPRESSION_PREFIX))
        body = template[start + len(EXPRESSION_PREFIX) : end].strip()
        if not body:
            raise ExpressionEvaluationError(f"empty expression block in {template!r}")
        parts.append((True, body))
        pos = end + len(EXPRESSION_SUFFIX)


def _find_block_end(template: str, pos: int) -> int:
    depth = 0
    quote: str | None = None
    for i in range(pos, len(template)):
        ch = template[i]
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in ("'", '"'):
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                return i
            depth -= 1
    raise ExpressionEvaluationError(f"unterminated expression block in {template!r}")


def _tokenize(expr: str) -> List[Tuple[str, str]]:
    tokens: List[Tuple[str, str]] = []
    pos = 0
    expr = expr.rstrip()
    while pos < len(expr):
        match = _TOKEN_RE.match(expr, pos)
        if match is None or match.end() == pos:
            raise ExpressionEvaluationError(
                f"unexpected character {expr[pos:].lstrip()[:1]!r} in expression {expr!r}"
            )
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def _evaluate(expr: str, registry: Mapping[str, Any]) -> Any:
    parser = _Parser(_tokenize(expr), expr, registry)
    value = parser.expression()
    if not parser.at_end():
        raise ExpressionEvaluationError(
            f"unexpected token {parser.peek()[1]!r} in expression {expr!r}"
        )
    return value


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, tokens: List[Tuple[str, str]], expr: str, registry: Mapping[str, Any]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._expr = expr
        self._registry = registry

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> Tuple[str, str]:
        if self.at_end():
            return ("eof", "")
        return self._tokens[self._pos]

    def _advance(self) -> Tuple[str, str]:
        token = self.peek()
        if token[0] == "eof":
            raise ExpressionEvaluationError(f"unexpected end of expression {self._expr!r}")
        self._pos += 1
        return token

    def _expect(self, op: str) -> None:
        kind, text = self._advance()
        if kind != "op" or text != op:
            raise ExpressionEvaluationError(
                f"expected {op!r} but found {text!r} in expression {self._expr!r}"
            )

    def expression(self) -> Any:
        value = self._primary()
        while self.peek() == ("op", "."):
            self._advance()
            kind, name = self._advance()
            if kind != "ident":
                raise ExpressionEvaluationError(
                    f"expected a member name after '.' in expression {self._expr!r}"
                )
            if self.peek() == ("op", "("):
                value = self._call(value, name, self._arguments())
            else:
                value = self._member(value, name)
        return value

    def _primary(self) -> Any:
        kind, text = self._advance()
        if kind == "number":
            return float(text) if "." in text else int(text)
        if kind == "string":
            quote = text[0]
            return text[1:-1].replace(quote * 2, quote)
        if kind == "service":
            return self._service(text[1:])
        if kind == "ident" and text in _LITERALS:
            return _LITERALS[text]
        if kind == "op" and text == "(":
            value = self.expression()
            self._expect(")")
            return value
        raise ExpressionEvaluationError(f"unexpected token {text!r} in expression {self._expr!r}")

    def _arguments(self) -> List[Any]:
        self._expect("(")
        args: List[Any] = []
        if self.peek() == ("op", ")"):
            self._advance()
            return args
        while True:
            args.append(self.expression())
            kind, text = self._advance()
            if kind == "op" and text == ")":
                return args
            if kind != "op" or text != ",":
                raise ExpressionEvaluationError(
                    f"expected ',' or ')' but found {text!r} in expression {self._expr!r}"
                )

    def _service(self, name: str) -> Any:
        try:
            return self._registry[name]
        except KeyError as exc:
            raise ExpressionEvaluationError(
                f"no service named {name!r} available for expression {self._expr!r}"
            ) from exc

    def _member(self, target: Any, name: str) -> Any:
        if isinstance(target, Mapping) and name in target:
            return target[name]
        try:
            return getattr(target, name)
        except AttributeError as exc:
            raise ExpressionEvaluationError(
                f"{type(target).__name__} has no member {name!r} (expression {self._expr!r})"
            ) from exc

    def _call(self, target: Any, name: str, args: List[Any]) -> Any:
        method = self._member(target, name)
        if not callable(method):
            raise ExpressionEvaluationError(
                f"member {name!r} is not callable (expression {self._expr!r})"
            )
        try:
            return method(*args)
        except Exception as exc:
            raise ExpressionEvaluationError(
                f"calling {name!r} failed in expression {self._expr!r}: {exc}"
            ) from exc
