from __future__ import annotations

from ..errors import ShortcutSyntaxError
from .ir import ShortcutDefinition


GENERATED_NAME_PREFIX = "_genkey_"


def generate_name(index: int) -> str:
    """Placeholder key for the unnamed shorthand argument at `index`."""

    return f"{GENERATED_NAME_PREFIX}{index}"


def is_generated_name(key: str) -> bool:
    return key.startswith(GENERATED_NAME_PREFIX)


def _tokenize_args(text: str, *, sep: str) -> list[str]:
    return [t.strip() for t in text.split(sep) if t.strip()]


def parse_shortcut(text: str, *, sep: str = ",") -> ShortcutDefinition:
    """Parse `Name=arg1,arg2` shorthand into a ShortcutDefinition."""

    eq_idx = text.find("=")
    if eq_idx <= 0:
        raise ShortcutSyntaxError(
            f"Unable to parse shortcut text {text!r}, must be of the form name=value"
        )

    name = text[:eq_idx].strip()
    if not name:
        raise ShortcutSyntaxError(f"invalid shortcut (empty name): {text!r}")

    tokens = _tokenize_args(text[eq_idx + 1 :], sep=sep)
    args = {generate_name(i): token for i, token in enumerate(tokens)}
    return ShortcutDefinition(name=name, args=args)
