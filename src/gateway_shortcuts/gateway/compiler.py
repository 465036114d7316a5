from __future__ import annotations

from pathlib import Path
import argparse
import json
import logging

from gateway_shortcuts.shortcut.frontend import RouteFrontend

from .backend import GatewayBackend


logger = logging.getLogger(__name__)


def compile_toml_config(in_path: str | Path, out_path: str | Path, *, indent: int | None = 2) -> None:
    """End-to-end compilation: TOML routes file -> JSON routes file."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = RouteFrontend()
    config = frontend.load_toml(in_path)
    routes = frontend.parse_config(config)

    backend = GatewayBackend()
    compiled = backend.compile(routes)

    payload = {
        "description": str(config.get("description", "")),
        "routes": [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in compiled],
    }
    out_path.write_text(json.dumps(payload, indent=indent) + "\n", encoding="utf-8")
    logger.info("wrote %d route(s) to %s", len(compiled), out_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate gateway route json from a shortcut route config toml."
    )
    parser.add_argument("config", help="Route config toml path (e.g. routes.toml)")
    parser.add_argument("out", help="Output route json path")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    compile_toml_config(args.config, args.out, indent=args.indent)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
