"""Entry point: python -m specbuild --api=<api>

Renders openapi/<api>/openapi.template.yaml into dist/<api>/openapi.yaml,
filling ${API_KEY} from .env, .env.local and the environment, and copies
site/swagger.html next to it as index.html.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import BuildError, UsageError
from .writer import build


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="specbuild",
        description="Build one API's OpenAPI spec from its template.",
    )
    parser.add_argument("--api", help="API identifier, e.g. ojp1.0")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Project root holding openapi/, site/ and .env files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    try:
        if not args.api:
            raise UsageError("Usage: specbuild --api=<api>  (e.g. --api=ojp1.0)")
        config = load_config(args.root)
        paths = build(args.api, config, args.root)
    except UsageError as e:
        print(parser.format_usage(), end="", file=sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except BuildError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Built {args.api} -> {paths.out_spec} + {paths.out_viewer}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
