"""CLI entry-point for metacraft.

Usage:
    python -m metacraft snippet [--query QS] [--base-url URL] [--escape]
    python -m metacraft jsonld [--query QS]
    python -m metacraft contrast BG FG [--locale pt-BR|en] [--json]
    python -m metacraft validate [--query QS] [--locale pt-BR|en] [--json]
    python -m metacraft render-og --out FILE [--title T] [--bg HEX] [--fg HEX] [--font PATH]
    python -m metacraft serve [--host HOST] [--port PORT]

``--query`` takes the page query string (``title=Hello&ogBg=%23000``), so any
shared MetaCraft URL can be replayed from the command line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from metacraft import __version__
from metacraft.color import contrast_ratio, is_hex_color
from metacraft.derive import build_jsonld, head_snippet
from metacraft.model.meta_config import DEFAULT_OG_BG, DEFAULT_OG_FG, DEFAULT_OG_TEXT
from metacraft.policy.contrast import (
    DEFAULT_LOCALE,
    exit_code_from_level,
    level_from_ratio,
    message_for,
)
from metacraft.urlstate import parse
from metacraft.utils.exit_codes import ExitCode
from metacraft.utils.json_norm import script_safe_json_dumps, stable_json_dumps
from metacraft.validation import error_message, validate_config

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="metacraft",
        description="SEO / Open Graph / Twitter meta tags, OG image and JSON-LD generator.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    sub = p.add_subparsers(dest="command")

    # ── snippet ──────────────────────────────────────────────────────
    sp = sub.add_parser("snippet", help="Print the <head> snippet.")
    sp.add_argument("--query", default="", help="Page query string.")
    sp.add_argument(
        "--base-url",
        dest="base_url",
        default=DEFAULT_BASE_URL,
        help="Origin serving /api/og (default: %(default)s).",
    )
    sp.add_argument(
        "--escape",
        action="store_true",
        default=False,
        help="HTML-escape field values instead of interpolating them verbatim.",
    )

    # ── jsonld ───────────────────────────────────────────────────────
    jp = sub.add_parser("jsonld", help="Print the JSON-LD block.")
    jp.add_argument("--query", default="", help="Page query string.")

    # ── contrast ─────────────────────────────────────────────────────
    cp = sub.add_parser("contrast", help="WCAG contrast ratio between two hex colours.")
    cp.add_argument("bg", help="Background colour, e.g. #0ea5e9")
    cp.add_argument("fg", help="Foreground colour, e.g. #020617")
    cp.add_argument("--locale", default=DEFAULT_LOCALE, help="pt-BR or en.")
    cp.add_argument("--json", dest="json_out", action="store_true", default=False)

    # ── validate ─────────────────────────────────────────────────────
    vp = sub.add_parser("validate", help="Validate every field of a query string.")
    vp.add_argument("--query", default="", help="Page query string.")
    vp.add_argument("--locale", default=DEFAULT_LOCALE, help="pt-BR or en.")
    vp.add_argument("--json", dest="json_out", action="store_true", default=False)

    # ── render-og ────────────────────────────────────────────────────
    rp = sub.add_parser("render-og", help="Render the OG image to a PNG file.")
    rp.add_argument("--out", type=Path, required=True, help="Output PNG path.")
    rp.add_argument("--title", default=DEFAULT_OG_TEXT)
    rp.add_argument("--bg", default=DEFAULT_OG_BG)
    rp.add_argument("--fg", default=DEFAULT_OG_FG)
    rp.add_argument("--font", default=None, help="TrueType font file.")

    # ── serve ────────────────────────────────────────────────────────
    sv = sub.add_parser("serve", help="Run the web app with uvicorn.")
    sv.add_argument("--host", default=None)
    sv.add_argument("--port", type=int, default=None)
    sv.add_argument("--reload", action="store_true", default=False)

    return p


def _handle_snippet(args: argparse.Namespace) -> int:
    """Dispatch ``metacraft snippet``."""
    config = parse(args.query)
    print(head_snippet(config, args.base_url, escape=args.escape))
    return ExitCode.SUCCESS


def _handle_jsonld(args: argparse.Namespace) -> int:
    """Dispatch ``metacraft jsonld``."""
    print(script_safe_json_dumps(build_jsonld(parse(args.query))))
    return ExitCode.SUCCESS


def _handle_contrast(args: argparse.Namespace) -> int:
    """Dispatch ``metacraft contrast``; exit code follows the contrast level."""
    for name, value in (("bg", args.bg), ("fg", args.fg)):
        if not is_hex_color(value):
            logger.warning(f"{name} {value!r} is not a hex colour; ratio will be 0")

    ratio = contrast_ratio(args.bg, args.fg)
    level = level_from_ratio(ratio)
    message = message_for(level, args.locale)

    if args.json_out:
        sys.stdout.write(
            stable_json_dumps(
                {"bg": args.bg, "fg": args.fg, "ratio": ratio, "level": level, "message": message},
                ndigits=2,
            )
        )
    else:
        print(f"{ratio:.2f}:1  {message}")
    return exit_code_from_level(level)


def _handle_validate(args: argparse.Namespace) -> int:
    """Dispatch ``metacraft validate``; 0 when every field is valid, else 1."""
    config = parse(args.query)
    errors = validate_config(config)

    if args.json_out:
        sys.stdout.write(
            stable_json_dumps(
                {
                    "valid": not errors,
                    "errors": {
                        key: {"kind": kind, "message": error_message(kind, args.locale)}
                        for key, kind in errors.items()
                    },
                }
            )
        )
    elif errors:
        for key, kind in errors.items():
            print(f"{key}: {error_message(kind, args.locale)}")
    else:
        print("OK")

    return ExitCode.VIOLATION if errors else ExitCode.SUCCESS


def _handle_render_og(args: argparse.Namespace) -> int:
    """Dispatch ``metacraft render-og``."""
    from metacraft.render.og_image import render_og_image

    png = render_og_image(args.title, args.bg, args.fg, font_path=args.font)
    out: Path = args.out
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(png)
    print(f"Image written to {out}", file=sys.stderr)
    return ExitCode.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    """Dispatch ``metacraft serve``."""
    import uvicorn

    from metacraft.web_api.config import settings

    uvicorn.run(
        "metacraft.web_api.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
        reload=args.reload,
    )
    return ExitCode.SUCCESS


_HANDLERS = {
    "snippet": _handle_snippet,
    "jsonld": _handle_jsonld,
    "contrast": _handle_contrast,
    "validate": _handle_validate,
    "render-og": _handle_render_og,
    "serve": _handle_serve,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``metacraft.utils.exit_codes``)."""
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else sys.argv[1:])

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR
    return int(handler(args))


if __name__ == "__main__":
    sys.exit(main())
