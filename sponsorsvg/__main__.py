import argparse
from pathlib import Path

from sponsorsvg._log import LOG
from sponsorsvg.avatars import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT,
    FetchError,
    resolve_avatars,
)
from sponsorsvg.render import render_svg
from sponsorsvg.sponsors import load_sponsors


def write_svg(path: Path, document: str) -> None:
    path.write_text(document, encoding="utf-8")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="sponsorsvg", description="Render sponsors.json as an SVG avatar grid"
    )
    parser.add_argument(
        "--input", type=Path, default=Path("sponsors.json"), help="sponsor list"
    )
    parser.add_argument(
        "--output", type=Path, default=Path("sponsors.svg"), help="SVG to write"
    )
    parser.add_argument(
        "--embed",
        action="store_true",
        help="Fetch avatars and embed them, instead of linking to them",
    )
    parser.add_argument(
        "--max-redirects",
        type=int,
        default=DEFAULT_MAX_REDIRECTS,
        help="Redirect hops to follow per avatar fetch",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout, in seconds",
    )
    parser.add_argument(
        "--escape-names",
        action="store_true",
        help="HTML-escape sponsor names in labels",
    )

    args = parser.parse_args(argv)

    try:
        sponsors = load_sponsors(args.input)
    except (OSError, ValueError, KeyError, TypeError) as e:
        LOG.error(f"couldn't load sponsors from {args.input}: {e!r}")

    LOG.info(f"loaded {len(sponsors)} sponsors from {args.input}")

    avatars = None
    if args.embed:
        with LOG.scope("avatars"):
            try:
                avatars = resolve_avatars(
                    sponsors, max_redirects=args.max_redirects, timeout=args.timeout
                )
            except FetchError as e:
                LOG.error(f"giving up: {e}")

    document = render_svg(sponsors, avatars=avatars, escape_names=args.escape_names)

    try:
        write_svg(args.output, document)
    except OSError as e:
        LOG.error(f"couldn't write {args.output}: {e}")

    LOG.info(f"generated {args.output}")


if __name__ == "__main__":
    main()
