"""Command-line client that reimagines a local photo."""

import argparse
import asyncio
import sys
from pathlib import Path

from reimagine.app_logging import configure_logging
from reimagine.catalog import THEMES
from reimagine.containers import AppContainer, build_container
from reimagine.domain.images import ImagePayload
from reimagine.domain.session import SessionStatus


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reimagine", description="See yourself in a future occupation"
    )
    parser.add_argument("photo", nargs="?", type=Path, help="Path to a photo")
    parser.add_argument(
        "--theme",
        default=THEMES[0].id,
        choices=[theme.id for theme in THEMES],
        help="Occupation theme id",
    )
    parser.add_argument("--output", type=Path, help="Where to write the result")
    parser.add_argument(
        "--no-share", action="store_true", help="Skip creating a share link"
    )
    parser.add_argument(
        "--list-themes", action="store_true", help="List themes and exit"
    )
    return parser


async def run(container: AppContainer, args: argparse.Namespace) -> int:
    """Transform one photo and print the outcome. Returns an exit code."""
    session = container.new_session(auto_share=not args.no_share)
    session.select_theme(args.theme)
    payload = ImagePayload.from_bytes(args.photo.read_bytes())
    session.set_source(payload.to_data_url())

    print(f"Reimagining you as a {session.selected_theme.title}...")
    await session.submit()
    await session.drain()

    if session.status is not SessionStatus.READY or session.result_image is None:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1

    output = args.output or Path(session.download_filename)
    output.write_bytes(ImagePayload.from_data_url(session.result_image).data)
    print(f"Saved {output}")
    if session.share_url:
        print(f"Share: {session.share_url}")
    elif not args.no_share:
        print("Share link unavailable.", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_themes:
        for theme in THEMES:
            print(f"{theme.id}: {theme.title} - {theme.description}")
        return 0
    if args.photo is None:
        parser.error("a photo path is required")
    if not args.photo.is_file():
        print(f"Error: {args.photo} not found", file=sys.stderr)
        return 1

    container = build_container()
    configure_logging(container.settings.log_level)

    async def _run() -> int:
        try:
            return await run(container, args)
        finally:
            await container.close_resources()

    return asyncio.run(_run())


if __name__ == "__main__":
    sys.exit(main())
