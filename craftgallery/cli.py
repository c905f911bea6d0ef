"""Command-line interface for craftgallery."""

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_HOST, DEFAULT_PORT, default_data_dir, media_dir, storage_path
from .models import EntryForm, GallerySnapshot
from .search import filter_entries
from .session import GallerySession
from .storage import FileStorage, GalleryPersistence, StorageQuotaError
from .store import EntryStore


def open_store(data_dir: Path) -> EntryStore:
    """Open the gallery stored under `data_dir`."""
    persistence = GalleryPersistence(FileStorage(storage_path(data_dir)))
    return EntryStore.open(persistence)


def cmd_serve(args):
    """Start web server for the gallery."""
    from .server import run_server

    store = open_store(args.data_dir)
    print(f"Loaded {len(store)} videos from {args.data_dir}")
    run_server(GallerySession(store), media_dir(args.data_dir), host=args.host, port=args.port)


def cmd_list(args):
    """Print entries, optionally filtered."""
    store = open_store(args.data_dir)
    entries = filter_entries(store.current(), args.query)
    if not entries:
        print("No matching videos")
        return
    for i, entry in enumerate(entries, 1):
        tags = f"  #{' #'.join(entry.tags)}" if entry.tags else ""
        print(f"{i:3d}. {entry.title}{tags}")
        print(f"     {entry.video_url}")


def cmd_add(args):
    """Add one entry at the front of the gallery."""
    form = EntryForm(
        title=args.title,
        video_url=args.video_url,
        thumbnail=args.thumbnail,
        video_alt_url=args.alt_url,
        tags=args.tags,
        description=args.description,
    )
    if not form.can_save():
        print("Error: title and video URL must not be blank", file=sys.stderr)
        sys.exit(1)

    store = open_store(args.data_dir)
    try:
        store.add(form.to_entry())
    except StorageQuotaError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Added: {form.title.strip()} ({len(store)} videos)")


def cmd_reset(args):
    """Drop added entries and go back to the built-in examples."""
    if not args.yes:
        try:
            answer = input("Delete all added videos on this device? [y/N] ")
        except EOFError:
            answer = ""
        if answer.strip().lower() not in ("y", "yes"):
            print("Cancelled")
            return
    store = open_store(args.data_dir)
    store.reset_to_default()
    print(f"Reset to {len(store)} default videos")


def cmd_export(args):
    """Write the current gallery list to a JSON file."""
    store = open_store(args.data_dir)
    GallerySnapshot(entries=list(store.current())).save(args.output)
    print(f"Exported {len(store)} videos to {args.output}")


def main():
    parser = argparse.ArgumentParser(
        description="Personal craft video gallery with local storage"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_data_dir(p):
        p.add_argument(
            "--data-dir",
            type=Path,
            default=default_data_dir(),
            help="Data directory (default: $CRAFTGALLERY_DATA_DIR or data)",
        )

    # serve subcommand
    p_serve = subparsers.add_parser("serve", help="Start web server for viewing and adding videos")
    add_data_dir(p_serve)
    p_serve.add_argument("--host", default=DEFAULT_HOST, help=f"Host (default: {DEFAULT_HOST})")
    p_serve.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Port (default: {DEFAULT_PORT})")
    p_serve.set_defaults(func=cmd_serve)

    # list subcommand
    p_list = subparsers.add_parser("list", help="List videos")
    add_data_dir(p_list)
    p_list.add_argument("--query", "-q", default="", help="Filter by title or tag")
    p_list.set_defaults(func=cmd_list)

    # add subcommand
    p_add = subparsers.add_parser("add", help="Add a video")
    add_data_dir(p_add)
    p_add.add_argument("title", help="Title shown on the card")
    p_add.add_argument("video_url", help="Direct mp4 URL")
    p_add.add_argument("--thumbnail", default="", help="Thumbnail image URL")
    p_add.add_argument("--alt-url", default="", help="Alternate (webm) video URL")
    p_add.add_argument("--tags", default="", help="Comma-separated tags")
    p_add.add_argument("--description", default="", help="Description shown under the player")
    p_add.set_defaults(func=cmd_add)

    # reset subcommand
    p_reset = subparsers.add_parser("reset", help="Remove added videos and restore the defaults")
    add_data_dir(p_reset)
    p_reset.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")
    p_reset.set_defaults(func=cmd_reset)

    # export subcommand
    p_export = subparsers.add_parser("export", help="Write the gallery list to a JSON file")
    add_data_dir(p_export)
    p_export.add_argument("output", type=Path, help="Output JSON file")
    p_export.set_defaults(func=cmd_export)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
