"""CLI log inspector — list, read, and search a log and its archives."""

import argparse
import os
import sys

from slotlog.inspector import list_log_files, read_file, search_files


def _human_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def main():
    parser = argparse.ArgumentParser(description="Inspect a rotating log and its archives")
    parser.add_argument("--path", default=os.environ.get("APP_LOG_PATH", "./logs/app.log"),
                        help="Path of the active log file")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List the log and its archives")
    group.add_argument("--read", metavar="FILE", help="Read a specific log file")
    group.add_argument("--search", metavar="TEXT", help="Search text across the log and its archives")
    args = parser.parse_args()

    if args.list:
        files = list_log_files(args.path)
        if not files:
            print("No log files found.")
            return
        for path in files:
            print(f"  {path}  ({_human_size(os.path.getsize(path))})")

    elif args.read:
        try:
            sys.stdout.write(read_file(args.read))
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    elif args.search:
        results = search_files(args.path, args.search)
        if not results:
            print(f"No matches found for '{args.search}'.")
            return
        for filename, line_num, line in results:
            print(f"  [{filename}:{line_num}] {line}")


if __name__ == "__main__":
    main()
