"""Command-line interface for splitting text files into sentences."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from hesentence.config.loader import load_config, ConfigLoadError
from hesentence.config.schema import SegmenterConfig
from hesentence.core.errors import MarkerError
from hesentence.core.util import safe_json, format_kv


class ConsoleLogger:
    """Structured logger that writes ``LEVEL: msg k=v`` lines to stderr."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    def _emit(self, level: str, msg: str, **kv):
        details = format_kv(**kv)
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, **kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, **kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, **kv)


def _load_settings(args) -> SegmenterConfig:
    """Build settings from an optional config file plus command-line overrides."""
    config = load_config(args.config) if args.config else SegmenterConfig()
    overrides = {}
    if getattr(args, "marker", None) is not None:
        overrides["marker"] = args.marker
    if getattr(args, "encoding", None) is not None:
        overrides["encoding"] = args.encoding
    if overrides:
        config = config.model_copy(update=overrides)
        issues = config.validate_marker()
        if issues:
            raise ConfigLoadError("; ".join(issues))
    return config


def _read_input(path: Optional[str], encoding: str) -> str:
    if path is None or path == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(path).read_bytes()
    return data.decode(encoding)


def split_command(args):
    """Split a file (or stdin) into sentences."""
    try:
        config = _load_settings(args)
        logger = ConsoleLogger() if args.verbose else None
        segmenter = config.build_segmenter(logger=logger)

        if args.input and args.input != "-" and not Path(args.input).exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            return 1

        text = _read_input(args.input, config.encoding)
        result = segmenter.analyze(text)

        if args.show_fragments:
            payload = {
                "marker": result.marker,
                "fragments": result.fragments,
                "sentences": result.sentences,
                "boundary_count": result.boundary_count,
                "dropped_fragments": result.dropped_fragments,
            }
            print(safe_json(payload))
        elif args.json:
            print(safe_json(result.sentences))
        else:
            for sentence in result.sentences:
                print(sentence)

        return 0

    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1
    except MarkerError as e:
        print(f"❌ Marker error: {e}", file=sys.stderr)
        return 1
    except (UnicodeDecodeError, LookupError) as e:
        print(f"❌ Cannot decode input: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Cannot read input: {e}", file=sys.stderr)
        return 1


def marker_command(args):
    """Print the marker that would be used."""
    try:
        config = load_config(args.config) if args.config else SegmenterConfig()
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1
    print(repr(config.marker))
    return 0


def info_command(args):
    """Display version and system information."""
    print("hesentence CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("hesentence")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hesentence",
        description="Split Hebrew text into sentences"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    split_parser = subparsers.add_parser(
        "split",
        help="Split a text file into sentences, one per line"
    )
    split_parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Path to the text file (default: stdin)"
    )
    split_parser.add_argument(
        "-c", "--config",
        help="Path to a YAML config file"
    )
    split_parser.add_argument(
        "-e", "--encoding",
        help="Input encoding, overrides the config (e.g. cp1255)"
    )
    split_parser.add_argument(
        "-m", "--marker",
        help="Boundary marker, overrides the config"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as a JSON list"
    )
    split_parser.add_argument(
        "--show-fragments",
        action="store_true",
        help="Print raw fragments and sentences as JSON"
    )
    split_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log segmentation details to stderr"
    )

    marker_parser = subparsers.add_parser(
        "marker",
        help="Show the boundary marker"
    )
    marker_parser.add_argument(
        "-c", "--config",
        help="Path to a YAML config file"
    )

    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "marker":
        return marker_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
