import sys
import argparse
from pathlib import Path
from typing import List, Optional

from . import __version__
from .base import STYLE_REGISTRY, available_styles
from .engine import DEFAULT_COLUMNS, DEFAULT_INDENT, DEFAULT_STYLE, decode, encode
from .errors import CodecError
from .log import log_info, log_warn, set_verbose

STDIN = "-"

# ==========================================
#  CLI LOGIC
# ==========================================


def list_styles():
    """Print all available styles and exit."""
    print("\nAvailable Styles:")
    print("=" * 60)
    for style in available_styles():
        marker = "*" if style.name == DEFAULT_STYLE else " "
        print(f"  {style.name:<8}{marker} [{style.domain.start}-{style.domain.stop - 1:>3}]  {style.description}")
    print("=" * 60)
    print(f"\nTotal: {len(STYLE_REGISTRY)} style(s) registered. * = default")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bbd",
        description="Binary Braille Dump\n\nEncode/decode data to/from Braille Patterns Unicode Block characters",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    style_help = "\n".join(f"  {s.name:<8}: {s.description}" for s in available_styles())
    parser.add_argument("-s", "--style", choices=sorted(STYLE_REGISTRY), default=DEFAULT_STYLE, metavar="STYLE",
                        help=f"Style (default: {DEFAULT_STYLE})\n{style_help}")

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-d", "--decode", action="store_true",
                            help="Decode Braille characters to bytes using the given style; ignores wrapping")
    mode_group.add_argument("-m", "--markdown", action="store_true", help="Markdown output")
    mode_group.add_argument("-l", "--list", action="store_true", help="List all available styles")

    parser.add_argument("-c", "--columns", type=int, default=DEFAULT_COLUMNS, metavar="N",
                        help=f"Wrap to N columns (\"bytes\") per line; 0: disable wrapping (default: {DEFAULT_COLUMNS})")
    parser.add_argument("-i", "--indent", type=int, default=DEFAULT_INDENT, metavar="N",
                        help=f"Indent wrapped lines by N spaces (default: {DEFAULT_INDENT})")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    parser.add_argument("files", nargs="*", type=Path, metavar="PATH",
                        help="Input file(s); [default: \"-\" (stdin)]")
    return parser


def check_paths(files: List[Path]):
    """Exit before producing any output if an input path is unusable."""
    for path in files:
        if str(path) == STDIN:
            continue
        if not path.exists():
            print(f"File path `{path}` does not exist!", file=sys.stderr)
            sys.exit(1)
        elif not path.is_file():
            print(f"File path `{path}` is not a file!", file=sys.stderr)
            sys.exit(2)


def read_bytes(path: Path) -> bytes:
    if str(path) == STDIN:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def read_text(path: Path) -> str:
    if str(path) == STDIN:
        return sys.stdin.buffer.read().decode("utf-8")
    return path.read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if args.list:
        list_styles()
        sys.exit(0)

    if args.columns < 0 or args.indent < 0:
        parser.error("--columns and --indent must not be negative")
    if args.indent and not args.columns:
        log_warn("Indent has no effect when wrapping is disabled (--columns 0).")

    files = args.files or [Path(STDIN)]
    check_paths(files)

    for path in files:
        log_info(f"Reading {'stdin' if str(path) == STDIN else path}")
        if args.decode:
            try:
                text = read_text(path)
            except (OSError, UnicodeDecodeError) as e:
                sys.exit(f"Error: Cannot read '{path}': {e}")
            try:
                data = decode(text, args.style)
            except CodecError as e:
                sys.exit(f"Decode Error ({args.style}): {e}")
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            try:
                data = read_bytes(path)
            except OSError as e:
                sys.exit(f"Error: Cannot read '{path}': {e}")
            try:
                result = encode(data, args.style, args.columns, args.indent,
                                markdown=args.markdown, label=str(path))
            except CodecError as e:
                sys.exit(f"Encode Error: {e}")
            print(result)
