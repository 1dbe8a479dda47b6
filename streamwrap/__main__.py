import argparse
import os
import sys
from typing import IO, Iterator, List

from .scanner import DrainError, Scanner, SinkWriteError
from .text import demojize, striplow


def filterLines(fp: IO[str], stripControl: bool, demoji: bool) -> Iterator[str]:
    # Neither filter can change a line's newline, so it's safe to work a line at a time.
    for line in fp:
        if stripControl:
            line = striplow(line, allow_safe=True)
        if demoji:
            line = demojize(line)
        yield line


class TrackingWriter:
    # Remembers the last chunk written, so we know whether output ended mid-line.
    def __init__(self, out: IO[str]) -> None:
        self.out = out
        self.tail = ""

    def write(self, text: str) -> int:
        self.tail = text
        return self.out.write(text)


def wrapFile(
    fp: IO[str],
    out: IO[str],
    width: int,
    prefix: str,
    tabWidth: int,
    stripControl: bool,
    demoji: bool,
) -> int:
    scanner = Scanner(filterLines(fp, stripControl, demoji), width)
    scanner.setPrefix(prefix)
    scanner.setTabWidth(tabWidth)

    writer = TrackingWriter(out)
    written = scanner.writeTo(writer)
    if writer.tail:
        # Terminate the last line unless the input already did.
        try:
            written += out.write("\n")
        except OSError as e:
            raise SinkWriteError(written) from e
    return written


def silenceStdout() -> None:
    # Point stdout at devnull so the flush at interpreter exit has nowhere left to fail.
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        sys.stdout = open(os.devnull, "w")
        return

    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(
    files: List[str],
    width: int,
    prefix: str,
    tabWidth: int,
    stripControl: bool,
    demoji: bool,
) -> int:
    status = 0

    for name in files or ["-"]:
        try:
            if name == "-":
                wrapFile(sys.stdin, sys.stdout, width, prefix, tabWidth, stripControl, demoji)
            else:
                with open(name, "r", encoding="utf-8") as fp:
                    wrapFile(fp, sys.stdout, width, prefix, tabWidth, stripControl, demoji)
        except SinkWriteError as e:
            # Nowhere left to put the output, so there's no point in continuing.
            print(f"Cannot write output: {e.__cause__}", file=sys.stderr)
            silenceStdout()
            return 1
        except DrainError as e:
            print(f"Cannot read {name}: {e.__cause__}", file=sys.stderr)
            status = 1
        except OSError as e:
            print(f"Cannot read {name}: {e}", file=sys.stderr)
            status = 1

    sys.stdout.flush()
    return status


def cli() -> None:
    parser = argparse.ArgumentParser(description="Streaming word-wrap utility")

    parser.add_argument(
        "--width",
        default=80,
        type=int,
        help="Maximum number of characters per line, defaults to 80",
    )
    parser.add_argument(
        "--wide",
        action="store_true",
        help="Wrap to 132 characters instead of the given width",
    )
    parser.add_argument(
        "--prefix",
        default="",
        type=str,
        help="String to put in front of every non-empty line, not counted against the width",
    )
    parser.add_argument(
        "--tab-width",
        default=4,
        type=int,
        help="Number of characters per tab stop, defaults to 4",
    )
    parser.add_argument(
        "--strip-control",
        action="store_true",
        help="Remove control characters other than tabs and newlines before wrapping",
    )
    parser.add_argument(
        "--demojize",
        action="store_true",
        help="Replace emoji with their text shortcodes before wrapping",
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        type=str,
        help="Files to wrap, use - or nothing at all to read from stdin",
    )
    args = parser.parse_args()

    width = 132 if args.wide else args.width
    if width <= 0:
        parser.error("width must be a positive integer")
    if args.tab_width < 0:
        parser.error("tab width cannot be negative")

    try:
        sys.exit(
            main(
                args.files,
                width,
                args.prefix,
                args.tab_width,
                args.strip_control,
                args.demojize,
            )
        )
    except KeyboardInterrupt:
        print("Interrupted, stopping early.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    cli()
