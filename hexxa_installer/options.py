from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import InvalidArgumentError

PROG = "hexxa-xcode-theme"
DEFAULT_DESTINATION = "~/Library/Developer/Xcode/UserData/FontAndColorThemes"
HELP_FLAGS = ("-h", "--help")


@dataclass(frozen=True)
class Options:
    destination: Path
    dry_run: bool = False


class _Formatter(argparse.HelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        super().add_usage(usage, actions, groups, prefix="Usage: ")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        formatter_class=_Formatter,
        usage="%(prog)s [--destination <path>] [--dry-run]",
        description="Installs the bundled Hexxa Xcode color theme.",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument(
        "--destination",
        metavar="<path>",
        default=DEFAULT_DESTINATION,
        help="Override the destination directory",
    )
    p.add_argument("--dry-run", action="store_true", help="Preview actions without copying files")
    p.add_argument("-h", "--help", action="store_true", help="Show this message")
    return p


def print_usage(file=None) -> None:
    build_parser().print_help(file=file or sys.stdout)


def _normalize(path: str) -> Path:
    return Path(os.path.abspath(os.path.expanduser(path)))


def _canonical_tokens(args_list: Sequence[str]) -> List[str]:
    """Check argv token by token and spell --destination as --destination=<value>.

    The value after --destination is taken verbatim, even when it starts with
    a dash. Any other token, including --flag=value spellings, is rejected.
    """

    out: List[str] = []
    tokens = iter(args_list)
    for token in tokens:
        if token == "--destination":
            value = next(tokens, None)
            if value is None:
                raise InvalidArgumentError("--destination requires a path")
            out.append(f"--destination={value}")
        elif token == "--dry-run":
            out.append(token)
        else:
            raise InvalidArgumentError(token)
    return out


def parse_options(argv: Optional[Sequence[str]] = None) -> Options:
    """Turn argv (without the program name) into Options.

    Help wins over everything else on the line: it prints usage and exits 0
    before any other token is looked at.
    """

    args_list = list(sys.argv[1:] if argv is None else argv)
    if any(a in HELP_FLAGS for a in args_list):
        print_usage()
        raise SystemExit(0)

    args = build_parser().parse_args(_canonical_tokens(args_list))

    return Options(destination=_normalize(args.destination), dry_run=bool(args.dry_run))
