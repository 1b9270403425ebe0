"""Command-line options and small helpers for fragment-shader demos."""

from __future__ import annotations

import argparse
import logging
import os
import struct
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, NoReturn, Sequence, TextIO

from pixelplay.geometry import Vec

log = logging.getLogger(__name__)

DEFAULT_VERSION = "v0.1"
DEFAULT_FILENAME = "shaders/seascape.glsl"
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_DRIFT = 0.01
DEFAULT_TIMEOUT = "120s"

EXAMPLE = "seascape-shader --width 640 --height 480 --filename shaders/planetfall.glsl"


def _float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _debug_from_env() -> bool:
    return os.environ.get("BUILDDEBUG", "") != ""


@dataclass
class SeascapeOptions:
    """Settings of the seascape shader window."""

    version: str = DEFAULT_VERSION
    filename: str = DEFAULT_FILENAME
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    drift: float = _float32(DEFAULT_DRIFT)
    race: bool = False
    debug: bool = field(default_factory=_debug_from_env)
    timeout: str = DEFAULT_TIMEOUT


class _FlagParser(argparse.ArgumentParser):
    """An argument parser that reports to standard output with a usage example."""

    def print_help(self, file: TextIO | None = None) -> None:
        out = sys.stdout if file is None else file
        super().print_help(out)
        print("", file=out)
        print("EXAMPLE:", file=out)
        print("", file=out)
        print(EXAMPLE, file=out)
        print("", file=out)

    def error(self, message: str) -> NoReturn:
        print(message, file=sys.stdout)
        self.print_help(sys.stdout)
        self.exit(2)


def _build_parser() -> _FlagParser:
    parser = _FlagParser(prog="seascape-shader", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "-help", "--help", action="help",
                        help="show this help message and exit")
    parser.add_argument("-version", "--version", dest="version", default=DEFAULT_VERSION,
                        help="Set compiled in version string")
    parser.add_argument("-filename", "--filename", dest="filename", default=DEFAULT_FILENAME,
                        help="path to GLSL file")
    parser.add_argument("-width", "--width", dest="width", type=int, default=DEFAULT_WIDTH,
                        help="Width of the OpenGL Window")
    parser.add_argument("-height", "--height", dest="height", type=int, default=DEFAULT_HEIGHT,
                        help="Height of the OpenGL Window")
    parser.add_argument("-drift", "--drift", dest="drift", type=float, default=DEFAULT_DRIFT,
                        help="Speed of the gradual camera drift")
    parser.add_argument("-race", "--race", dest="race", action="store_true",
                        help="Use race detector")
    return parser


def parse_flags(argv: Sequence[str] | None = None) -> SeascapeOptions:
    """Parse the command line of the seascape shader demo."""
    args = _build_parser().parse_args(argv)
    options = SeascapeOptions(
        version=args.version,
        filename=args.filename,
        width=args.width,
        height=args.height,
        drift=_float32(args.drift),
        race=args.race,
    )
    log.info("Parsed() worked. width= %d", options.width)
    log.info("width= %d", options.width)
    log.info("height= %d", options.height)
    log.info("uDrift= %s", options.drift)
    return options


def bind_uniforms(*args: Any) -> dict[str, Any]:
    """Pair uniform names with their values: ``name, value, name, value, ...``."""
    if len(args) % 2 != 0:
        raise ValueError("needs to be divisable by 2")
    names, values = args[0::2], args[1::2]
    uniforms: dict[str, Any] = {}
    for name, value in zip(names, values):
        if not isinstance(name, str):
            raise TypeError(f"uniform name must be a string, got {type(name).__name__}")
        uniforms[name] = value
    return uniforms


def center_position(monitor_size: tuple[float, float], window_size: tuple[float, float]) -> Vec:
    """Return where to put a window so that it sits in the middle of the monitor."""
    mon_w, mon_h = monitor_size
    win_w, win_h = window_size
    return Vec(mon_w / 2 - win_w / 2, mon_h / 2 - win_h / 2)


def load_file_to_string(filename: str | os.PathLike[str]) -> str:
    """Return the contents of a file as text."""
    return Path(filename).read_bytes().decode("utf-8", errors="replace")