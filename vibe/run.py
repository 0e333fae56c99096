from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from vibe.config import load_settings
from vibe.errors import RemoteError, UsageError, VibeError
from vibe.generate import generate_to_file
from vibe.llm import Transport, build_llm

logger = logging.getLogger("vibe")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="vibe", add_help=False)
    parser.add_argument("output", type=Path, help="file to write the generated code to")
    parser.add_argument("prompt", type=str, help="what the code should do")
    return parser


def configure_logging(level: str) -> None:
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    lvl = logging.getLevelName(level)
    logger.setLevel(lvl if isinstance(lvl, int) else logging.WARNING)


def write_raw(data: bytes) -> None:
    """Write to stdout without Rich touching tabs or control characters."""
    out = sys.stdout
    buf = getattr(out, "buffer", None)
    if buf is None:
        out.write(data.decode("utf-8", errors="replace"))
        out.flush()
        return
    out.flush()
    buf.write(data)
    buf.flush()


def main(argv: list[str] | None = None, *, transport: Transport | None = None) -> int:
    console = Console(soft_wrap=True, highlight=False, emoji=False)
    args = sys.argv[1:] if argv is None else argv

    try:
        if len(args) != 2:
            raise UsageError()
        # "--" keeps prompts that start with a dash positional
        ns = build_parser().parse_args(["--", *args])

        settings = load_settings()
        configure_logging(settings.log_level)
        llm = build_llm(settings, transport=transport)

        result = generate_to_file(llm, ns.output, ns.prompt)
    except VibeError as e:
        logger.debug("run failed: kind=%s", e.kind)
        if isinstance(e, RemoteError):
            # the body is echoed byte for byte
            write_raw(e.raw_message() + b"\n")
        else:
            console.print(str(e), markup=False)
        return e.exit_code

    console.print(f"Go code written to {result.output_path}", markup=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
