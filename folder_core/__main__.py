"""
    Command-line entry point.

        folder-commands                      # demo, names read from stdin
        folder-commands demo --answer docs --answer pics --answer videos
        folder-commands shell --root projects
        folder-commands -v --log-file run.log demo
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig
from .driver import DemoDriver, InteractiveShell
from .exceptions import CommandError
from .input_reader import ConsoleReader, ScriptedReader

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Console handler for warnings (everything with -v), optional debug log file."""
    level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG if log_file else level,
                        handlers=handlers, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folder-commands",
        description="Add, rename and undo folders in an in-memory tree.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every command")
    parser.add_argument("--log-file", help="Also write a debug log to this file")

    subparsers = parser.add_subparsers(dest="mode")

    demo_parser = subparsers.add_parser("demo", help="Run the rename/add/undo walkthrough")
    demo_parser.add_argument("--root", default=None, help="Name of the root folder")
    demo_parser.add_argument(
        "--answer", action="append", default=None, metavar="NAME",
        help="Answer the next name prompt with NAME instead of reading stdin "
             "(repeatable)",
    )

    shell_parser = subparsers.add_parser("shell", help="Interactive folder shell")
    shell_parser.add_argument("--root", default=None, help="Name of the root folder")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    config = AppConfig()
    if getattr(args, "root", None):
        config.root_name = args.root

    answers = getattr(args, "answer", None)
    if answers:
        reader = ScriptedReader(answers, stdout=sys.stdout)
    else:
        reader = ConsoleReader()

    try:
        if args.mode == "shell":
            InteractiveShell(reader, config=config).run()
        else:
            DemoDriver(reader, config=config).run()
    except CommandError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
