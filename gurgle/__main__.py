import argparse
import logging
import sys
import typing

import gurgle
import gurgle.detail as detail
from gurgle.config import DEFAULT_CONFIG_FILE, load_config
from gurgle.errors import CompileError, ConfigError

logger = logging.getLogger("gurgle")


def _argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gurgle",
        description="Roll dice using TRPG-like syntax, e.g. '3d6max+2d4+1>15'.",
    )
    parser.add_argument("expression", nargs="+", help="dice expression to roll")
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help="YAML file with compile limits (default: %(default)s)",
    )
    parser.add_argument(
        "-l",
        "--language",
        choices=[language.value for language in detail.Language],
        default=detail.Language.EN.value,
        help="language of the printed result",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: typing.List[str] = sys.argv) -> int:
    args = _argument_parser().parse_args(argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print("error: %s" % e, file=sys.stderr)
        return 2

    text = " ".join(args.expression)
    try:
        compiled = gurgle.compile(text, config)
    except CompileError as e:
        logger.debug("failed to compile %r", text, exc_info=True)
        print("error: %s" % e, file=sys.stderr)
        return 1

    result = gurgle.evaluate(compiled)
    fmt = detail.Formatter(detail.Language(args.language))
    print(detail.format_roll(result, fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
