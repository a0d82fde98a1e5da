"""
Reimplementation of the `python3-config` / `python2-config` scripts on top of PythonConfig.

Usage lines, exit codes and output mirror the scripts shipped with CPython,
so the two can be swapped in build tooling.
"""
import logging
import os
import sys
from argparse import ArgumentParser
from logging import getLogger

from .config import PythonConfig
from .errors import PythonConfigError
from .version import Version

logger = getLogger(__name__)

LOG_LEVEL_ENV = "PYTHON_CONFIG_LOG_LEVEL"

HANDLERS = {
    "prefix": lambda config, embed: config.prefix(),
    "exec-prefix": lambda config, embed: config.exec_prefix(),
    "includes": lambda config, embed: config.includes(),
    "libs": lambda config, embed: config.libs(embed),
    "cflags": lambda config, embed: config.cflags(),
    "ldflags": lambda config, embed: config.ldflags(embed),
    "extension-suffix": lambda config, embed: config.extension_suffix(),
    "abiflags": lambda config, embed: config.abiflags(),
    "configdir": lambda config, embed: config.configdir(),
}

# Flags in the order the reference scripts list them in their usage line
VALID_OPTS = {
    Version.THREE: ["prefix", "exec-prefix", "includes", "libs", "cflags", "ldflags",
                    "extension-suffix", "help", "abiflags", "configdir", "embed"],
    Version.TWO: ["prefix", "exec-prefix", "includes", "libs", "cflags", "ldflags", "help"],
}


class UsageExit(Exception):
    def __init__(self, code):
        super().__init__(code)
        self.code = code


class UsageParser(ArgumentParser):
    """ArgumentParser that reports every parse error with the reference one-line usage."""

    def __init__(self, prog, opts):
        super().__init__(prog=prog, add_help=False)
        self.opts = opts
        for opt in opts:
            self.add_argument("--" + opt, dest="requested", action="append_const", const=opt)

    def format_usage(self):
        return "Usage: {0} [{1}]\n".format(self.prog, "|".join("--" + opt for opt in self.opts))

    def error(self, message):
        logger.debug(message)
        raise UsageExit(1)


def exit_with_usage(parser, code):
    sys.stderr.write(parser.format_usage())
    return code


def setup_logging():
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(name)s: %(levelname)s: %(message)s",
    )


def main(argv=None, version=Version.THREE, config=None):
    """
    Run the CLI and return the process exit code.
    :param argv: full argument vector, including the program name
    :param version: which reference script to mimic
    :param config: PythonConfig to query, created for `version` when None
    """
    if argv is None:
        argv = sys.argv
    parser = UsageParser(argv[0], VALID_OPTS[version])

    try:
        args = parser.parse_args(argv[1:])
    except UsageExit as e:
        return exit_with_usage(parser, e.code)

    requested = args.requested or []
    if not requested:
        return exit_with_usage(parser, 1)
    if "help" in requested:
        return exit_with_usage(parser, 0)

    if config is None:
        config = PythonConfig(version)
    embed = "embed" in requested

    try:
        # interpreters older than 3.8 ship a script without --embed
        if embed and not config.embed_supported():
            return exit_with_usage(parser, 1)
    except PythonConfigError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    for opt in requested:
        if opt == "embed":
            continue
        try:
            print(HANDLERS[opt](config, embed))
        except PythonConfigError as e:
            print(f"{parser.prog}: error: {e}", file=sys.stderr)
            return 1
    return 0


def python3_config():
    setup_logging()
    sys.exit(main(version=Version.THREE))


def python2_config():
    setup_logging()
    sys.exit(main(version=Version.TWO))
