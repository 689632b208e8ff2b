# htmluna - An HTML to Luna converter
# Copyright (C) 2026 htmluna contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from __future__ import annotations

from typing import Sequence
import argparse
import copy
import logging
import logging.config
import os.path
import sys

from .config import OUTPUT_FORMATS, Config
from .errors import ParseError
from .formatter import Forest, parse, render_outline, render_pretty, render_target
from .get_version import version

BASE_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "example-config.yaml")

log: logging.Logger = logging.getLogger("mau.cli")

parser = argparse.ArgumentParser(description="Convert div/p/b/img HTML into Luna notation",
                                 prog="python -m htmluna")
parser.add_argument("file", type=str, nargs="?", default=None, metavar="<path>",
                    help="the HTML file to convert. Reads from stdin if omitted or -")
parser.add_argument("-c", "--config", type=str, default=None, metavar="<path>",
                    help="the path to your config file")
parser.add_argument("-f", "--format", type=str, choices=OUTPUT_FORMATS, default=None,
                    help="the output format. Overrides output.format in the config")
parser.add_argument("--compress", action="store_true", default=None,
                    help="print the outline format on a single line")
parser.add_argument("-w", "--write", action="store_true",
                    help="write the output back into the input file instead of stdout")
parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
parser.add_argument("--version", action="version", version=f"htmluna {version}")


def load_config(path: str | None) -> Config:
    config = Config(path or "", BASE_CONFIG_PATH)
    if path:
        config.load()
    config.update(save=False)
    return config


def prepare_log(config: Config, verbose: bool = False) -> None:
    logging.config.dictConfig(copy.deepcopy(config["logging"]))
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("mau").setLevel(logging.DEBUG)


def render(forest: Forest, config: Config, output_format: str, compress: bool) -> str:
    if output_format == "outline":
        return render_outline(forest, compress=compress, indent=config["output.outline_indent"])
    elif output_format == "pretty":
        return render_pretty(forest, indent=config["output.pretty_indent"],
                             branch=config["output.pretty_branch"])
    return render_target(forest)


def read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as file:
        return file.read()


def main(argv: Sequence[str] | None = None) -> int:
    args = parser.parse_args(argv)
    if args.write and args.file in (None, "-"):
        parser.error("--write requires an input file")

    try:
        config = load_config(args.config)
    except OSError as e:
        print(f"Failed to read config from {args.config}: {e}", file=sys.stderr)
        return 2
    prepare_log(config, args.verbose)

    try:
        output_format = args.format or config["output.format"]
        compress = config["output.compress"] if args.compress is None else args.compress
        max_length = config["input.max_length"]
    except ValueError as e:
        log.error(f"Invalid config: {e}")
        return 2
    if output_format not in OUTPUT_FORMATS:
        log.error(f"Unknown output format {output_format!r}, expected one of "
                  f"{', '.join(OUTPUT_FORMATS)}")
        return 2

    try:
        html = read_input(args.file)
    except OSError as e:
        log.error(f"Failed to read {args.file}: {e}")
        return 2
    if len(html) > max_length:
        log.error(f"Input is {len(html)} characters long, the maximum is {max_length}")
        return 2

    try:
        forest = parse(html)
        output = render(forest, config, output_format, compress)
    except ParseError as e:
        log.error(f"Failed to parse {args.file or 'stdin'}: {e}")
        return 2
    except Exception:
        log.exception("Unexpected error while converting HTML")
        return 1

    if args.write:
        with open(args.file, "w", encoding="utf-8") as file:
            file.write(output + "\n")
        log.debug(f"Wrote {output_format} output to {args.file}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
