"""Command-line interface for the notedoc library.

The CLI converts assistant Markdown into editor JSON and applies the note
edits to JSON documents, reading from a file or stdin and writing to stdout
or ``--out``.

Environment Variable Support
----------------------------
Option defaults can be set with ``NOTEDOC_<SECTION>_<OPTION>`` variables,
for example ``NOTEDOC_PARSER_PARSE_TABLES=false``. Command-line flags always
override the environment, and the environment overrides config files.

Examples
--------
Convert Markdown to editor JSON::

    $ notedoc convert notes.md --out notes.json

Print a note's plain text::

    $ notedoc text notes.json

Replace every occurrence of a word::

    $ notedoc replace notes.json --old colour --new color --all

Pretty print with Rich::

    $ cat notes.md | notedoc convert --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/notedoc/cli/__init__.py

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from notedoc import __version__
from notedoc.api import append, convert, delete_text, extract_plain_text, is_markdown_table, replace, validate
from notedoc.ast.serialization import to_json
from notedoc.cli.config import CliConfig, load_cli_config
from notedoc.cli.output import write_output, write_status
from notedoc.constants import DEFAULT_LOG_LEVEL, EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE, LOG_LEVEL_NAMES
from notedoc.exceptions import NoteDocError
from notedoc.logging_utils import configure_logging
from notedoc.options.edit import EditOptions
from notedoc.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]

PARSER_DEST_PREFIX = "parser__"
EDIT_DEST_PREFIX = "edit__"


def _add_options_arguments(group: Any, options_class: type, dest_prefix: str) -> None:
    """Add one flag per documented field of an options dataclass.

    Boolean fields that default to True get a negated ``--no-...`` flag; the
    flag name comes from the field's ``cli_name`` metadata when present.
    """
    defaults = options_class()
    for option_field in fields(options_class):
        metadata = option_field.metadata
        if "help" not in metadata:
            continue

        default = getattr(defaults, option_field.name)
        cli_name = "--" + metadata.get("cli_name", option_field.name.replace("_", "-"))
        kwargs: Dict[str, Any] = {"dest": dest_prefix + option_field.name, "default": None, "help": metadata["help"]}
        if isinstance(default, bool):
            kwargs["action"] = "store_false" if default else "store_true"
        else:
            kwargs["type"] = metadata.get("type", type(default))
            kwargs["help"] += f" (default: {default})"
        group.add_argument(cli_name, **kwargs)


def _collect_overrides(args: argparse.Namespace, dest_prefix: str) -> Dict[str, Any]:
    overrides = {}
    for dest, value in vars(args).items():
        if dest.startswith(dest_prefix) and value is not None:
            overrides[dest[len(dest_prefix) :]] = value
    return overrides


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="Path to a configuration file (TOML, YAML, JSON or pyproject.toml)")
    common.add_argument("--out", "-o", help="Write the result to this file instead of stdout")
    common.add_argument("--indent", type=int, default=None, help="Indent JSON output by this many spaces")
    common.add_argument("--rich", action="store_true", help="Pretty print JSON output with Rich")
    common.add_argument("--force-rich", action="store_true", help="Use Rich output even when stdout is not a TTY")
    common.add_argument(
        "--log-level",
        choices=LOG_LEVEL_NAMES,
        type=str.upper,
        default=None,
        help="Logging level (default: WARNING, or the configured level)",
    )
    common.add_argument("--log-file", help="Also write log output to this file")
    common.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser_group = common.add_argument_group("Markdown parser options")
    _add_options_arguments(parser_group, MarkdownParserOptions, PARSER_DEST_PREFIX)
    edit_group = common.add_argument_group("Edit options")
    _add_options_arguments(edit_group, EditOptions, EDIT_DEST_PREFIX)

    parser = argparse.ArgumentParser(
        prog="notedoc",
        description="Convert assistant Markdown into editor JSON and edit note documents.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    def add_command(name: str, help_text: str, input_help: str) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, parents=[common], help=help_text, description=help_text)
        command.add_argument("input", nargs="?", default="-", help=f"{input_help} ('-' or omitted for stdin)")
        return command

    add_command("convert", "Convert Markdown into an editor JSON document", "Markdown file")
    add_command("text", "Print a document's plain text", "JSON document")
    add_command("validate", "Normalize an untrusted JSON document", "JSON document")
    add_command("is-table", "Report whether text looks like a pasted Markdown table", "Text file")

    append_cmd = add_command("append", "Append literal text to a document", "JSON document")
    append_cmd.add_argument("--text", required=True, help="Text to append")

    replace_cmd = add_command("replace", "Replace text in a document", "JSON document")
    replace_cmd.add_argument("--old", required=True, help="Text to search for")
    replace_cmd.add_argument("--new", required=True, help="Replacement text")
    replace_cmd.add_argument("--all", action="store_true", dest="all_occurrences", help="Replace every occurrence")

    delete_cmd = add_command("delete", "Delete text from a document", "JSON document")
    delete_cmd.add_argument("--text", required=True, help="Text to delete")
    delete_cmd.add_argument("--all", action="store_true", dest="all_occurrences", help="Delete every occurrence")

    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _resolve_options(args: argparse.Namespace, config: CliConfig) -> tuple[MarkdownParserOptions, EditOptions]:
    parser_options = config.parser.create_updated(**_collect_overrides(args, PARSER_DEST_PREFIX))
    edit_overrides = _collect_overrides(args, EDIT_DEST_PREFIX)
    edit_options = config.edit.create_updated(parser=parser_options, **edit_overrides)
    return parser_options, edit_options


def _cmd_convert(args: argparse.Namespace, source: str, parser_options: MarkdownParserOptions, _: EditOptions) -> int:
    write_output(to_json(convert(source, parser_options=parser_options), indent=args.indent), args)
    return EXIT_SUCCESS


def _cmd_text(args: argparse.Namespace, source: str, *_: Any) -> int:
    write_output(extract_plain_text(source), args, is_json=False)
    return EXIT_SUCCESS


def _cmd_validate(args: argparse.Namespace, source: str, *_: Any) -> int:
    write_output(to_json(validate(source), indent=args.indent), args)
    return EXIT_SUCCESS


def _cmd_is_table(args: argparse.Namespace, source: str, *_: Any) -> int:
    write_output("true" if is_markdown_table(source) else "false", args, is_json=False)
    return EXIT_SUCCESS


def _cmd_append(args: argparse.Namespace, source: str, _: MarkdownParserOptions, edit_options: EditOptions) -> int:
    write_output(to_json(append(source, args.text, edit_options=edit_options), indent=args.indent), args)
    return EXIT_SUCCESS


def _cmd_replace(args: argparse.Namespace, source: str, _: MarkdownParserOptions, edit_options: EditOptions) -> int:
    result = replace(source, args.old, args.new, args.all_occurrences, edit_options=edit_options)
    write_output(to_json(result.tree, indent=args.indent), args)
    write_status(result.message)
    return EXIT_SUCCESS


def _cmd_delete(args: argparse.Namespace, source: str, _: MarkdownParserOptions, edit_options: EditOptions) -> int:
    result = delete_text(source, args.text, args.all_occurrences, edit_options=edit_options)
    write_output(to_json(result.tree, indent=args.indent), args)
    write_status(result.message)
    return EXIT_SUCCESS


COMMANDS: Dict[str, Callable[..., int]] = {
    "convert": _cmd_convert,
    "text": _cmd_text,
    "validate": _cmd_validate,
    "is-table": _cmd_is_table,
    "append": _cmd_append,
    "replace": _cmd_replace,
    "delete": _cmd_delete,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the notedoc command-line interface.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code: 0 on success, 1 on errors, 2 on usage errors

    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    try:
        config = load_cli_config(args.config)
    except NoteDocError as e:
        configure_logging(args.log_level or DEFAULT_LOG_LEVEL, log_file=args.log_file, trace_mode=args.trace)
        logger.error("%s", e)
        return EXIT_ERROR

    configure_logging(args.log_level or config.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        parser_options, edit_options = _resolve_options(args, config)
    except (TypeError, ValueError) as e:
        logger.error("Invalid option value: %s", e)
        return EXIT_USAGE

    try:
        source = _read_input(args.input)
    except OSError as e:
        logger.error("Cannot read input %s: %s", args.input, e)
        return EXIT_ERROR

    try:
        return COMMANDS[args.command](args, source, parser_options, edit_options)
    except NoteDocError as e:
        logger.error("%s", e)
        return EXIT_ERROR
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return EXIT_ERROR
