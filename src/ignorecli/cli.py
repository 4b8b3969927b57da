"""CLI for adding ignore files to a project.

This module provides command-line interface for:
- Downloading a .gitignore or .dockerignore template
- Listing available templates
- Searching templates by name or description
"""

import argparse
import logging
import sys
from pathlib import Path

from ignorecli import __version__
from ignorecli.core.errors import InvalidServiceError
from ignorecli.core.paths import file_exists, resolve_output_path
from ignorecli.core.types import DownloadConfig, Service, Template
from ignorecli.functions import download_ignore_file, find_template, search_templates
from ignorecli.templates.catalog import CATALOG

NAME_WIDTH = 20


def confirm(message: str) -> bool:
    """Ask the user a yes/no question.

    Args:
        message: Prompt to display.

    Returns:
        True if the user answered y or yes.
    """
    try:
        answer = input(message).strip().lower()
    except (KeyboardInterrupt, EOFError):
        print()
        return False
    return answer in ("y", "yes")


def format_template(template: Template) -> str:
    """Format a template as a single listing line."""
    return f"  • {template.name.ljust(NAME_WIDTH)} {template.description or ''}".rstrip()


def cmd_add(args: argparse.Namespace) -> int:
    """Add command handler.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code.
    """
    try:
        service = Service.parse(args.service)
    except InvalidServiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    template = find_template(args.language)
    if template is None:
        print(f'Error: Unknown template "{args.language}".', file=sys.stderr)
        print('Use "ignore list" to see available templates.', file=sys.stderr)
        return 1

    force = args.force
    output_path = resolve_output_path(args.out, service)
    if file_exists(output_path) and not force:
        if not confirm(f"File {output_path} already exists. Overwrite? [y/N] "):
            print("Operation cancelled.")
            return 0
        force = True

    print(f"Downloading {service.output_filename} for {template.name}...")

    result = download_ignore_file(
        DownloadConfig(
            language=template.name,
            service=service,
            output_dir=Path(args.out),
            force=force,
        )
    )

    if not result.success:
        print(result.message, file=sys.stderr)
        return 1

    print(result.message)
    if result.file_path:
        print(f"  -> {result.file_path}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List command handler.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code.
    """
    print("Available Templates")
    for category, templates in CATALOG.categories().items():
        print()
        print(f"{category}:")
        for template in templates:
            print(format_template(template))

    print()
    print(f"Total: {len(CATALOG.list_all())} templates available")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Search command handler.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code.
    """
    results = search_templates(args.query)

    if not results:
        print(f'No templates found matching "{args.query}"')
        return 0

    print(f'Search results for "{args.query}":')
    print()
    for template in results:
        print(format_template(template))
    print()
    print(f"Found: {len(results)} template(s)")
    return 0


def _add_download_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("language", help="Template name (e.g. Python, Node)")
    parser.add_argument(
        "--service",
        "-s",
        default=Service.GIT.value,
        help="Service type: git or docker (default: git)",
    )
    parser.add_argument(
        "--out",
        "-o",
        default=str(Path.cwd()),
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite existing file without prompting",
    )
    parser.set_defaults(func=cmd_add)


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="ignore",
        description="A fast CLI tool for adding .ignore files to your project",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        dest="command", metavar="{add,list,search}", help="Available commands"
    )

    # add command
    add_parser = subparsers.add_parser(
        "add", help="Download and add an ignore file template"
    )
    _add_download_arguments(add_parser)

    # get is kept as an undocumented alias of add
    get_parser = subparsers.add_parser("get")
    _add_download_arguments(get_parser)

    # list command
    list_parser = subparsers.add_parser(
        "list", aliases=["ls"], help="List all available templates"
    )
    list_parser.set_defaults(func=cmd_list)

    # search command
    search_parser = subparsers.add_parser(
        "search",
        aliases=["find"],
        help="Search for templates by name or description",
    )
    search_parser.add_argument("query", help="Text to search for")
    search_parser.set_defaults(func=cmd_search)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse. Uses sys.argv if None.

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        print()
        print("Quick start:")
        print("  ignore add python               # Add a Python .gitignore")
        print("  ignore add node -s docker       # Add a Node .dockerignore")
        print("  ignore add go -o ./proj --force # Overwrite ./proj/.gitignore")
        print("  ignore list                     # List all templates")
        print("  ignore search editor            # Search templates")
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
