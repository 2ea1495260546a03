from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dualstore.app import organization_unit_service
from dualstore.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from dualstore.domain import OrganizationUnitPage, OrganizationUnitService
    from dualstore.domain.model import OrganizationUnit

log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 30


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help="Number of organization units to return (default: %(default)s)",
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Number of organization units to skip (default: %(default)s)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage dualstore resources")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ou = subparsers.add_parser("ou", help="Organization unit commands")
    ou_sub = ou.add_subparsers(dest="ou_command", required=True)

    ou_list = ou_sub.add_parser("list", help="List root organization units")
    _add_paging(ou_list)

    ou_children = ou_sub.add_parser("children", help="List child organization units")
    ou_children.add_argument("id", help="Parent organization unit id")
    _add_paging(ou_children)

    ou_get = ou_sub.add_parser("get", help="Show an organization unit")
    ou_get.add_argument("id", nargs="?", help="Organization unit id")
    ou_get.add_argument("--path", type=str, help="Slash-separated handle path instead of an id")

    ou_sub.add_parser("count", help="Count root organization units")

    ou_create = ou_sub.add_parser("create", help="Create an organization unit")
    ou_create.add_argument("--handle", type=str, required=True, help="Unique handle")
    ou_create.add_argument("--name", type=str, required=True, help="Display name")
    ou_create.add_argument("--description", type=str, help="Optional description")
    ou_create.add_argument("--parent", type=str, help="Optional parent organization unit id")

    ou_delete = ou_sub.add_parser("delete", help="Delete an organization unit")
    ou_delete.add_argument("id", help="Organization unit id")

    args = parser.parse_args(list(argv))
    if args.ou_command == "get" and (args.id is None) == (args.path is None):
        raise ValueError("Provide exactly one of an id or --path")
    if getattr(args, "limit", 0) < 0 or getattr(args, "offset", 0) < 0:
        raise ValueError("--limit and --offset must be non-negative")
    return args


def _log_unit(ou: OrganizationUnit, *, read_only: bool) -> None:
    log.info(
        "%s handle=%s name=%s parent=%s read_only=%s",
        ou.id,
        ou.handle,
        ou.name,
        ou.parent,
        read_only,
    )


def _log_page(page: OrganizationUnitPage) -> None:
    log.info(
        "Showing %s of %s organization units (offset %s)",
        page.count,
        page.total_results,
        page.offset,
    )
    for item in page.items:
        log.info(
            "%s handle=%s name=%s read_only=%s",
            item.id,
            item.handle,
            item.name,
            item.is_read_only,
        )


def _run(args: argparse.Namespace, service: OrganizationUnitService) -> None:
    command = args.ou_command
    if command == "list":
        _log_page(service.list_organization_units(limit=args.limit, offset=args.offset))
    elif command == "children":
        _log_page(service.list_children(args.id, limit=args.limit, offset=args.offset))
    elif command == "get":
        if args.path is not None:
            ou = service.get_by_path(args.path)
        else:
            ou = service.get_organization_unit(args.id)
        _log_unit(ou, read_only=service.is_declarative(ou.id))
    elif command == "count":
        log.info("Root organization units: %s", service.count_organization_units())
    elif command == "create":
        ou = service.create_organization_unit(
            handle=args.handle,
            name=args.name,
            description=args.description,
            parent=args.parent,
        )
        log.info("Created organization unit %s", ou.id)
    elif command == "delete":
        service.delete_organization_unit(args.id)
    else:
        raise ValueError(f"Unsupported command: {command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        with organization_unit_service() as service:
            _run(parsed_args, service)
    except ValueError:
        log.exception("Invalid request for %s %s", parsed_args.command, parsed_args.ou_command)
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during %s %s", parsed_args.command, parsed_args.ou_command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
