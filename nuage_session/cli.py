"""
Command-line interface for the Nuage REST session layer.

Provides argument parsing and main execution flow.
"""

import argparse
import getpass
import json
import sys

from nuage_session.config import (
    DEFAULT_API_PREFIX,
    DEFAULT_API_VERSION,
    DEFAULT_CERT,
    DEFAULT_KEY,
    DEFAULT_ORGANIZATION,
    DEFAULT_PASSWORD,
    DEFAULT_URL,
    DEFAULT_USER,
    build_api_url,
)
from nuage_session.errors import SessionError
from nuage_session.events import EventListener
from nuage_session.logging_setup import log, setup_logging
from nuage_session.models import Children, FetchingInfo, RootObject, resource_class
from nuage_session.session import Session


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Talk to a Nuage controller REST API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Credentials can also be provided via the NUAGE_URL, NUAGE_USERNAME,\n"
            "NUAGE_PASSWORD, NUAGE_ORGANIZATION, NUAGE_CERT and NUAGE_KEY env vars."
        ),
    )
    parser.add_argument(
        "--url", default=DEFAULT_URL,
        help="Full API base URL, e.g. https://vsd:8443/nuage/api/v6",
    )
    parser.add_argument(
        "--endpoint", default="",
        help="Controller endpoint (https://host:port); used when --url is not given",
    )
    parser.add_argument(
        "--prefix", default=DEFAULT_API_PREFIX,
        help=f"API prefix (default: {DEFAULT_API_PREFIX})",
    )
    parser.add_argument(
        "--version", default=DEFAULT_API_VERSION,
        help=f"API version (default: {DEFAULT_API_VERSION})",
    )
    parser.add_argument(
        "--user", default=DEFAULT_USER,
        help=f"Username (default: {DEFAULT_USER})",
    )
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Password (overrides NUAGE_PASSWORD env var)",
    )
    parser.add_argument(
        "--organization", default=DEFAULT_ORGANIZATION,
        help=f"Organization / enterprise (default: {DEFAULT_ORGANIZATION})",
    )
    parser.add_argument(
        "--cert", default=DEFAULT_CERT,
        help="Client certificate (PEM); switches to certificate authentication",
    )
    parser.add_argument(
        "--key", default=DEFAULT_KEY,
        help="Private key for --cert when it is not bundled in the same file",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("whoami", help="Authenticate and print the root object")

    list_cmd = commands.add_parser("list", help="List the children of the root object")
    list_cmd.add_argument("category", help="REST category, e.g. enterprises")
    list_cmd.add_argument("--filter", default="")
    list_cmd.add_argument("--order-by", default="")
    list_cmd.add_argument("--page", type=int, default=-1)
    list_cmd.add_argument("--page-size", type=int, default=0)

    events_cmd = commands.add_parser("events", help="Print push notifications as they arrive")
    events_cmd.add_argument(
        "--count", type=int, default=0,
        help="Stop after this many notifications (default: run until interrupted)",
    )

    args = parser.parse_args(argv)
    if not args.url:
        if not args.endpoint:
            parser.error("either --url or --endpoint is required")
        args.url = build_api_url(args.endpoint, args.prefix, args.version)
    return args


def build_session(args: argparse.Namespace) -> Session:
    root = RootObject()
    if args.cert:
        cert = (args.cert, args.key) if args.key else args.cert
        return Session.from_certificate(cert, args.url, root, verify_ssl=args.verify_ssl)
    if not args.password:
        args.password = getpass.getpass("Password: ")
    return Session(
        args.user, args.password, args.organization, args.url, root,
        verify_ssl=args.verify_ssl,
    )


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, sort_keys=True))


def run(session: Session, args: argparse.Namespace) -> None:
    if args.command == "whoami":
        root = session.root.to_dict()
        root.pop("APIKey", None)
        _print_json(root)

    elif args.command == "list":
        info = FetchingInfo(
            filter=args.filter, order_by=args.order_by,
            page=args.page, page_size=args.page_size,
        )
        children = Children(resource_class(args.category))
        session.fetch_children(session.root, children.identity, children, info)
        _print_json([child.to_dict() for child in children])
        log.info("%d of %d %s (page %d)", len(children), info.total_count, args.category, info.page)

    elif args.command == "events":
        # foreground polling; errors end the command
        listener = EventListener(session)
        received = 0
        while not args.count or received < args.count:
            listener.poll_once()
            while not listener.channel.empty():
                notification = listener.channel.get_nowait()
                for event in notification.events:
                    _print_json(event)
                received += 1


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for the CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug, verify_ssl=args.verify_ssl)

    session = build_session(args)
    try:
        with session:
            run(session, args)
    except SessionError as exc:
        log.error("%s", json.dumps(exc.to_dict()))
        sys.exit(1)
    except KeyboardInterrupt:
        log.info("Interrupted")


if __name__ == "__main__":
    main()
