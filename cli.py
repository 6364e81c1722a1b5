#!/usr/bin/env python3
"""
Command-line interface for the customer list API.

Usage:
    uv run python cli.py [command] [options]

Commands:
    serve       Start the API server
    list        Print the stored customers
    test        Run the test suite

Examples:
    uv run python cli.py serve --reload
    uv run python cli.py list --storage-file data/customers.json
    uv run python cli.py test -v
"""

import argparse
import subprocess
from pathlib import Path
from typing import Optional

from customers.config import get_settings


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = ["uv", "run", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def run_list(storage_file: Optional[Path]) -> None:
    """Print every stored customer in sort order."""
    from customers.data_store import CustomerStore

    store = CustomerStore(storage_file or get_settings().storage_file)
    customers = store.get_customers()
    if not customers:
        print(f"No customers in {store.storage_file}")
        return

    print(f"{'ID':>6}  {'Last name':<20} {'First name':<20} {'Age':>4}")
    for c in customers:
        print(f"{c.id:>6}  {c.last_name or '':<20} {c.first_name or '':<20} {c.age:>4}")
    print(f"\n{len(customers)} customer(s)")


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def main() -> None:
    """Main CLI entry point."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Customer List API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s serve --reload
  %(prog)s list
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=settings.host, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    # List command
    list_parser = subparsers.add_parser("list", help="Print the stored customers")
    list_parser.add_argument("--storage-file", type=Path, default=None, help="JSON file to read")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    args = parser.parse_args()

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "list":
        run_list(args.storage_file)
    elif args.command == "test":
        run_tests(args.pytest_args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
