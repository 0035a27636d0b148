"""Resmap CLI entry points.
This module exposes commands for mapping imports and load inspection.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.import_command import add_import_command, run_import_command
from core.config import ResmapConfig
from store.load_sdk import ResmapClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="resmap", description="PDB-UniProt residue mapping importer"
    )
    parser.add_argument("--data-root", help="Override RESMAP_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_import_command(subparsers)
    _add_loads_command(subparsers)
    _add_show_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Resmap CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args.data_root)
    if args.command == "import":
        return run_import_command(client, args)
    if args.command == "loads":
        return _run_loads_command(client)
    if args.command == "show":
        return _run_show_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None) -> ResmapClient:
    """Build SDK client with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = ResmapConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return ResmapClient(config)


def _run_loads_command(client: ResmapClient) -> int:
    """Handle loads command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    for manifest in client.list_loads():
        print(
            f"{manifest.load_id}\t"
            f"{manifest.alignment_count}\t"
            f"{manifest.residue_count}\t"
            f"{manifest.created_at.isoformat()}\t"
            f"{manifest.source_path}"
        )
    return 0


def _run_show_command(client: ResmapClient, args: argparse.Namespace) -> int:
    """Handle show command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    load = client.load(args.load_id)
    print(f"load_id={load.load_id}")
    print(f"source_path={load.manifest.source_path}")
    print(f"alignments={len(load.alignments())}")
    print(f"residue_mappings={len(load.residue_mappings())}")
    return 0


def _add_loads_command(subparsers: Any) -> None:
    """Register loads subcommand."""
    subparsers.add_parser("loads", help="List finished loads")


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Summarize one finished load")
    parser.add_argument("load_id", nargs="?", help="Load id, latest when omitted")
