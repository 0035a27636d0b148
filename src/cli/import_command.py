"""Import command wiring for Resmap CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.errors import ResmapError
from core.types import ImportOptions
from store.load_sdk import ResmapClient


def add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser(
        "import",
        help="Import a PDB-UniProt residue mapping file",
    )
    parser.add_argument("mapping_file", help="Tab-separated PDB-UniProt residue mapping file")
    parser.add_argument("--load-name", default="pdb-uniprot", help="Load id prefix")
    parser.add_argument(
        "--batch-size",
        type=int,
        help="Rows per bulk commit, overrides RESMAP_BATCH_SIZE",
    )
    parser.add_argument(
        "--lance",
        action="store_true",
        help="Export committed tables to Lance datasets after import",
    )


def run_import_command(client: ResmapClient, args: argparse.Namespace) -> int:
    """Execute a mapping import and print the load summary."""
    options = ImportOptions(
        source_path=args.mapping_file,
        load_name=args.load_name,
        batch_size=args.batch_size,
        export_lance=args.lance,
    )
    try:
        manifest = client.import_file(options)
    except ResmapError as error:
        print(f"import_error={error}")
        return 1
    print(manifest.load_id)
    print(f"alignments={manifest.alignment_count}")
    print(f"residue_mappings={manifest.residue_count}")
    return 0
