"""PDB-UniProt residue mapping ingestion.

This module reads alignment headers and residue rows from mapping files.
It stages typed rows into a bulk sink for the store layer.
"""
