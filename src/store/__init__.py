"""Bulk load storage layer.

This module stages parsed alignment and residue rows into batched,
committed table files and keeps a catalog of finished loads.
"""
