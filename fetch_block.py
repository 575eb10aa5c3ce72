#!/usr/bin/env python3
"""
Fetch a single block from the Zera indexer and print it.

Diagnostic companion to main.py: decodes the block exactly as the relay
would, but never contacts a validator.

Usage:
    python fetch_block.py [HEIGHT]      # defaults to BLOCK_HEIGHT
"""

from blockrelay.cli import run_fetch

if __name__ == "__main__":
    run_fetch()
