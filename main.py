#!/usr/bin/env python3
"""
Zera Block Relay

Fetches the block at BLOCK_HEIGHT from the Zera indexer and broadcasts it to
the validator at GRPC_ADDRESS:GRPC_PORT.

Usage:
    BLOCK_HEIGHT=2763 INDEXER_AUTH=... GRPC_ADDRESS=10.0.0.5 python main.py
"""

from blockrelay.cli import run_relay

if __name__ == "__main__":
    run_relay()
