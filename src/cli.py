#!/usr/bin/env python3
"""Main CLI entry point for the cricket analytics engine."""

from cricket_analytics.cli.main import app

if __name__ == '__main__':
    app()
