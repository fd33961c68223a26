#!/usr/bin/env python3
"""
pgdock CLI - Main module entry point.

This allows running the CLI as: python -m pgdock
"""

def main():
    """Entry point for the pgdock CLI."""
    from pgdock.cli.main import app
    app()

if __name__ == "__main__":
    main()
