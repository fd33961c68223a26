"""
pgdock - Developer helpers for running PostgreSQL locally under Docker Compose.

Checks that Docker is installed and running, and verifies that the
compose-managed PostgreSQL container accepts connections.
"""

__version__ = "1.0.0"
__author__ = "pgdock Team"
