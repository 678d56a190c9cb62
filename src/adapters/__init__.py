"""Adapters package: CLI entry points and client payloads."""
