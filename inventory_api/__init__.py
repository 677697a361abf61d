"""Inventory API Package - product records over a JSON-file (or SQL) record store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
