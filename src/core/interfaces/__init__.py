"""Contracts (Protocol) implemented by validators.

The CLI depends on these abstractions, not on concrete validator classes.
"""
