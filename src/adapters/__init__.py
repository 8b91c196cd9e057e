"""Adapters: manifest loading and report export."""
