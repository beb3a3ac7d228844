"""Puts the demo's ``game`` and ``ui`` packages on the import path for its tests."""
