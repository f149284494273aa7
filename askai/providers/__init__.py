"""Concrete adapters for the interfaces in ``askai.interfaces``."""
