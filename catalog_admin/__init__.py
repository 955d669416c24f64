"""Catalog admin data-access layer: categories, carriers and products."""

from .container import Container

__all__ = ["Container"]
