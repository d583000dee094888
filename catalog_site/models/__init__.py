"""
Data models for the catalog.

This module contains pure data classes with no business logic.
"""

from .product import Gallery, Product

__all__ = ['Product', 'Gallery']
