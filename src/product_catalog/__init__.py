"""PRODUCT CATALOG

A small product catalog service. A `ProductService` forwards listing, lookup
and insertion of products to a pluggable repository backed by SQLAlchemy.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
