"""Concrete adapters implementing the product catalog interfaces."""
