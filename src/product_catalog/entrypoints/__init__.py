"""Entry points for the product catalog (command-line interface)."""
