"""Product catalog command-line interface."""
