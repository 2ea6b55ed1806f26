"""Ports (abstract interfaces) used by the service layer."""
