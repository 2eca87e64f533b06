"""Core infrastructure: logging, configuration, errors and numeric helpers."""
