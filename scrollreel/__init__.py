"""Deterministic timeline engine for scrolling-text videos."""
