"""Harvest UI component markup from a component library site."""

__version__ = "0.1.0"
