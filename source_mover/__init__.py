"""Copybara source mover: console and GitHub API helpers."""

__version__ = "0.1.0"
