"""
Portfolio page composition root.

- content: static text and links shown on the page
- controller: `PortfolioPage`, which owns and wires every state container
- handler: headless entry point that boots the page from the environment
"""

from .controller import EXPERIENCES_PATH, PROJECTS_PATH, PortfolioPage

__all__ = ["EXPERIENCES_PATH", "PROJECTS_PATH", "PortfolioPage"]
