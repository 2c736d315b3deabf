"""Grant services package."""

from .grant_parser import GrantParser, create_grant_parser

__all__ = ["GrantParser", "create_grant_parser"]
