"""Shared type aliases used across pathmatch modules."""

from typing import TypeAlias

# Variable name -> captured value
Captures: TypeAlias = dict[str, str]
