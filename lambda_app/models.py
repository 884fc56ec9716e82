"""
Plain data records used as callable payloads.
"""

from dataclasses import dataclass

from .contracts import UserBuilder


@dataclass(frozen=True)
class User:
    """Minimal user record."""
    name: str


# Constructor reference: the class itself is the factory
user_builder: UserBuilder = User
