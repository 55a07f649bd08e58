"""
Technology menus for the PRD wizard.

Each menu is a fixed four-entry table mapping a single-digit selection to the
label written into the document. Unrecognized selections resolve to the
menu's default member rather than raising.
"""

from enum import Enum
from typing import List, Type, TypeVar


C = TypeVar("C", bound="MenuChoice")


class MenuChoice(Enum):
    """
    Base class for numbered technology menus.

    Members are declared as ``(code, description, label)`` tuples where
    ``code`` is what the operator types, ``description`` is shown in the
    menu and ``label`` is substituted into the document.
    """

    def __init__(self, code: str, description: str, label: str):
        self.code = code
        self.description = description
        self.label = label

    @classmethod
    def default(cls: Type[C]) -> C:
        """Member used when the selection is not recognized (code "1")."""
        return cls.from_code("1")

    @classmethod
    def from_code(cls: Type[C], code: str) -> C:
        """Look up a member by its exact menu code."""
        for member in cls:
            if member.code == code:
                return member
        raise KeyError(code)

    @classmethod
    def resolve(cls: Type[C], raw: str) -> C:
        """
        Resolve an operator selection.

        Args:
            raw: Text entered at the menu prompt, nominally "1" to "4"

        Returns:
            The matching member, or the default member for any other input
            (empty string, out-of-range digits, non-numeric text)
        """
        for member in cls:
            if member.code == raw:
                return member
        return cls.default()

    @classmethod
    def menu_lines(cls) -> List[str]:
        """Numbered menu lines, e.g. ``1. PostgreSQL (...)``."""
        return [f"{member.code}. {member.description}" for member in cls]


class DatabaseChoice(MenuChoice):
    """Storage technology menu."""
    POSTGRESQL = ("1", "PostgreSQL (recommended for complex data)", "PostgreSQL with Prisma")
    MONGODB = ("2", "MongoDB (good for flexible schemas)", "MongoDB with Mongoose")
    SQLITE = ("3", "SQLite (simple, file-based)", "SQLite with Prisma")
    MYSQL = ("4", "MySQL (traditional relational)", "MySQL with Prisma")


class AuthChoice(MenuChoice):
    """Identity verification menu."""
    NEXTAUTH = ("1", "NextAuth.js (recommended)", "NextAuth.js")
    CLERK = ("2", "Clerk", "Clerk")
    AUTH0 = ("3", "Auth0", "Auth0")
    SUPABASE = ("4", "Supabase Auth", "Supabase Auth")


def resolve_choice(choice_cls: Type[MenuChoice], raw: str) -> str:
    """Return the document label for a raw menu selection."""
    return choice_cls.resolve(raw).label
