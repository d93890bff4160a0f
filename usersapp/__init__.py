"""usersapp

메모리 내 사용자 목록(name, age)을 관리하는 대화형 CLI입니다.

Usage:
    from usersapp import UsersData, User

    users = UsersData()
    users.add(User(name="Anna", age=30))
    users.edit("Anna", {"age": 31})
"""

from .store import UsersData
from .types import (
    InvalidSeverity,
    NotFoundError,
    StoreResult,
    UnrecognizedCommand,
    User,
    UsersAppError,
    ValidationError,
)

__all__ = [
    "UsersData",
    "User",
    "StoreResult",
    "UsersAppError",
    "ValidationError",
    "NotFoundError",
    "UnrecognizedCommand",
    "InvalidSeverity",
]
