from healthboard.models.account import Account
from healthboard.models.base import Base
from healthboard.models.machine import Machine
from healthboard.models.message import SessionMessage
from healthboard.models.session import Session

__all__ = [
    "Account",
    "Base",
    "Machine",
    "Session",
    "SessionMessage",
]
