from .flush_agent import FlushAgent
from .package import Package
from .path import Path
from .repository import Repository
from .user import User

__all__ = [
    "FlushAgent",
    "Package",
    "Path",
    "Repository",
    "User",
]
