from .backend import InMemoryBackend, SessionBackend
from .dynamodb import DynamoDBSessionBackend
from .middleware import COOKIE_NAME, SessionMiddleware

__all__ = [
    "SessionBackend",
    "InMemoryBackend",
    "DynamoDBSessionBackend",
    "SessionMiddleware",
    "COOKIE_NAME",
]
