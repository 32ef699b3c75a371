"""
Resolvers for fields that need no context: arithmetic and greetings
"""

from ...logging import get_logger

logger = get_logger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

HELLO_MESSAGE = "Hello, World!"


def resolve_add(a: int, b: int) -> int:
    """Add two 32-bit integers, raising instead of wrapping on overflow."""
    total = a + b
    if not INT32_MIN <= total <= INT32_MAX:
        logger.info("Integer overflow in add", a=a, b=b)
        raise ValueError(f"add({a}, {b}) overflows a 32-bit signed integer")
    return total


def resolve_hello() -> str:
    return HELLO_MESSAGE
