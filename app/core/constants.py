"""
Core constants used across the application. Keep these simple and documented.
"""

from typing import Final

CERTIFICATE_ID_PREFIX: Final[str] = "ASC-"
CERTIFICATE_ID_LENGTH: Final[int] = 8
# nanoid-style ids, upper-cased
CERTIFICATE_ID_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

DEFAULT_SESSION_NAME: Final[str] = "Anonymous"
DEFAULT_CERTIFICATE_NAME: Final[str] = "Certificate User"

OPTIONS_PER_QUESTION: Final[int] = 4
OPTION_IDS: Final[tuple[str, ...]] = ("a", "b", "c", "d")
