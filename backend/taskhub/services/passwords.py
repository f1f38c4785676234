"""
TaskHub Backend: Password Hashing
====================================

What:  bcrypt hashing and verification for user credentials.
How:   bcrypt is CPU-bound (~100ms at cost 10), so both calls run in the
       threadpool to keep the event loop serving other requests.

bcrypt only reads the first 72 bytes of a password; longer passwords are
truncated explicitly so every bcrypt release treats them the same way.
Hashes written by other bcrypt implementations ($2a$, $2b$, $2y$) verify.
"""

from typing import Optional

import bcrypt
from starlette.concurrency import run_in_threadpool

from taskhub.config import settings

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _hash(password: str, rounds: int) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def _verify(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


async def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Salted bcrypt hash of `password` with the configured cost factor."""
    return await run_in_threadpool(_hash, password, rounds or settings.bcrypt_rounds)


async def verify_password(password: str, password_hash: str) -> bool:
    """True when `password` matches the stored bcrypt hash."""
    return await run_in_threadpool(_verify, password, password_hash)
