from __future__ import annotations

import secrets
from collections.abc import Callable

# (locker_id, now) -> code
CodeFactory = Callable[[str, int], str]


def default_code_factory(locker_id: str, now: int) -> str:
    """
    `<locker_id>-<now mod 10000, 4 digits>-<8 random hex chars>`.

    The random part keeps two deposits of the same locker within the same
    clock tick from colliding.
    """
    return f"{locker_id}-{now % 10000:04d}-{secrets.token_hex(4)}"
