"""Identification of the calling user and password verification."""

from __future__ import annotations

import getpass
from typing import Callable, Iterable, Mapping, Optional

from passlib.context import CryptContext
from passlib.exc import MissingBackendError

from .messages import three_bad_password
from .shadow import ShadowEntry

PROMPT = "[my_sudo] password: "
MAX_ATTEMPTS = 3
_MAX_PASSWORD_LENGTH = 255

_CRYPT = CryptContext(schemes=["sha512_crypt", "sha256_crypt", "md5_crypt", "des_crypt"])


class UserNotFoundError(LookupError):
    """The user has no entry in the shadow database."""


class AuthenticationError(Exception):
    """Every password attempt was rejected."""


def who_use_it(env: Mapping[str, str]) -> Optional[str]:
    """Return the user named by ``SUDO_USER`` in ``env``, or ``None``."""
    user = env.get("SUDO_USER")
    if user is None:
        print("No user found")
    return user


def get_password(prompt: str = PROMPT) -> str:
    """Read a password from the terminal without echoing it."""
    try:
        entered = getpass.getpass(prompt)
    except EOFError:
        entered = ""
    return entered.rstrip("\n")[:_MAX_PASSWORD_LENGTH]


def find_user(entries: Iterable[ShadowEntry], user: str) -> ShadowEntry:
    """Return the entry for ``user``; raise ``UserNotFoundError`` if there is none."""
    for entry in entries:
        if entry.user == user:
            return entry
    print(f"User {user} not found in the list")
    raise UserNotFoundError(user)


def check_password(password: str, entry: ShadowEntry) -> bool:
    """Tell whether ``password`` matches the hash stored in ``entry``."""
    try:
        return bool(_CRYPT.verify(password, entry.hash))
    except (ValueError, TypeError, MissingBackendError):
        return False


def verify_password(
    user: str,
    entries: Iterable[ShadowEntry],
    read_password: Callable[[], str] = get_password,
) -> None:
    """Authenticate ``user``, allowing three attempts.

    ``root`` is accepted without a prompt.  Raises ``UserNotFoundError`` if the
    user is unknown and ``AuthenticationError`` after three wrong passwords.
    """
    entry: Optional[ShadowEntry]
    try:
        entry = find_user(entries, user)
    except UserNotFoundError:
        entry = None
    if user == "root":
        return
    if entry is None:
        raise UserNotFoundError(user)
    for _ in range(MAX_ATTEMPTS):
        if check_password(read_password(), entry):
            return
        print("Sorry, Try again.")
    three_bad_password()
    raise AuthenticationError(user)