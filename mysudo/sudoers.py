"""Running a command with root privileges."""

from __future__ import annotations

import os
from typing import NoReturn, Sequence


class PrivilegeError(OSError):
    """Root privileges could not be obtained or the command could not start."""


def elevate_privileges(command: Sequence[str]) -> NoReturn:
    """Switch to uid and gid 0 and replace this process with ``command``."""
    if not command:
        raise ValueError("no command given")
    try:
        os.setuid(0)
    except OSError as exc:
        raise PrivilegeError("Erreur : impossible d'obtenir les privilèges root") from exc
    try:
        os.setgid(0)
    except OSError as exc:
        raise PrivilegeError("Erreur : impossible de changer de groupe") from exc
    arguments = list(command)
    try:
        os.execvp(arguments[0], arguments)
    except OSError as exc:
        raise PrivilegeError("Erreur lors de l'exécution de la commande") from exc
    raise PrivilegeError("Erreur lors de l'exécution de la commande")