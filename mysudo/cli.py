"""Command-line entry point."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from .cformat import print_message
from .password import AuthenticationError, UserNotFoundError, verify_password, who_use_it
from .shadow import SHADOW_PATH, load_shadow
from .sudoers import PrivilegeError, elevate_privileges

EXIT_FAILURE = 84


def usage() -> None:
    """Print the short usage text."""
    print_message("usage: ./my_sudo -h\n")
    print_message("usage: ./my_sudo [-ugEs] [command [args ...]]\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Authenticate the calling user and run the given command as root."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return EXIT_FAILURE
    if args[0] == "-h":
        usage()
        return 0
    try:
        entries = load_shadow(SHADOW_PATH)
    except OSError as exc:
        print(f"Erreur : Impossible d'ouvrir {SHADOW_PATH}: {exc.strerror}", file=sys.stderr)
        entries = []
    current_user = who_use_it(os.environ)
    if not entries or not current_user:
        return EXIT_FAILURE
    try:
        verify_password(current_user, entries)
    except (UserNotFoundError, AuthenticationError):
        return EXIT_FAILURE
    try:
        elevate_privileges(args)
    except PrivilegeError as exc:
        cause = exc.__cause__
        detail = f": {cause.strerror}" if isinstance(cause, OSError) and cause.strerror else ""
        print(f"{exc}{detail}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())