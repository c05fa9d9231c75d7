"""Standard messages printed on usage and authentication errors."""

from __future__ import annotations

from .cformat import print_message

_ONE_ARGUMENT_LINES = (
    "usage: sudo -h | -K | -k | -V\n",
    "usage: sudo -v [-ABkNnS] [-g group] ",
    "[-h host] [-p prompt] [-u user]\n",
    "usage: sudo -l [-ABkNnS] [-g group] ",
    "[-h host] [-p prompt] [-U user]\n",
    "            [-u user] [command [arg ...]]\n",
    "usage: sudo [-ABbEHkNnPS] [-r role] ",
    "[-t type] [-C num] [-D directory]\n",
    "            [-g group] [-h host] [-",
    "p prompt] [-R directory] [-T timeout]\n",
    "            [-u user] [VAR=value] [",
    "-i | -s] [command [arg ...]]\n",
    "usage: sudo -e [-ABkNnS] [-r role] ",
    "[-t type] [-C num] [-D directory]\n",
    "            [-g group] [-h host] [",
    "-p prompt] [-R directory] [-T timeout]\n",
    "            [-u user] file ...\n",
)


def one_argument() -> None:
    """Print the full usage summary."""
    for line in _ONE_ARGUMENT_LINES:
        print_message(line)


def bad_password() -> None:
    """Print the message for a single failed password attempt."""
    print_message("Sorry, try again.\n")


def three_bad_password() -> None:
    """Print the message shown after three failed attempts."""
    print_message("sudo: 3 incorrect password attempts\n")