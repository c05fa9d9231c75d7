# mysudo

A small sudo-like command. It reads `/etc/shadow`, finds the invoking user
through the `SUDO_USER` environment variable, asks for that user's password
(up to three attempts) and, once it is accepted, switches to uid and gid 0
and runs the given command in place of itself.

The user `root` is never asked for a password.

## Installation

```
pip install .
```

Reading `/etc/shadow` and switching to uid 0 both need the process to hold
root privileges, so the command only does its job when started from an
already privileged context.

## Usage

```
my_sudo -h
my_sudo command [args ...]
```

`-h` as the first argument prints a short usage text and exits with status 0.
Any other arguments are taken as the command to run, word for word.

Example:

```
SUDO_USER=alice my_sudo ls /root
```

```
[my_sudo] password:
```

The password is read without echo. A wrong password prints
`Sorry, Try again.`; after three failures the command prints
`sudo: 3 incorrect password attempts` and exits with status 84.

Status 84 is also returned when:

- no arguments are given;
- the shadow file cannot be read (an error is written to standard error) or
  holds no accounts;
- `SUDO_USER` is not set (`No user found` is printed);
- the user has no entry in the shadow file (`User <name> not found in the list`
  is printed);
- switching to root or starting the command fails (the reason is written to
  standard error).

## Library use

- `mysudo.shadow`: `parse_shadow_line`, `parse_shadow` and `load_shadow` turn
  `user:hash:...` lines into `ShadowEntry` records (fields `user`, `hash`,
  `id`, `salt`). Lines with an empty or missing name or hash are skipped.
- `mysudo.password`: `who_use_it(env)` returns `SUDO_USER` from a mapping or
  `None`; `get_password()` reads a password from the terminal;
  `find_user(entries, user)` returns the matching entry or raises
  `UserNotFoundError`; `check_password(password, entry)` returns a bool;
  `verify_password(user, entries, read_password)` allows three attempts and
  raises `UserNotFoundError` or `AuthenticationError` on failure.
- `mysudo.sudoers`: `elevate_privileges(command)` calls setuid(0), setgid(0)
  and replaces the process with the command, raising `PrivilegeError` when
  any step fails (and `ValueError` for an empty command).
- `mysudo.cformat`: `format_message(fmt, *args)` and `print_message(fmt, *args)`
  are a small printf-style formatter supporting `c s d i u x X o p f e %`.
  `%X` prints lowercase digits, `%f`/`%e` print the fraction as an integer
  count of millionths without zero padding, and unknown flags print nothing.
- `mysudo.messages`: `one_argument()`, `bad_password()` and
  `three_bad_password()` print the standard usage and error texts.
- `mysudo.cli`: `usage()` and `main(argv=None)`, the entry point of `my_sudo`.

## What it does not do

- There is no sudoers policy: any user who authenticates may run any command
  as root.
- Options such as `-u`, `-g`, `-E` or `-s` are not interpreted; they are
  passed on as part of the command.
- Password hashes are checked with SHA-512, SHA-256, MD5 and DES crypt only.
  Entries stored with other schemes (for instance yescrypt) never match.