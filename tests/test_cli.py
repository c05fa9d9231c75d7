from unittest import mock

import pytest
from passlib.hash import sha512_crypt

from mysudo import cli

password = "password"


@pytest.fixture
def shadow_file(tmp_path, monkeypatch):
    stored_hash = sha512_crypt.using(rounds=5000).hash(password)
    path = tmp_path / "shadow"
    path.write_text(
        f"root:{stored_hash}:19000:0:99999:7:::\n"
        f"alice:{stored_hash}:19000:0:99999:7:::\n"
    )
    monkeypatch.setattr(cli, "SHADOW_PATH", str(path))
    return path


def test_usage(capsys):
    cli.usage()
    assert capsys.readouterr().out == (
        "usage: ./my_sudo -h\n"
        "usage: ./my_sudo [-ugEs] [command [args ...]]\n"
    )


def test_no_arguments():
    assert cli.main([]) == 84


def test_help(capsys):
    assert cli.main(["-h"]) == 0
    assert capsys.readouterr().out.startswith("usage: ./my_sudo -h\n")


def test_without_sudo_user(capsys, monkeypatch, shadow_file):
    monkeypatch.delenv("SUDO_USER", raising=False)
    assert cli.main(["ls"]) == 84
    assert "No user found\n" in capsys.readouterr().out


def test_unreadable_shadow(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "SHADOW_PATH", str(tmp_path / "missing"))
    monkeypatch.setenv("SUDO_USER", "root")
    assert cli.main(["ls"]) == 84


def test_root_runs_command(monkeypatch, shadow_file):
    monkeypatch.setenv("SUDO_USER", "root")
    with mock.patch("os.setuid"), mock.patch("os.setgid"), \
            mock.patch("os.execvp") as execvp, mock.patch("getpass.getpass") as prompt:
        assert cli.main(["ls", "-l"]) == 84
    execvp.assert_called_once_with("ls", ["ls", "-l"])
    assert prompt.call_count == 0


def test_user_with_right_password(capsys, monkeypatch, shadow_file):
    monkeypatch.setenv("SUDO_USER", "alice")
    with mock.patch("os.setuid"), mock.patch("os.setgid"), \
            mock.patch("os.execvp") as execvp, \
            mock.patch("getpass.getpass", return_value=password) as prompt:
        assert cli.main(["id"]) == 84
    execvp.assert_called_once_with("id", ["id"])
    assert prompt.call_count == 1
    out = capsys.readouterr().out
    assert "Sorry, Try again." not in out
    assert "incorrect password attempts" not in out


def test_user_with_wrong_password(capsys, monkeypatch, shadow_file):
    monkeypatch.setenv("SUDO_USER", "alice")
    with mock.patch("os.execvp") as execvp, \
            mock.patch("getpass.getpass", return_value="secret"):
        assert cli.main(["id"]) == 84
    assert execvp.call_count == 0
    assert "sudo: 3 incorrect password attempts\n" in capsys.readouterr().out


def test_unknown_user(monkeypatch, shadow_file):
    monkeypatch.setenv("SUDO_USER", "bob")
    with mock.patch("os.execvp") as execvp:
        assert cli.main(["id"]) == 84
    assert execvp.call_count == 0


def test_setuid_refused(capsys, monkeypatch, shadow_file):
    monkeypatch.setenv("SUDO_USER", "root")
    with mock.patch("os.setuid", side_effect=PermissionError(1, "Operation not permitted")):
        assert cli.main(["id"]) == 84
    assert "privilèges root" in capsys.readouterr().err