"""
Test the command-line interface.
"""

import logging
import os
import sys

import pytest

from objdb.cli import main
from objdb.logging_config import setup_logging

from object_records import TREE_OID


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_init(workdir, capsys):
    assert main(['init']) == 0

    out = capsys.readouterr().out
    assert 'Initialized empty objdb repository in' in out
    assert (workdir / '.objdb' / 'objects').is_dir()
    assert (workdir / '.objdb' / 'refs').is_dir()


def test_init_add_commit(workdir, capsys):
    assert main(['init']) == 0
    (workdir / 'hello.txt').write_bytes(b"hello\n")
    capsys.readouterr()

    assert main(['commit']) == 0

    assert capsys.readouterr().out.strip() == TREE_OID


def test_commit_without_init_fails(workdir, capsys):
    assert main(['--log-level', 'error', 'commit']) == 1

    assert 'Not an objdb repository' in capsys.readouterr().err
    assert not (workdir / '.objdb').exists()


def test_no_command(workdir, capsys):
    assert main([]) == 1

    assert 'please pass a command' in capsys.readouterr().err


def test_unknown_command(workdir):
    with pytest.raises(SystemExit) as exc_info:
        main(['checkout'])

    assert exc_info.value.code == 2


@pytest.mark.skipif(sys.platform != 'linux', reason='needs arbitrary bytes in file names')
def test_commit_undecodable_file_name(workdir, capsys):
    assert main(['init']) == 0
    (workdir / os.fsdecode(b"caf\xe9.txt")).write_bytes(b"x")
    capsys.readouterr()

    assert main(['commit']) == 0

    assert len(capsys.readouterr().out.strip()) == 40


def test_invalid_configuration(workdir, capsys, monkeypatch):
    monkeypatch.setenv('OBJDB_COMPRESSION_LEVEL', '12')

    assert main(['init']) == 1

    assert 'invalid configuration' in capsys.readouterr().err
    assert not (workdir / '.objdb').exists()


def test_log_level_from_settings(workdir, monkeypatch):
    monkeypatch.setenv('OBJDB_LOG_LEVEL', 'debug')

    assert main(['init']) == 0

    assert logging.getLogger().level == logging.DEBUG


def test_log_level_flag_wins(workdir, monkeypatch):
    monkeypatch.setenv('OBJDB_LOG_LEVEL', 'debug')

    assert main(['--log-level', 'warning', 'init']) == 0

    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_uses_given_level(monkeypatch):
    monkeypatch.setenv('OBJDB_LOG_LEVEL', 'error')

    setup_logging('info')

    assert logging.getLogger().level == logging.INFO
