"""Tests for the CLI interface."""

import json

import pytest

from namematch.ui.cli import main, create_parser


def test_create_parser():
    """Test that the argument parser is created correctly."""
    parser = create_parser()

    assert parser is not None
    assert parser.prog == 'namematch'


def test_cli_no_arguments():
    """Test CLI with no arguments shows help."""
    assert main([]) == 0


def test_cli_standardize(capsys):
    exit_code = main(['standardize', 'sureesh kumar', 'rames sing'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'sureesh kumar -> Suresh Kumar' in captured.out
    assert 'rames sing -> Ramesh Singh' in captured.out


def test_cli_compare(capsys):
    exit_code = main(['compare', 'Sureesh', 'Suresh', '-a', 'phonetic'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'NAME COMPARISON' in captured.out
    assert '80%' in captured.out


def test_cli_add_and_search(tmp_path, capsys):
    """Test that an added record can be found by a misspelled query."""
    assert main(['--data-dir', str(tmp_path), 'add', 'Suresh Kumar', '--type', 'suspect',
                 '--case', 'CASE-2024-001']) == 0
    assert main(['--data-dir', str(tmp_path), 'add', 'Anjali Devi', '--type', 'witness']) == 0
    capsys.readouterr()

    exit_code = main(['--data-dir', str(tmp_path), 'search', 'Sureesh Kumar'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'Suresh Kumar' in captured.out
    assert 'CASE-2024-001' in captured.out
    assert 'Anjali Devi' not in captured.out


def test_cli_search_no_matches(tmp_path, capsys):
    exit_code = main(['--data-dir', str(tmp_path), 'search', 'Suresh'])

    assert exit_code == 0
    assert 'No matches' in capsys.readouterr().out


def test_cli_search_blank_query(tmp_path, capsys):
    exit_code = main(['--data-dir', str(tmp_path), 'search', '  '])

    assert exit_code == 1
    assert 'Error' in capsys.readouterr().err


def test_cli_search_malformed_record(tmp_path, capsys):
    (tmp_path / 'records.json').write_text(json.dumps([{'person_type': 'suspect'}]), encoding='utf-8')

    exit_code = main(['--data-dir', str(tmp_path), 'search', 'Suresh'])

    assert exit_code == 1
    assert 'Malformed record' in capsys.readouterr().err


def test_cli_setup_users(tmp_path, capsys):
    exit_code = main(['--data-dir', str(tmp_path), 'setup-users'])

    assert exit_code == 0
    assert (tmp_path / 'users.json').exists()
    assert 'admin / admin123' in capsys.readouterr().out
