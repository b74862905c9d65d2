"""
Command-line tools — output format and exit codes
=================================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
import caesar
import caesar_encode
import vigenere
from cipher_cli import guard


def run_main(module, argv):
    with pytest.raises(SystemExit) as exc:
        module.main(argv)
    return exc.value.code

# ── caesar ───────────────────────────────────────────────────────────────────
def test_caesar_encrypt_default(capsys):
    assert run_main(caesar, ["HELLO", "3"]) == 0
    assert capsys.readouterr().out == "KHOOR\n"

def test_caesar_explicit_encrypt(capsys):
    assert run_main(caesar, ["-e", "hello", "3"]) == 0
    assert capsys.readouterr().out == "KHOOR\n"

def test_caesar_decrypt(capsys):
    assert run_main(caesar, ["-d", "KHOOR", "3"]) == 0
    assert capsys.readouterr().out == "HELLO\n"

def test_caesar_negative_key(capsys):
    assert run_main(caesar, ["HELLO", "-3"]) == 0
    assert capsys.readouterr().out == "EBIIL\n"

def test_caesar_non_numeric_key_is_zero(capsys):
    assert run_main(caesar, ["HELLO", "abc"]) == 0
    assert capsys.readouterr().out == "HELLO\n"

def test_caesar_combined_flags(capsys):
    assert run_main(caesar, ["-sfr", "Hi, there!", "1"]) == 0
    assert capsys.readouterr().out == "Ijuifsf\n"

def test_caesar_all_keys(capsys):
    assert run_main(caesar, ["-a", "A"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 25
    assert lines[0] == "ROT1:\tB"
    assert lines[-1] == "ROT25:\tZ"

def test_caesar_all_keys_decrypt(capsys):
    assert run_main(caesar, ["-a", "-d", "B"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ROT1:\tA"

def test_caesar_all_keys_table(capsys):
    assert run_main(caesar, ["-a", "-t", "A"]) == 0
    out = capsys.readouterr().out
    assert "ROT1" in out
    assert "ROT25" in out

@pytest.mark.parametrize("argv", [
    ["-e", "-d", "HELLO", "3"],   # conflicting mode flags
    ["-x", "HELLO", "3"],         # unknown flag
    ["HELLO"],                    # missing key
    [],                           # missing everything
    ["HELLO", "3", "extra"],      # too many arguments
    ["-a", "HELLO", "3"],         # key with -a
    ["-t", "HELLO", "3"],         # table without -a
])
def test_caesar_usage_errors(capsys, argv):
    assert run_main(caesar, argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage" in captured.err

def test_caesar_verbose_logs_to_stderr(capsys):
    assert run_main(caesar, ["-v", "HELLO", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "KHOOR\n"
    assert "caesar shift 3" in captured.err
    # back to quiet for the rest of the session
    assert run_main(caesar, ["HELLO", "3"]) == 0
    assert capsys.readouterr().err == ""

def test_caesar_config_from_args():
    args = caesar.build_parser().parse_args(["-d", "-s", "-r", "X", "1"])
    config = caesar.config_from_args(args)
    assert config.decrypting
    assert config.policy.strip and config.policy.retain_case
    assert not config.policy.fold
    assert not config.all_keys

# ── caesar-encode ────────────────────────────────────────────────────────────
def test_caesar_encode_output(capsys):
    assert run_main(caesar_encode, ["hello", "3"]) == 0
    assert capsys.readouterr().out == "m = hello, c = KHOOR\n"

def test_caesar_encode_keeps_non_letters(capsys):
    assert run_main(caesar_encode, ["a-b c", "1"]) == 0
    assert capsys.readouterr().out == "m = a-b c, c = B-C D\n"

@pytest.mark.parametrize("argv", [[], ["hello"], ["hello", "3", "4"]])
def test_caesar_encode_usage(capsys, argv):
    assert run_main(caesar_encode, argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: caesar-encode message key" in captured.err

# ── vigenere ─────────────────────────────────────────────────────────────────
def test_vigenere_encrypt(capsys):
    assert run_main(vigenere, ["ATTACKATDAWN", "LEMON"]) == 0
    assert capsys.readouterr().out == "LXFOPVEFRNHR\n"

def test_vigenere_decrypt(capsys):
    assert run_main(vigenere, ["-d", "LXFOPVEFRNHR", "lemon"]) == 0
    assert capsys.readouterr().out == "ATTACKATDAWN\n"

def test_vigenere_invalid_key(capsys):
    assert run_main(vigenere, ["HELLO", "k3y"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Key must contain only alphabetic characters." in captured.err

@pytest.mark.parametrize("argv", [["HELLO"], ["a", "b", "c"], ["-q", "a", "b"]])
def test_vigenere_usage(argv):
    assert run_main(vigenere, argv) == 1

# ── entry point guard ────────────────────────────────────────────────────────
def test_guard_reports_allocation_failure(capsys):
    def boom(argv, ui):
        raise MemoryError()
    assert guard(boom, []) == 1
    assert "Memory allocation failed." in capsys.readouterr().err
