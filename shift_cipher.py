#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SHIFT CIPHER — Caesar & Vigenère core
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Shared transformation used by every command-line tool in this repo:
  1. Euclidean modulo and letter indexing over the 26-letter Latin alphabet
  2. Lenient atoi-style key parsing
  3. Caesar encrypt / decrypt with formatting policies (strip, fold, case)
  4. Enumeration of all keys 1..25
  5. Vigenère encrypt / decrypt
"""

import re
import logging
from string import ascii_letters, ascii_uppercase, ascii_lowercase
from typing import List, Tuple
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

ALPHABET = ascii_uppercase
ALPHA_SIZE = len(ALPHABET)  # 26
LETTERS = frozenset(ascii_letters)

_KEEP_ON_STRIP = LETTERS | {' '}
_WHITESPACE = frozenset(' \t\n\r\v\f')
_ATOI_RE = re.compile(r'^[ \t\n\r\v\f]*([+-]?[0-9]+)')


# ═══════════════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════════════

class CipherError(Exception):
    """Fatal error; the CLI reports it and exits with ``exit_code``."""
    exit_code = 1


class UsageError(CipherError):
    """Wrong argument count, conflicting or unknown flags."""
    exit_code = 1


class KeyValidationError(CipherError, ValueError):
    """Vigenère key is empty or contains a non-alphabetic character."""
    exit_code = 2


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

ENCRYPT = 'encrypt'
DECRYPT = 'decrypt'


@dataclass(frozen=True)
class FormattingPolicy:
    """Output formatting flags"""
    strip: bool = False        # drop everything outside [A-Za-z ]
    fold: bool = False         # drop whitespace
    retain_case: bool = False  # keep letter case instead of forcing uppercase

    @property
    def lossy(self) -> bool:
        return self.strip or self.fold


DEFAULT_POLICY = FormattingPolicy()


@dataclass(frozen=True)
class CipherConfig:
    """Everything a single CLI invocation needs, built once from argv"""
    mode: str = ENCRYPT
    policy: FormattingPolicy = DEFAULT_POLICY
    all_keys: bool = False

    @property
    def decrypting(self) -> bool:
        return self.mode == DECRYPT


# ═══════════════════════════════════════════════════════════════════════════════
# ARITHMETIC
# ═══════════════════════════════════════════════════════════════════════════════

def euclid_mod(a: int, b: int) -> int:
    """
    Euclidean modulo: result is always in [0, |b|).
    Raises ZeroDivisionError for b == 0.
    """
    # Python's % already follows the sign of the divisor
    return a % abs(b)


def is_letter(c: str) -> bool:
    return c in LETTERS


def letter_index(c: str) -> int:
    """A/a -> 0, ..., Z/z -> 25"""
    if not is_letter(c):
        raise ValueError(f"not an alphabetic character: {c!r}")
    return ord(c.upper()) - ord('A')


def parse_key(text: str) -> int:
    """
    Lenient integer conversion in the manner of C ``atoi``:
    leading whitespace, an optional sign and the leading digits are used,
    anything else is ignored. No digits at all gives 0.
    """
    m = _ATOI_RE.match(text)
    if not m:
        logger.debug("key %r has no leading integer, using 0", text)
        return 0
    return int(m.group(1))


# ═══════════════════════════════════════════════════════════════════════════════
# CAESAR
# ═══════════════════════════════════════════════════════════════════════════════

def shift_char(c: str, k: int, retain_case: bool = False) -> str:
    """Shift one letter by k positions. Non-letters are returned unchanged."""
    if not is_letter(c):
        return c
    idx = euclid_mod(letter_index(c) + k, ALPHA_SIZE)
    base = ascii_lowercase if retain_case and c.islower() else ascii_uppercase
    return base[idx]


@lru_cache(maxsize=128)
def _table(shift: int, retain_case: bool) -> dict:
    """str.translate() table equivalent to shift_char() over the whole alphabet"""
    src = ascii_uppercase + ascii_lowercase
    dst = ''.join(shift_char(c, shift, retain_case) for c in src)
    return str.maketrans(src, dst)


def apply_policy(text: str, policy: FormattingPolicy) -> str:
    """Drop characters according to strip / fold; order is preserved."""
    if not policy.lossy:
        return text
    out = []
    for ch in text:
        if policy.strip and ch not in _KEEP_ON_STRIP:
            continue
        if policy.fold and ch in _WHITESPACE:
            continue
        out.append(ch)
    return ''.join(out)


def encrypt(message: str, key: int, policy: FormattingPolicy = DEFAULT_POLICY) -> str:
    shift = euclid_mod(key, ALPHA_SIZE)
    logger.debug("caesar shift %d (key %d)", shift, key)
    shifted = message.translate(_table(shift, policy.retain_case))
    return apply_policy(shifted, policy)


def decrypt(ciphertext: str, key: int, policy: FormattingPolicy = DEFAULT_POLICY) -> str:
    return encrypt(ciphertext, -key, policy)


def all_keys(
    text: str, decrypting: bool = False, policy: FormattingPolicy = DEFAULT_POLICY
) -> List[Tuple[int, str]]:
    """Apply every key 1..25, returns (key, output) pairs in key order"""
    fn = decrypt if decrypting else encrypt
    return [(k, fn(text, k, policy)) for k in range(1, ALPHA_SIZE)]


def run_caesar(text: str, key: int, config: CipherConfig) -> str:
    fn = decrypt if config.decrypting else encrypt
    return fn(text, key, config.policy)


# ═══════════════════════════════════════════════════════════════════════════════
# VIGENÈRE
# ═══════════════════════════════════════════════════════════════════════════════

def validate_vigenere_key(key: str) -> str:
    if not key:
        raise KeyValidationError("Key must not be empty.")
    if any(not is_letter(c) for c in key):
        raise KeyValidationError("Key must contain only alphabetic characters.")
    return key


def _vigenere(text: str, key: str, sign: int) -> str:
    validate_vigenere_key(key)
    shifts = [letter_index(c) * sign for c in key]
    n = len(shifts)
    # key position follows the message position, so non-letters use up a key letter
    return ''.join(shift_char(ch, shifts[i % n]) for i, ch in enumerate(text))


def encrypt_vigenere(message: str, key: str) -> str:
    """
    Vigenère encryption. Output is always uppercase, non-letters pass through.

    >>> encrypt_vigenere("ATTACKATDAWN", "LEMON")
    'LXFOPVEFRNHR'
    """
    return _vigenere(message, key, 1)


def decrypt_vigenere(ciphertext: str, key: str) -> str:
    return _vigenere(ciphertext, key, -1)
