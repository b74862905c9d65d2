#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VIGENÈRE CIPHER
━━━━━━━━━━━━━━━
  vigenere [-d] <message> <key>

The key must be alphabetic only; anything else exits with code 2.
Output is uppercase. The key letter for position i is key[i % len(key)],
so spaces and punctuation in the message still use up a key letter.
"""

import sys
import logging
from typing import List, Optional

from cipher_cli import UI, UsageParser, guard, setup_logging
from shift_cipher import decrypt_vigenere, encrypt_vigenere

logger = logging.getLogger(__name__)


def build_parser() -> UsageParser:
    p = UsageParser(
        prog='vigenere',
        description='Vigenère cipher with a repeating alphabetic keyword',
    )
    p.add_argument('-d', '--decrypt', action='store_true',
                   help='Decrypt instead of encrypt')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Debug logging on stderr')
    p.add_argument('message', help='Text to transform')
    p.add_argument('key', help='Alphabetic keyword')
    return p


def run(argv: Optional[List[str]] = None, ui: Optional[UI] = None) -> int:
    ui = ui or UI()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    fn = decrypt_vigenere if args.decrypt else encrypt_vigenere
    logger.debug("%s with key of length %d", fn.__name__, len(args.key))
    ui.result(fn(args.message, args.key))
    return 0


def main(argv: Optional[List[str]] = None):
    sys.exit(guard(run, argv))


if __name__ == '__main__':
    main()
