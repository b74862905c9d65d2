#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Caesar encoder, simplest form: prints "m = <message>, c = <cipher>" in uppercase"""

import sys
from typing import List, Optional

from cipher_cli import UI, guard
from shift_cipher import UsageError, encrypt, parse_key

USAGE = (
    "Usage: caesar-encode message key\n"
    "message is the text to encrypt\n"
    "key is an integer indicating the cipher shift"
)


def run(argv: Optional[List[str]] = None, ui: Optional[UI] = None) -> int:
    ui = ui or UI()
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        raise UsageError(USAGE)

    message, key = args
    ui.result(f"m = {message}, c = {encrypt(message, parse_key(key))}")
    return 0


def main(argv: Optional[List[str]] = None):
    sys.exit(guard(run, argv))


if __name__ == '__main__':
    main()
