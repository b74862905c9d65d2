#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CAESAR CIPHER — flagged edition
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  caesar [-e|-d] [-s] [-f] [-r] [-a] <input> [<key>]

Encrypts (default) or decrypts <input> with an integer shift <key>.
The key is read leniently like C atoi(): "abc" is 0, "12abc" is 12.
With -a every key 1..25 is applied and the key argument is omitted.
"""

import sys
import logging
import argparse
from typing import List, Optional

from cipher_cli import UI, UsageParser, guard, setup_logging
from shift_cipher import (
    CipherConfig, FormattingPolicy, ENCRYPT, DECRYPT,
    all_keys, parse_key, run_caesar,
)

logger = logging.getLogger(__name__)


def build_parser() -> UsageParser:
    p = UsageParser(
        prog='caesar',
        description='Caesar cipher: shift every letter by a fixed key',
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument('-e', '--encrypt', action='store_true',
                      help='Encrypt the input (default)')
    mode.add_argument('-d', '--decrypt', action='store_true',
                      help='Decrypt the input')
    p.add_argument('-s', '--strip', action='store_true',
                   help='Strip non-alphabetic, non-space characters from the output')
    p.add_argument('-f', '--fold', action='store_true',
                   help='Remove whitespace from the output')
    p.add_argument('-r', '--retain-case', action='store_true',
                   help='Keep the original letter case (default: uppercase)')
    p.add_argument('-a', '--all', dest='all_keys', action='store_true',
                   help='Show the output for all keys 1-25 (omit the key)')
    p.add_argument('-t', '--table', action='store_true',
                   help='With -a: render the results as a table')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Debug logging on stderr')
    p.add_argument('input', help='Text to transform')
    p.add_argument('key', nargs='?', help='Integer shift')
    return p


def config_from_args(args: argparse.Namespace) -> CipherConfig:
    return CipherConfig(
        mode=DECRYPT if args.decrypt else ENCRYPT,
        policy=FormattingPolicy(
            strip=args.strip, fold=args.fold, retain_case=args.retain_case,
        ),
        all_keys=args.all_keys,
    )


def run(argv: Optional[List[str]] = None, ui: Optional[UI] = None) -> int:
    ui = ui or UI()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = config_from_args(args)
    logger.debug("config: %s", config)

    if config.all_keys:
        if args.key is not None:
            parser.fail("the key argument is not used with -a")
        results = all_keys(args.input, config.decrypting, config.policy)
        if args.table:
            ui.all_keys_table(results, f"{config.mode.capitalize()}: {args.input}")
        else:
            ui.result('\n'.join(f"ROT{k}:\t{text}" for k, text in results))
        return 0

    if args.table:
        parser.fail("-t/--table requires -a/--all")
    if args.key is None:
        parser.fail("the following arguments are required: key")

    ui.result(run_caesar(args.input, parse_key(args.key), config))
    return 0


def main(argv: Optional[List[str]] = None):
    sys.exit(guard(run, argv))


if __name__ == '__main__':
    main()
