"""
hashframe command line

Usage:
    python -m hashframe encode sha2-256 --text "hello world"
    python -m hashframe encode identity --input note.txt --format raw
    python -m hashframe decode 1220b94d27b9...
    python -m hashframe list [--full]
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .codec import Multihash
from .errors import MultihashError
from .provider import HashlibProvider
from .types import AlgorithmKind, kind_from_name

logger = logging.getLogger(__name__)


def _build_codec(full: bool) -> Multihash:
    provider = HashlibProvider.full() if full else HashlibProvider()
    return Multihash(provider)


def _read_input(args: argparse.Namespace) -> bytes:
    if args.text is not None:
        return args.text.encode('utf-8')
    if args.input is not None:
        return args.input.read_bytes()
    return sys.stdin.buffer.read()


def cmd_encode(args: argparse.Namespace) -> int:
    codec = _build_codec(args.full)
    kind = kind_from_name(args.algorithm)
    framed = codec.encode(kind, _read_input(args))

    if args.format == 'raw':
        sys.stdout.buffer.write(framed)
        sys.stdout.buffer.flush()
    else:
        print(framed.hex())
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    try:
        buffer = bytes.fromhex(args.multihash)
    except ValueError:
        print(f"error: not a hex string: {args.multihash!r}", file=sys.stderr)
        return 1

    kind, payload = Multihash().decode(buffer)
    print(f"algorithm: {kind.canonical_name} (0x{kind.identifier:02x})")
    print(f"length:    {len(payload)}")
    print(f"digest:    {payload.hex()}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    codec = _build_codec(args.full)
    for kind in AlgorithmKind:
        marker = '*' if codec.supports(kind) else ' '
        print(f"{marker} 0x{kind.identifier:02x}  {kind.canonical_name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hashframe',
        description='hashframe: self-describing hash encoding',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    hashframe encode sha2-256 --text "hello world"
    hashframe decode 000568656c6c6f
    hashframe list --full             # '*' marks computable algorithms
        """
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    p_encode = sub.add_parser('encode', help='Hash input and print the multihash')
    p_encode.add_argument('algorithm', help='Algorithm name, e.g. sha2-256')
    source = p_encode.add_mutually_exclusive_group()
    source.add_argument('--text', '-t', help='Hash this UTF-8 text')
    source.add_argument('--input', '-i', type=Path, help='Hash this file (default: stdin)')
    p_encode.add_argument(
        '--format', '-f',
        choices=['hex', 'raw'],
        default='hex',
        help='Output format (default: hex)'
    )
    p_encode.add_argument(
        '--full',
        action='store_true',
        help='Wire SHA3, SHAKE and BLAKE2 in addition to SHA1/SHA2'
    )
    p_encode.set_defaults(func=cmd_encode)

    p_decode = sub.add_parser('decode', help='Inspect a hex-encoded multihash')
    p_decode.add_argument('multihash', help='Hex-encoded framed buffer')
    p_decode.set_defaults(func=cmd_decode)

    p_list = sub.add_parser('list', help='List registered algorithms')
    p_list.add_argument('--full', action='store_true', help='Use the full hashlib provider')
    p_list.set_defaults(func=cmd_list)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(name)s %(levelname)s %(message)s',
        )

    try:
        return args.func(args)
    except MultihashError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
