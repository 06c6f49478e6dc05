#!/usr/bin/env python3
"""
TLS PRF - Main Entry Point

Expands a secret and seed with the TLS 1.0/1.1 PRF (or a single-hash
P_hash) and derives TLS master secrets.

Usage:
    python main.py generate [options]
    python main.py master-secret [options]

Examples:
    # 54 bytes of P_MD5 XOR P_SHA1
    python main.py generate --secret "secret key" --seed seed1 --seed seed2 -l 54

    # Single-hash mode with hex inputs
    python main.py generate -m sha256 --secret-hex 0b0b0b0b --seed-hex 000102 -l 32

    # Master secret, appended to a Wireshark keylog file
    python main.py master-secret --pre-master-hex <hex> \\
        --client-random-hex <hex> --server-random-hex <hex> -k tls_keys.log
"""

import argparse
import sys

from prf import PrfMode, MODE_NAMES, resolve_mode, prf_bytes, derive_master_secret
from utils.keylog import write_keylog


def _text_bytes(value: str) -> bytes:
    return value.encode("utf-8")


def _hex_bytes(value: str) -> bytes:
    return bytes.fromhex(value)


def run_generate(args, debug: bool = True) -> bytes:
    """Run the PRF and print the output as hex."""
    mode = resolve_mode(args.mode)
    secret = args.secret or b""
    seeds = args.seeds or []

    if debug:
        print(f"Mode: {mode.value} ({MODE_NAMES[mode]})")
        print(f"    Secret ({len(secret)} bytes): {secret.hex()}")
        for i, seed in enumerate(seeds):
            print(f"    Seed {i} ({len(seed)} bytes): {seed.hex()}")
        print(f"    Length: {args.length}")

    output = prf_bytes(mode, secret, args.length, *seeds)
    print(output.hex())
    return output


def run_master_secret(args, debug: bool = True) -> bytes:
    """Derive the master secret, print it and optionally write a keylog line."""
    master_secret = derive_master_secret(
        args.pre_master, args.client_random, args.server_random,
        mode=args.mode, debug=debug
    )

    if args.keylog:
        lines = write_keylog(args.keylog, args.client_random, master_secret)
        if debug:
            print(f"    Keylog: {len(lines)} line(s) written to {args.keylog}")

    print(master_secret.hex())
    return master_secret


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="TLS PRF - P_hash / TLS 1.0 PRF expansion and master secret derivation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # TLS 1.0/1.1 PRF (P_MD5 XOR P_SHA1)
  python main.py generate --secret "secret key" --seed seed1 --seed seed2 -l 54

  # P_SHA1 only
  python main.py generate -m sha1 --secret "secret key" --seed seed1 --seed seed2 -l 54

  # Master secret with keylog
  python main.py master-secret --pre-master-hex 0303... \\
      --client-random-hex 00... --server-random-hex 11... -k tls_keys.log

  # Quiet mode (only the hex result)
  python main.py -q generate --secret key --seed abc -l 16
"""
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Disable debug output"
    )

    mode_choices = [m.value for m in PrfMode]
    subparsers = parser.add_subparsers(dest="command", required=True)

    # generate
    gen = subparsers.add_parser("generate", help="Expand a secret and seed into PRF output")
    gen.add_argument(
        "-m", "--mode",
        default=PrfMode.MD5_SHA1.value,
        choices=mode_choices,
        help="Hash selector (default: md5/sha1)"
    )
    secret_group = gen.add_mutually_exclusive_group()
    secret_group.add_argument(
        "--secret",
        dest="secret",
        type=_text_bytes,
        help="Secret as UTF-8 text"
    )
    secret_group.add_argument(
        "--secret-hex",
        dest="secret",
        type=_hex_bytes,
        help="Secret as hex"
    )
    gen.add_argument(
        "--seed",
        dest="seeds",
        action="append",
        type=_text_bytes,
        help="Seed fragment as UTF-8 text (repeatable, concatenated in order)"
    )
    gen.add_argument(
        "--seed-hex",
        dest="seeds",
        action="append",
        type=_hex_bytes,
        help="Seed fragment as hex (repeatable, concatenated in order)"
    )
    gen.add_argument(
        "-l", "--length",
        type=int,
        required=True,
        help="Output length in bytes"
    )

    # master-secret
    ms = subparsers.add_parser("master-secret", help="Derive a TLS master secret")
    ms.add_argument(
        "-m", "--mode",
        default=PrfMode.MD5_SHA1.value,
        choices=mode_choices,
        help="PRF hash selector (default: md5/sha1, use sha256 for TLS 1.2)"
    )
    ms.add_argument(
        "--pre-master-hex",
        dest="pre_master",
        type=_hex_bytes,
        required=True,
        help="Pre-master secret as hex"
    )
    ms.add_argument(
        "--client-random-hex",
        dest="client_random",
        type=_hex_bytes,
        required=True,
        help="ClientHello.random as hex (32 bytes)"
    )
    ms.add_argument(
        "--server-random-hex",
        dest="server_random",
        type=_hex_bytes,
        required=True,
        help="ServerHello.random as hex (32 bytes)"
    )
    ms.add_argument(
        "-k", "--keylog",
        default=None,
        help="Key log file path for Wireshark (default: None)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    debug = not args.quiet

    try:
        if args.command == "generate":
            run_generate(args, debug=debug)
        else:
            run_master_secret(args, debug=debug)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
