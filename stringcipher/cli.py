#!/usr/bin/env python3
"""Command line wrapper for encryption and decryption.

Usage:
  stringcipher encrypt "some text"
  stringcipher decrypt "<cipher-string>"
"""

import argparse
import logging
import sys

from stringcipher.cipher import StringCipher
from stringcipher.common.errors import StringCipherError
from stringcipher.config import load_config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="stringcipher", description="Encrypt or decrypt a string with AES.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--key", default=None, help="Key to use instead of STRING_CIPHER_KEY")
    p.add_argument("--mode", choices=["gcm", "ecb"], default=None,
                   help="Cipher mode (default: STRING_CIPHER_MODE or gcm)")
    p.add_argument("--env-file", default=None, help="Path to a .env file")

    sub = p.add_subparsers(dest="command", required=True)
    enc = sub.add_parser("encrypt", help="Encrypt plaintext into a base64 string")
    enc.add_argument("text", help="Plaintext to encrypt (wrap in quotes)")
    dec = sub.add_parser("decrypt", help="Decrypt a base64 string produced by encrypt")
    dec.add_argument("text", help="Cipher string to decrypt (wrap in quotes)")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(key=args.key, mode=args.mode, env_file=args.env_file)
        cipher = StringCipher.from_config(config)
        if args.command == "encrypt":
            result = cipher.encrypt(args.text)
        else:
            result = cipher.decrypt(args.text)
    except StringCipherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
