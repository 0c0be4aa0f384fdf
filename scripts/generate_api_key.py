#!/usr/bin/env python3
"""
Script: generate_api_key.py
Description: Generate API keys, or verify a key against a stored hash.

Generates an API key in the prefix + base64(material) format and
prints it with its SHA-256 hash. Only the hash should be stored;
add it to KEYAUTH_API_KEY_HASHES to accept the key.

Usage:
    python scripts/generate_api_key.py [--prefix pk_] [--key MATERIAL]
    python scripts/generate_api_key.py --verify sk_... --hash 3f2a...

Security Note:
    The plaintext API key is shown only once. Store it securely!
"""

import argparse
import sys
from typing import List, Optional

from src.auth.api_key import create_api_key, validate_hash
from src.config.settings import settings
from src.models.api_key import APIKeyConfig
from src.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Generate or verify API keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_api_key.py
  python scripts/generate_api_key.py --prefix pk_
  python scripts/generate_api_key.py --verify sk_... --hash <sha256 hex>

Security Warning:
  The plaintext API key will be displayed only once.
  Store it securely - it cannot be recovered from the hash!
        """
    )

    parser.add_argument(
        '--prefix',
        type=str,
        default=settings.key_prefix,
        help='Prefix for the generated key (default: %(default)s)'
    )

    parser.add_argument(
        '--key',
        type=str,
        default=None,
        help='Key material to encode instead of a random UUID'
    )

    parser.add_argument(
        '--verify',
        metavar='API_KEY',
        type=str,
        default=None,
        help='Verify this API key against --hash instead of generating one'
    )

    parser.add_argument(
        '--hash',
        dest='hashed_key',
        type=str,
        default=None,
        help='Stored SHA-256 hash used with --verify'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main script execution. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    if args.verify is not None:
        if args.hashed_key is None:
            parser.error("--verify requires --hash")

        is_valid = validate_hash(args.verify, args.hashed_key)
        print(f"API key verification: {'match' if is_valid else 'no match'}")
        return 0 if is_valid else 1

    created = create_api_key(APIKeyConfig(prefix=args.prefix, key=args.key))

    print(f"Generated API Key: {created.key}")
    print("   WARNING: Store this key securely! It will not be shown again.")
    print()
    print(f"SHA-256 Hash: {created.hashed_key}")
    print()
    print(f"Use the API key above in your {settings.auth_header} header:")
    print(f"   {settings.auth_header}: {settings.auth_scheme} {created.key}")

    logger.info("API key generated from script", prefix=args.prefix)
    return 0


if __name__ == '__main__':
    sys.exit(main())
