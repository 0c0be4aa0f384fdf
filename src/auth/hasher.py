"""
Module: hasher.py
Description: SHA-256 hex digests for API keys.

Key Components:
- encode_utf8(): UTF-8 bytes of a string, lone surrogates as U+FFFD
- digest_hex(): Lowercase 64-character hex SHA-256 digest of a string

Dependencies: hashlib, struct
Author: KeyAuth Team
"""

import hashlib
import struct

DIGEST_ALGORITHM = 'sha256'
DIGEST_HEX_LENGTH = 64

# 32-byte digest read as eight big-endian unsigned 32-bit words
_DIGEST_WORDS = struct.Struct('>8I')


def encode_utf8(value: str) -> bytes:
    """
    Encode a string as UTF-8, replacing unpaired surrogates with U+FFFD.

    Surrogate pairs stored as two code points are joined into the
    character they represent, so "\\ud83d\\udd11" encodes like "🔑".

    Args:
        value: Any Python string

    Returns:
        Well-formed UTF-8 bytes
    """
    try:
        return value.encode('utf-8')
    except UnicodeEncodeError:
        # Round-trip through UTF-16 so the decoder pairs or replaces surrogates
        utf16 = value.encode('utf-16-le', 'surrogatepass')
        return utf16.decode('utf-16-le', 'replace').encode('utf-8')


def digest_hex(value: str) -> str:
    """
    Hash a string with SHA-256 and render it as lowercase hex.

    The digest is rendered word by word: each 4-byte big-endian word
    is formatted as 8 zero-padded hex digits. The result is identical
    to hashlib's hexdigest().

    Args:
        value: String to hash, encoded with encode_utf8()

    Returns:
        64-character lowercase hex string

    Example:
        >>> digest_hex("abc")
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    digest = hashlib.new(DIGEST_ALGORITHM, encode_utf8(value)).digest()
    return ''.join(f'{word:08x}' for word in _DIGEST_WORDS.unpack(digest))
