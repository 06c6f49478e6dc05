"""
P_hash Data Expansion Function (RFC 2246 Section 5)
"""

import itertools
from typing import Iterator
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC


def hmac_digest(algorithm: hashes.HashAlgorithm, key: bytes, *parts: bytes) -> bytes:
    """
    HMAC over the concatenation of parts.
    
    Args:
        algorithm: Hash instance (e.g. hashes.SHA1())
        key: HMAC key (may be empty)
        parts: Message fragments, fed in order
        
    Returns:
        bytes: MAC of algorithm.digest_size bytes
    """
    mac = HMAC(key, algorithm)
    for part in parts:
        mac.update(part)
    return mac.finalize()


def iter_p_hash(algorithm: hashes.HashAlgorithm, secret: bytes, seed: bytes) -> Iterator[bytes]:
    """
    Lazy P_hash block stream.
    
    P_hash(secret, seed) = HMAC_hash(secret, A(1) + seed) +
                           HMAC_hash(secret, A(2) + seed) + ...
    A(0) = seed
    A(i) = HMAC_hash(secret, A(i-1))
    
    Never terminates; the caller takes as many blocks as it needs.
    """
    a = seed
    while True:
        a = hmac_digest(algorithm, secret, a)
        yield hmac_digest(algorithm, secret, a, seed)


def p_hash(algorithm: hashes.HashAlgorithm, secret: bytes, seed: bytes, length: int) -> bytes:
    """
    Expand secret and seed into exactly length bytes.
    
    Args:
        algorithm: Hash instance used for HMAC
        secret: Keying material
        seed: Seed (label + randoms for TLS)
        length: Desired output length
        
    Returns:
        bytes: First length bytes of the P_hash stream
    """
    if length < 0:
        raise ValueError(f"Invalid output length: {length}")
    if length == 0:
        return b""
    
    # ceil(length / digest_size) blocks, last one truncated
    block_count = -(-length // algorithm.digest_size)
    blocks = itertools.islice(iter_p_hash(algorithm, secret, seed), block_count)
    return b"".join(blocks)[:length]
