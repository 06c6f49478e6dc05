"""
TLS PRF Combiner (RFC 2246 Section 5)

PRF(secret, label, seed) = P_MD5(S1, label + seed) XOR P_SHA-1(S2, label + seed)

Single-hash modes run one P_hash over the whole secret.
"""

from typing import Tuple, Union

from .constants import PrfMode, MODE_DIGESTS
from .phash import p_hash


def resolve_mode(mode: Union[PrfMode, str]) -> PrfMode:
    """
    Map a mode selector ("md5", "sha1", "md5/sha1", ...) to PrfMode.
    
    Raises:
        ValueError: Unknown selector
    """
    try:
        return PrfMode(mode)
    except ValueError:
        raise ValueError(f"Invalid digest type: {mode}") from None


def split_secret(secret: bytes) -> Tuple[bytes, bytes]:
    """
    Split secret into S1 (first half) and S2 (second half).
    
    Both halves are ceil(len / 2) bytes long, so for an odd length
    the middle byte belongs to both.
    """
    half = (len(secret) + 1) // 2
    return secret[:half], secret[len(secret) - half:]


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two equal-length byte strings."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} != {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def prf_bytes(mode: Union[PrfMode, str], secret: bytes, length: int, *seeds: bytes) -> bytes:
    """
    Compute length bytes of PRF output.
    
    Args:
        mode: Hash selector
        secret: Keying material (None is treated as empty)
        length: Output length in bytes
        seeds: Seed fragments, concatenated in order
        
    Returns:
        bytes: PRF output
    """
    mode = resolve_mode(mode)
    if length < 0:
        raise ValueError(f"Invalid output length: {length}")
    
    secret = secret or b""
    seed = b"".join(part or b"" for part in seeds)
    digests = MODE_DIGESTS[mode]
    
    if len(digests) == 1:
        return p_hash(digests[0](), secret, seed, length)
    
    first, second = digests
    s1, s2 = split_secret(secret)
    return xor_bytes(
        p_hash(first(), s1, seed, length),
        p_hash(second(), s2, seed, length),
    )


def generate(output, mode: Union[PrfMode, str], secret: bytes, *seeds: bytes, length: int = None) -> None:
    """
    Fill output with PRF bytes in place.
    
    Args:
        output: bytearray or writable memoryview
        mode: Hash selector
        secret: Keying material
        seeds: Seed fragments, concatenated in order
        length: Bytes to write (default: len(output))
    
    The result is computed completely before the buffer is written, so
    on any error the buffer is left untouched.
    """
    if isinstance(output, memoryview):
        if output.readonly:
            raise TypeError("Output buffer is read-only")
        # length is counted in bytes
        output = output.cast("B")
    elif not isinstance(output, bytearray):
        raise TypeError(f"Output buffer must be bytearray or memoryview, not {type(output).__name__}")
    
    capacity = len(output)
    if length is None:
        length = capacity
    if length < 0:
        raise ValueError(f"Invalid output length: {length}")
    if length > capacity:
        raise ValueError(f"Output buffer too small: {capacity} bytes, {length} requested")
    
    result = prf_bytes(mode, secret, length, *seeds)
    output[:length] = result


def tls_prf(secret: bytes, label: bytes, seed: bytes, length: int,
            mode: Union[PrfMode, str] = PrfMode.MD5_SHA1) -> bytes:
    """
    PRF(secret, label, seed) truncated to length bytes.
    
    TLS 1.0/1.1 use the default md5/sha1 mode; TLS 1.2 passes sha256
    (or the suite's PRF hash).
    """
    return prf_bytes(mode, secret, length, label, seed)
