"""
TLS Pseudo-Random Function

Provides:
- P_hash data expansion over any HMAC hash
- TLS 1.0/1.1 dual-hash PRF (P_MD5 XOR P_SHA1 over a split secret)
- Single-hash PRF modes (TLS 1.2 uses P_SHA256)
- Master secret, key block and Finished verify_data derivation
"""

from .constants import *
from .phash import hmac_digest, iter_p_hash, p_hash
from .generate import (
    resolve_mode,
    split_secret,
    xor_bytes,
    prf_bytes,
    generate,
    tls_prf,
)
from .keys import (
    derive_master_secret,
    derive_key_block,
    derive_key_material,
    handshake_hash_tls10,
    compute_finished_verify_data,
)
