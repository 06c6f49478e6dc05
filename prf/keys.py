"""
TLS 1.0/1.1/1.2 Key Derivation (RFC 2246 Sections 6.3 and 8.1, RFC 5246)
"""

from typing import Iterable, Union
from cryptography.hazmat.primitives import hashes

from .constants import (
    PrfMode,
    LABEL_MASTER_SECRET, LABEL_KEY_EXPANSION,
    LABEL_CLIENT_FINISHED, LABEL_SERVER_FINISHED,
    MASTER_SECRET_LENGTH, VERIFY_DATA_LENGTH,
    CIPHER_SUITE_PARAMS, CIPHER_SUITE_NAMES,
)
from .generate import tls_prf


def derive_master_secret(pre_master_secret: bytes, client_random: bytes, server_random: bytes,
                         mode: Union[PrfMode, str] = PrfMode.MD5_SHA1, debug: bool = False) -> bytes:
    """
    Derive the 48-byte master secret.
    
    master_secret = PRF(pre_master_secret, "master secret",
                        ClientHello.random + ServerHello.random)[0..47]
    
    Args:
        pre_master_secret: RSA-decrypted or (EC)DH pre-master secret
        client_random: 32-byte ClientHello.random
        server_random: 32-byte ServerHello.random
        mode: PRF hash selector (md5/sha1 for TLS 1.0/1.1)
        debug: Enable debug output
        
    Returns:
        bytes: 48-byte master secret
    """
    master_secret = tls_prf(
        pre_master_secret, LABEL_MASTER_SECRET,
        client_random + server_random, MASTER_SECRET_LENGTH, mode
    )
    
    if debug:
        print(f"    Pre-Master Secret: {pre_master_secret.hex()}")
        print(f"    Master Secret: {master_secret.hex()}")
    
    return master_secret


def derive_key_block(master_secret: bytes, client_random: bytes, server_random: bytes, length: int,
                     mode: Union[PrfMode, str] = PrfMode.MD5_SHA1, debug: bool = False) -> bytes:
    """
    Derive the key block.
    
    key_block = PRF(master_secret, "key expansion",
                    server_random + client_random)
    
    Note the random order is reversed compared to the master secret.
    """
    key_block = tls_prf(
        master_secret, LABEL_KEY_EXPANSION,
        server_random + client_random, length, mode
    )
    
    if debug:
        print(f"    Key Block ({length} bytes): {key_block.hex()}")
    
    return key_block


def derive_key_material(master_secret: bytes, client_random: bytes, server_random: bytes,
                        cipher_suite: int, mode: Union[PrfMode, str] = PrfMode.MD5_SHA1,
                        debug: bool = False) -> dict:
    """
    Derive and partition connection keys for a cipher suite.
    
    Key block layout:
        client_write_MAC_secret[mac_len]
        server_write_MAC_secret[mac_len]
        client_write_key[key_len]
        server_write_key[key_len]
        client_write_IV[iv_len]
        server_write_IV[iv_len]
    
    Args:
        master_secret: 48-byte master secret
        client_random: 32-byte ClientHello.random
        server_random: 32-byte ServerHello.random
        cipher_suite: Negotiated cipher suite code
        mode: PRF hash selector
        debug: Enable debug output
        
    Returns:
        dict: {client: {mac_key, key, iv}, server: {...}, key_block}
    """
    if cipher_suite not in CIPHER_SUITE_PARAMS:
        raise ValueError(f"Unsupported cipher suite: 0x{cipher_suite:04x}")
    
    mac_len, key_len, iv_len = CIPHER_SUITE_PARAMS[cipher_suite]
    length = 2 * (mac_len + key_len + iv_len)
    key_block = derive_key_block(master_secret, client_random, server_random, length, mode, debug=debug)
    
    offset = 0
    
    def take(n: int) -> bytes:
        nonlocal offset
        chunk = key_block[offset:offset + n]
        offset += n
        return chunk
    
    client_mac_key, server_mac_key = take(mac_len), take(mac_len)
    client_key, server_key = take(key_len), take(key_len)
    client_iv, server_iv = take(iv_len), take(iv_len)
    
    client_secrets = {"mac_key": client_mac_key, "key": client_key, "iv": client_iv}
    server_secrets = {"mac_key": server_mac_key, "key": server_key, "iv": server_iv}
    
    if debug:
        print(f"    Cipher Suite: {CIPHER_SUITE_NAMES.get(cipher_suite, hex(cipher_suite))}")
        print(f"    Client MAC Key: {client_mac_key.hex()}")
        print(f"    Server MAC Key: {server_mac_key.hex()}")
        print(f"    Client Key: {client_key.hex()}")
        print(f"    Server Key: {server_key.hex()}")
        print(f"    Client IV: {client_iv.hex()}")
        print(f"    Server IV: {server_iv.hex()}")
    
    return {
        "client": client_secrets,
        "server": server_secrets,
        "key_block": key_block,
    }


def handshake_hash_tls10(messages: Iterable[bytes]) -> bytes:
    """
    TLS 1.0/1.1 handshake hash: MD5(handshake_messages) + SHA-1(handshake_messages).
    
    Returns:
        bytes: 36-byte concatenated digest
    """
    md5 = hashes.Hash(hashes.MD5())
    sha1 = hashes.Hash(hashes.SHA1())
    for message in messages:
        md5.update(message)
        sha1.update(message)
    return md5.finalize() + sha1.finalize()


def compute_finished_verify_data(master_secret: bytes, handshake_hash: bytes, is_client: bool = True,
                                 mode: Union[PrfMode, str] = PrfMode.MD5_SHA1) -> bytes:
    """
    Compute the verify_data for a TLS 1.0-1.2 Finished message.
    
    verify_data = PRF(master_secret, finished_label, handshake_hash)[0..11]
    
    Args:
        master_secret: 48-byte master secret
        handshake_hash: handshake_hash_tls10() output, or the suite hash for TLS 1.2
        is_client: Use "client finished" (True) or "server finished" (False)
        mode: PRF hash selector
        
    Returns:
        bytes: 12-byte verify_data
    """
    label = LABEL_CLIENT_FINISHED if is_client else LABEL_SERVER_FINISHED
    return tls_prf(master_secret, label, handshake_hash, VERIFY_DATA_LENGTH, mode)
