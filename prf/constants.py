"""
TLS PRF Constants (RFC 2246, RFC 4346, RFC 5246)
"""

from enum import Enum
from cryptography.hazmat.primitives import hashes


class PrfMode(str, Enum):
    """PRF hash selector"""
    MD5 = "md5"                # P_MD5 only
    SHA1 = "sha1"              # P_SHA1 only
    MD5_SHA1 = "md5/sha1"      # TLS 1.0/1.1: P_MD5(S1) XOR P_SHA1(S2)
    SHA224 = "sha224"
    SHA256 = "sha256"          # TLS 1.2 default
    SHA384 = "sha384"          # TLS 1.2 *_SHA384 suites
    SHA512 = "sha512"


# Hash primitives per mode, in split-secret order (S1 goes to the first)
MODE_DIGESTS = {
    PrfMode.MD5: (hashes.MD5,),
    PrfMode.SHA1: (hashes.SHA1,),
    PrfMode.MD5_SHA1: (hashes.MD5, hashes.SHA1),
    PrfMode.SHA224: (hashes.SHA224,),
    PrfMode.SHA256: (hashes.SHA256,),
    PrfMode.SHA384: (hashes.SHA384,),
    PrfMode.SHA512: (hashes.SHA512,),
}

MODE_NAMES = {
    PrfMode.MD5: "P_MD5",
    PrfMode.SHA1: "P_SHA1",
    PrfMode.MD5_SHA1: "P_MD5 XOR P_SHA1",
    PrfMode.SHA224: "P_SHA224",
    PrfMode.SHA256: "P_SHA256",
    PrfMode.SHA384: "P_SHA384",
    PrfMode.SHA512: "P_SHA512",
}

# PRF labels
LABEL_MASTER_SECRET = b"master secret"
LABEL_KEY_EXPANSION = b"key expansion"
LABEL_CLIENT_FINISHED = b"client finished"
LABEL_SERVER_FINISHED = b"server finished"

# Sizes
MASTER_SECRET_LENGTH = 48
VERIFY_DATA_LENGTH = 12
RANDOM_LENGTH = 32

# Cipher suites
TLS_RSA_WITH_RC4_128_MD5 = 0x0004
TLS_RSA_WITH_RC4_128_SHA = 0x0005
TLS_RSA_WITH_3DES_EDE_CBC_SHA = 0x000A
TLS_RSA_WITH_AES_128_CBC_SHA = 0x002F
TLS_RSA_WITH_AES_256_CBC_SHA = 0x0035
TLS_RSA_WITH_AES_128_CBC_SHA256 = 0x003C
TLS_RSA_WITH_AES_128_GCM_SHA256 = 0x009C
TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA = 0xC013
TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0xC014
TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F

CIPHER_SUITE_NAMES = {
    0x0004: "TLS_RSA_WITH_RC4_128_MD5",
    0x0005: "TLS_RSA_WITH_RC4_128_SHA",
    0x000A: "TLS_RSA_WITH_3DES_EDE_CBC_SHA",
    0x002F: "TLS_RSA_WITH_AES_128_CBC_SHA",
    0x0035: "TLS_RSA_WITH_AES_256_CBC_SHA",
    0x003C: "TLS_RSA_WITH_AES_128_CBC_SHA256",
    0x009C: "TLS_RSA_WITH_AES_128_GCM_SHA256",
    0xC013: "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA",
    0xC014: "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA",
    0xC02F: "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256",
}

# (mac_key_length, enc_key_length, fixed_iv_length)
CIPHER_SUITE_PARAMS = {
    0x0004: (16, 16, 0),
    0x0005: (20, 16, 0),
    0x000A: (20, 24, 8),
    0x002F: (20, 16, 16),
    0x0035: (20, 32, 16),
    0x003C: (32, 16, 0),  # TLS 1.2 CBC: explicit per-record IV
    0x009C: (0, 16, 4),   # AEAD: implicit nonce part only
    0xC013: (20, 16, 16),
    0xC014: (20, 32, 16),
    0xC02F: (0, 16, 4),
}
