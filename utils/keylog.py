"""
Key Logging Utilities for Wireshark/tshark

Writes TLS 1.0-1.2 master secrets in SSLKEYLOGFILE format for packet inspection.
"""

from prf.constants import MASTER_SECRET_LENGTH, RANDOM_LENGTH


def format_keylog_line(client_random: bytes, master_secret: bytes) -> str:
    """
    Format one keylog entry.

    Format:
        CLIENT_RANDOM <client_random_hex> <master_secret_hex>

    Raises:
        ValueError: client_random is not 32 bytes or master_secret is not 48 bytes
    """
    if len(client_random) != RANDOM_LENGTH:
        raise ValueError(f"client_random must be {RANDOM_LENGTH} bytes, got {len(client_random)}")
    if len(master_secret) != MASTER_SECRET_LENGTH:
        raise ValueError(f"master_secret must be {MASTER_SECRET_LENGTH} bytes, got {len(master_secret)}")

    return f"CLIENT_RANDOM {client_random.hex()} {master_secret.hex()}"


def write_keylog(keylog_file: str, client_random: bytes, master_secret: bytes) -> list:
    """
    Append a master secret to the keylog file for Wireshark.

    Args:
        keylog_file: Path to the keylog file
        client_random: 32-byte client random from ClientHello
        master_secret: 48-byte master secret

    Returns:
        list: Lines that were written to the file
    """
    lines = [format_keylog_line(client_random, master_secret)]

    with open(keylog_file, "a") as f:
        for line in lines:
            f.write(line + "\n")

    return lines
