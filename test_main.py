"""
Tests for the command-line entry point.
"""

import pytest

import main


SHA1_54 = (
    "d471667498bb6f11a606fd87a618c43499d867dc8295e041ba42001f28625af2"
    "00b1e2c5329322650e2133e78e1679b35c6cd906b3aa"
)
MD5_SHA1_54 = (
    "b675ac71c6ee825319a8734fe16785eab7a8990cf4a4c3d7ad67cdfb1290c048"
    "dd23cdb47bebfbc26cd0ad5dd3b00fae513ad069cdd4"
)


def last_line(capsys):
    return capsys.readouterr().out.strip().splitlines()[-1]


def test_generate_default_mode(capsys):
    code = main.main(["-q", "generate", "--secret", "secret key",
                      "--seed", "seed1", "--seed", "seed2", "-l", "54"])
    assert code == 0
    assert last_line(capsys) == MD5_SHA1_54


def test_generate_mixed_seed_encodings_keep_order(capsys):
    code = main.main(["-q", "generate", "-m", "sha1",
                      "--secret-hex", b"secret key".hex(),
                      "--seed", "seed1", "--seed-hex", b"seed2".hex(), "-l", "54"])
    assert code == 0
    assert last_line(capsys) == SHA1_54


def test_generate_debug_output(capsys):
    main.main(["generate", "--secret", "k", "--seed", "s", "-l", "4"])
    out = capsys.readouterr().out
    assert "Mode: md5/sha1 (P_MD5 XOR P_SHA1)" in out
    assert "Seed 0 (1 bytes): 73" in out


def test_generate_negative_length(capsys):
    code = main.main(["-q", "generate", "--secret", "k", "-l", "-1"])
    assert code == 1
    assert "Invalid output length" in capsys.readouterr().err


def test_generate_rejects_unknown_mode():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["generate", "-m", "sha3", "-l", "4"])
    assert excinfo.value.code == 2


def test_master_secret_with_keylog(tmp_path, capsys):
    keylog_file = tmp_path / "keys.log"
    client_random = bytes(range(32))
    server_random = bytes(range(32, 64))
    pre_master = bytes([3, 1]) + bytes(46)

    code = main.main(["-q", "master-secret",
                      "--pre-master-hex", pre_master.hex(),
                      "--client-random-hex", client_random.hex(),
                      "--server-random-hex", server_random.hex(),
                      "-k", str(keylog_file)])
    assert code == 0

    master_hex = last_line(capsys)
    assert len(master_hex) == 96
    assert keylog_file.read_text() == f"CLIENT_RANDOM {client_random.hex()} {master_hex}\n"


def test_master_secret_bad_random_size(tmp_path, capsys):
    code = main.main(["-q", "master-secret",
                      "--pre-master-hex", "0301",
                      "--client-random-hex", "00" * 31,
                      "--server-random-hex", "11" * 32,
                      "-k", str(tmp_path / "keys.log")])
    assert code == 1
    assert "client_random" in capsys.readouterr().err
