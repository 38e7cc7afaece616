from app.core.hashing import Hasher


def test_hash_and_verify():
    hashed = Hasher.hash_password("secret1")
    assert hashed != "secret1"
    assert hashed.startswith("$2")
    assert Hasher.verify_password("secret1", hashed)
    assert not Hasher.verify_password("secret2", hashed)


def test_long_passwords_are_truncated_to_72_bytes():
    base = "x" * 72
    hashed = Hasher.hash_password(base + "tail-one")
    assert Hasher.verify_password(base + "tail-two", hashed)


def test_truncation_keeps_utf8_intact():
    password = "é" * 40  # 80 bytes
    truncated = Hasher._truncate_password(password)
    assert len(truncated.encode("utf-8")) <= 72
    assert truncated == "é" * 36


def test_unknown_or_missing_hash_never_verifies():
    assert not Hasher.verify_password("secret1", "plain-text")
    assert not Hasher.verify_password("secret1", None)
