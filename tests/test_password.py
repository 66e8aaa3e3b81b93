"""Password hashing unit tests."""

from bookmarks.auth.password import dummy_verify, hash_password, verify_password


def test_hash_is_bcrypt_and_salted():
    h1 = hash_password("pw1")
    h2 = hash_password("pw1")
    assert h1.startswith("$2b$")
    assert h1 != h2  # random salt


def test_verify_roundtrip():
    h = hash_password("correct horse")
    assert verify_password("correct horse", h)
    assert not verify_password("wrong horse", h)


def test_verify_malformed_hash_is_false():
    assert not verify_password("anything", "not-a-bcrypt-hash")
    assert not verify_password("anything", "")


def test_long_password_truncated_to_72_bytes():
    """bcrypt only looks at the first 72 bytes."""
    base = "a" * 72
    h = hash_password(base + "tail-one")
    assert verify_password(base + "tail-two", h)


def test_dummy_verify_returns_nothing():
    assert dummy_verify("whatever") is None
