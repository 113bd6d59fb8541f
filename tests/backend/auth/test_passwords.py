import pytest

from backend.auth.passwords import hash_password, verify_password


def test_hash_password_is_salted_and_verifiable() -> None:
    first = hash_password('correct horse')
    second = hash_password('correct horse')

    assert first != second
    assert 'correct horse' not in first
    assert verify_password('correct horse', first)
    assert not verify_password('wrong horse', first)


def test_hash_password_rejects_blank_password() -> None:
    with pytest.raises(ValueError):
        hash_password('')


def test_verify_password_rejects_unusable_hash() -> None:
    assert not verify_password('anything', '')
    assert not verify_password('anything', 'not-a-known-hash-format')
