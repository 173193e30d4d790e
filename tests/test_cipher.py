import pytest

from tixcron.cipher import generate_sha256, generate_sha256_encoded


def test_encoded_known_vector():
    assert (
        generate_sha256_encoded("placeholder", "abc")
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_encoded_empty_payload():
    assert (
        generate_sha256_encoded("placeholder", "")
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


@pytest.mark.parametrize("payload", ["", "abc", "hello world", "ünïcødé"])
def test_raw_digest_matches_hex(payload):
    raw = generate_sha256("placeholder", payload)
    assert len(raw) == 32
    assert raw.hex() == generate_sha256_encoded("placeholder", payload)


def test_key_does_not_affect_digest():
    assert generate_sha256_encoded("one", "data") == generate_sha256_encoded("two", "data")


def test_different_payloads_differ():
    assert generate_sha256("placeholder", "a") != generate_sha256("placeholder", "b")