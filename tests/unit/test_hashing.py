"""
Digest Adapter Unit Tests
Tests for merkletree/crypto/hashing.py

Tests:
- digest() on strings and non-strings
- resolve_digest() for names, callables and invalid specs
- serialize_pair() order sensitivity
"""
import hashlib
import logging

import pytest

from merkletree.crypto.hashing import (
    digest,
    hash_canonical,
    hash_pair,
    is_algorithm_available,
    resolve_digest,
    serialize_pair,
)
from merkletree.schemas.errors import (
    ErrorCodes,
    InvalidArgumentException,
    UnsupportedAlgorithmException,
)


class TestDigest:
    """Tests for digest() function."""

    def test_string_hashed_verbatim(self):
        """Strings are UTF-8 encoded, not JSON quoted."""
        assert digest("sha256", "hello world") == hashlib.sha256(b"hello world").hexdigest()

    def test_non_string_canonicalized(self):
        """Lists serialize without whitespace."""
        assert digest("sha256", [1, 2]) == hashlib.sha256(b"[1,2]").hexdigest()

    def test_dict_keys_sorted(self):
        """Key order does not affect the digest."""
        assert digest("sha256", {"b": 2, "a": 1}) == digest("sha256", {"a": 1, "b": 2})

    def test_unicode_not_escaped(self):
        """Non-ASCII text is hashed as UTF-8."""
        expected = hashlib.sha256('["é",1]'.encode("utf-8")).hexdigest()

        assert digest("sha256", ["é", 1]) == expected

    @pytest.mark.parametrize("algorithm,length", [
        ("sha1", 40),
        ("sha224", 56),
        ("sha256", 64),
        ("sha384", 96),
        ("sha512", 128),
        ("md5", 32),
    ])
    def test_hex_length_per_algorithm(self, algorithm, length):
        result = digest(algorithm, "x")

        assert len(result) == length
        assert result == result.lower()

    def test_unknown_algorithm_raises(self):
        with pytest.raises(UnsupportedAlgorithmException) as exc_info:
            digest("sha9000", "x")

        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_ALGORITHM
        assert "provider_error" in exc_info.value.details

    def test_variable_length_algorithm_rejected(self):
        """shake_* digests need an explicit length."""
        with pytest.raises(UnsupportedAlgorithmException, match="variable output length"):
            digest("shake_128", "x")

    @pytest.mark.parametrize("algorithm", [None, 1, b"sha256"])
    def test_non_string_algorithm_raises(self, algorithm):
        with pytest.raises(InvalidArgumentException) as exc_info:
            digest(algorithm, "x")

        assert exc_info.value.code == ErrorCodes.INVALID_ARGUMENT
        assert exc_info.value.details == {"argument": "algorithm", "type": type(algorithm).__name__}

    def test_integral_float_value(self):
        assert digest("sha256", [1.0, 2.0]) == digest("sha256", [1, 2])


class TestHashCanonical:
    """Tests for hash_canonical() function."""

    def test_quotes_strings(self):
        """Strings become JSON literals before hashing."""
        assert hash_canonical("a") == hashlib.sha256(b'"a"').hexdigest()

    def test_string_and_int_differ(self):
        assert hash_canonical("1") != hash_canonical(1)

    def test_algorithm_parameter(self):
        assert len(hash_canonical({"a": 1}, algorithm="sha1")) == 40


class TestIsAlgorithmAvailable:
    """Tests for is_algorithm_available()."""

    @pytest.mark.parametrize("name", ["sha256", "SHA256", "sha1", "blake2b"])
    def test_known(self, name):
        assert is_algorithm_available(name)

    @pytest.mark.parametrize("name", ["", "nope", "shake_256", None, 1])
    def test_unknown(self, name):
        assert not is_algorithm_available(name)


class TestResolveDigest:
    """Tests for resolve_digest()."""

    def test_name_resolves_to_digest(self):
        fn = resolve_digest("sha256")

        assert fn("abc") == hashlib.sha256(b"abc").hexdigest()

    def test_name_is_normalized(self):
        fn = resolve_digest("  SHA1 ")

        assert fn("abc") == hashlib.sha1(b"abc").hexdigest()

    def test_callable_returned_unchanged(self):
        def custom(text):
            return text.upper()

        assert resolve_digest(custom) is custom

    @pytest.mark.parametrize("spec", [None, 1, 1.5, b"sha256", ("sha256",)])
    def test_invalid_spec_raises(self, spec):
        with pytest.raises(InvalidArgumentException) as exc_info:
            resolve_digest(spec)

        assert exc_info.value.code == ErrorCodes.INVALID_ARGUMENT
        assert exc_info.value.details["type"] == type(spec).__name__

    def test_invalid_spec_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_digest(42)

    def test_unknown_name_fails_eagerly(self, caplog):
        """Resolution fails before any hashing happens, with a warning logged."""
        caplog.set_level(logging.WARNING, logger="merkletree.crypto.hashing")

        with pytest.raises(UnsupportedAlgorithmException):
            resolve_digest("md9")

        assert "md9" in caplog.text


class TestPairs:
    """Tests for serialize_pair() and hash_pair()."""

    def test_serialize_pair_compact(self):
        assert serialize_pair(1, 2) == "[1,2]"
        assert serialize_pair("ab", "cd") == '["ab","cd"]'

    def test_serialize_pair_order_sensitive(self):
        assert serialize_pair("a", "b") != serialize_pair("b", "a")

    def test_serialize_pair_nested(self):
        assert serialize_pair({"k": [1, None]}, None) == '[{"k":[1,null]},null]'

    def test_hash_pair_uses_digest_fn(self):
        fn = resolve_digest("sha256")

        assert hash_pair(fn, 1, 2) == hashlib.sha256(b"[1,2]").hexdigest()

    def test_hash_pair_rejects_non_string_output(self):
        with pytest.raises(InvalidArgumentException, match="expected str"):
            hash_pair(lambda text: 123, 1, 2)
