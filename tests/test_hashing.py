import pytest # type: ignore
from cardinal.lib.hashing import HASHERS, fnv1a_32, get_hasher, xxh32_hasher


@pytest.mark.quick
class TestHashingQuick:
    """Quick tests for the built-in hashers."""

    @pytest.mark.parametrize("value,expected", [
        ("", 0x811C9DC5),
        ("a", 0xE40C292C),
        ("foobar", 0xBF9CF968),
    ])
    def test_fnv1a_vectors(self, value, expected):
        assert fnv1a_32(value) == expected

    def test_xxh32_empty_vector(self):
        assert xxh32_hasher(seed=0)("") == 0x02CC5D05

    def test_xxh32_deterministic(self):
        hasher = xxh32_hasher(seed=42)
        assert hasher("visitor-1") == hasher("visitor-1")
        assert xxh32_hasher(seed=42)("visitor-1") == hasher("visitor-1")

    def test_xxh32_seed_changes_hash(self):
        assert xxh32_hasher(seed=1)("visitor-1") != xxh32_hasher(seed=2)("visitor-1")

    def test_outputs_fit_32_bits(self):
        for name in HASHERS:
            hasher = get_hasher(name)
            for i in range(200):
                assert 0 <= hasher(f"value{i}") < (1 << 32)

    def test_get_hasher(self):
        assert get_hasher('fnv1a') is fnv1a_32
        assert get_hasher('xxh32', seed=3)("x") == xxh32_hasher(3)("x")
        with pytest.raises(ValueError, match="xxh32, fnv1a"):
            get_hasher('sha1')
