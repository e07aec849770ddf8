"""
Foundation module tests: field.py
"""
import pytest
from kzg_core.field import (
    FR, CURVE_ORDER, G1, G2, Z1, MAX_SCALE,
    ec_mul, ec_add, ec_neg, ec_eq, is_identity, to_affine,
    multi_pairing, is_gt_identity, hash_to_field,
    get_root_of_unity, scale2_root_of_unity,
)


# =====================================================================
# FR arithmetic
# =====================================================================

class TestFR:
    def test_modular_reduction(self):
        assert FR(CURVE_ORDER) == FR(0)
        assert FR(CURVE_ORDER + 7) == FR(7)

    def test_multiplication(self):
        assert FR(6) * FR(7) == FR(42)

    def test_subtraction_wrap(self):
        assert FR(0) - FR(1) == FR(CURVE_ORDER - 1)

    def test_division_inverse(self):
        a = FR(3)
        assert a * (FR(1) / a) == FR(1)

    def test_one(self):
        assert FR.one() == FR(1)

    def test_field_modulus(self):
        assert FR.field_modulus == CURVE_ORDER


# =====================================================================
# EC operations
# =====================================================================

class TestEC:
    def test_ec_mul_generator(self):
        assert ec_mul(G1, 1) == G1

    def test_ec_mul_zero(self):
        assert is_identity(ec_mul(G1, 0))

    def test_ec_mul_fr(self):
        assert ec_eq(ec_mul(G1, FR(5)), ec_mul(G1, 5))

    def test_ec_mul_modular(self):
        assert is_identity(ec_mul(G1, CURVE_ORDER))

    def test_ec_add_same(self):
        assert ec_eq(ec_add(G1, G1), ec_mul(G1, 2))

    def test_ec_neg(self):
        P = ec_mul(G1, 5)
        assert is_identity(ec_add(P, ec_neg(P)))

    def test_z1_is_identity(self):
        assert is_identity(Z1)


class TestToAffine:
    def test_generator_unchanged(self):
        assert to_affine(G1) == G1
        assert to_affine(G2) == G2

    def test_canonical_representation(self):
        """Same point reached two ways has the same affine tuple."""
        P = ec_add(ec_mul(G1, 3), ec_mul(G1, 4))
        Q = ec_mul(G1, 7)
        assert to_affine(P) == to_affine(Q)
        assert to_affine(P)[2] == 1

    def test_identity(self):
        inf = to_affine(ec_mul(G2, 0))
        assert is_identity(inf)
        assert inf[0] == inf[0].one()


# =====================================================================
# Multi-pairing
# =====================================================================

class TestMultiPairing:
    def test_cancelling_pair(self):
        """e(-P, Q) · e(P, Q) == 1."""
        P = ec_mul(G1, 3)
        result = multi_pairing([ec_neg(P), P], [G2, G2])
        assert is_gt_identity(result)

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            multi_pairing([G1], [G2, G2])


# =====================================================================
# hash_to_field
# =====================================================================

class TestHashToField:
    def test_deterministic(self):
        assert hash_to_field(bytes(32)) == hash_to_field(bytes(32))

    def test_sha256_big_endian(self):
        import hashlib
        seed = bytes(range(32))
        expected = int.from_bytes(hashlib.sha256(seed).digest(), "big") % CURVE_ORDER
        assert hash_to_field(seed) == FR(expected)

    def test_different_seeds(self):
        assert hash_to_field(bytes(32)) != hash_to_field(b"\x01" * 32)

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_wrong_length(self, length):
        with pytest.raises(ValueError):
            hash_to_field(bytes(length))

    @pytest.mark.parametrize("seed", [32, "0" * 32, [0] * 32])
    def test_non_bytes_seed(self, seed):
        """An int like 32 must not be read as bytes(32)."""
        with pytest.raises(ValueError):
            hash_to_field(seed)

    def test_bytearray_seed(self):
        assert hash_to_field(bytearray(32)) == hash_to_field(bytes(32))


# =====================================================================
# Roots of Unity
# =====================================================================

class TestRootsOfUnity:
    def test_get_root_of_unity_1(self):
        assert get_root_of_unity(1) == FR(1)

    def test_primitive_root(self):
        for k in [2, 4, 8, 16]:
            omega = get_root_of_unity(k)
            assert omega ** k == FR(1)
            assert omega ** (k // 2) != FR(1)

    def test_order_two_root_is_minus_one(self):
        assert get_root_of_unity(2) == FR(CURVE_ORDER - 1)

    def test_get_root_non_power_of_2(self):
        with pytest.raises(ValueError):
            get_root_of_unity(3)

    def test_get_root_too_large(self):
        with pytest.raises(ValueError):
            get_root_of_unity(1 << (MAX_SCALE + 1))

    def test_scale2_root(self):
        assert scale2_root_of_unity(3) == get_root_of_unity(8)

    def test_scale2_root_out_of_range(self):
        with pytest.raises(ValueError):
            scale2_root_of_unity(MAX_SCALE + 1)
        with pytest.raises(ValueError):
            scale2_root_of_unity(-1)
