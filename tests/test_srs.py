"""
Tests for srs.py: generate_trusted_setup and SRS.
"""
import pytest
from kzg_core.field import FR, G1, G2, ec_mul, hash_to_field, to_affine, is_identity
from kzg_core.srs import SRS, generate_trusted_setup

from conftest import SEED, OTHER_SEED


class TestGenerateTrustedSetup:
    """generate_trusted_setup 테스트."""

    def test_lengths(self):
        g1, g2 = generate_trusted_setup(4, SEED)
        assert len(g1) == 4
        assert len(g2) == 4

    def test_zero_length(self):
        assert generate_trusted_setup(0, SEED) == ([], [])

    def test_deterministic(self):
        assert generate_trusted_setup(3, SEED) == generate_trusted_setup(3, SEED)

    def test_different_seeds(self):
        g1_a, _ = generate_trusted_setup(2, SEED)
        g1_b, _ = generate_trusted_setup(2, OTHER_SEED)
        assert g1_a[1] != g1_b[1]

    def test_first_elements_are_generators(self):
        g1, g2 = generate_trusted_setup(2, SEED)
        assert g1[0] == G1
        assert g2[0] == G2

    def test_powers_of_secret(self):
        """secret_g1[i] == s^i · G1 with s = hash_to_field(seed)."""
        g1, g2 = generate_trusted_setup(3, SEED)
        s = hash_to_field(SEED)
        assert g1[2] == to_affine(ec_mul(G1, s * s))
        assert g2[1] == to_affine(ec_mul(G2, s))

    def test_points_in_canonical_form(self):
        g1, g2 = generate_trusted_setup(3, SEED)
        for pt in g1 + g2:
            assert not is_identity(pt)
            assert pt[2] == pt[2].one()

    def test_prefix_stable(self):
        """A longer setup from the same seed extends the shorter one."""
        short_g1, short_g2 = generate_trusted_setup(2, SEED)
        long_g1, long_g2 = generate_trusted_setup(4, SEED)
        assert long_g1[:2] == short_g1
        assert long_g2[:2] == short_g2

    def test_bad_seed_length(self):
        with pytest.raises(ValueError):
            generate_trusted_setup(2, b"short")

    def test_int_seed_rejected(self):
        with pytest.raises(ValueError):
            generate_trusted_setup(2, 32)
        with pytest.raises(ValueError):
            SRS.generate(2, seed=32)


class TestSRS:
    """SRS 테스트."""

    def test_generate(self, srs_small):
        assert len(srs_small) == 8
        assert srs_small.max_degree == 7
        assert srs_small.secret_g1[0] == G1

    def test_generate_matches_function(self, srs_small):
        g1, g2 = generate_trusted_setup(8, SEED)
        assert srs_small.secret_g1 == g1
        assert srs_small.secret_g2 == g2

    def test_generate_without_seed(self):
        srs = SRS.generate(2)
        assert len(srs) == 2
        assert srs.secret_g1[0] == G1

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            SRS([G1, G1], [G2])

    def test_equality(self, srs_small):
        assert SRS.generate(8, seed=SEED) == srs_small
        assert SRS.generate(8, seed=OTHER_SEED) != srs_small
