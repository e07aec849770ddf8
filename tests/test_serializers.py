"""
Tests for serializers.py: round trips of domain, SRS and KZGSettings.
"""
import json

from kzg_core.field import FR, G1, G2, Z1, Z2, ec_mul, to_affine
from kzg_core.serializers import (
    serialize_fr, deserialize_fr,
    serialize_g1, deserialize_g1,
    serialize_g2, deserialize_g2,
    serialize_domain, deserialize_domain,
    serialize_srs, deserialize_srs,
    serialize_settings, deserialize_settings,
)
from kzg_core.settings import KZGSettings


class TestPrimitives:
    def test_fr(self):
        assert serialize_fr(FR(12345)) == "12345"
        assert deserialize_fr("12345") == FR(12345)

    def test_g1(self):
        P = ec_mul(G1, 99)
        assert deserialize_g1(serialize_g1(P)) == to_affine(P)

    def test_g2(self):
        Q = ec_mul(G2, 99)
        assert deserialize_g2(serialize_g2(Q)) == to_affine(Q)

    def test_infinity(self):
        assert serialize_g1(Z1) is None
        assert serialize_g2(Z2) is None
        assert deserialize_g1(None) == Z1
        assert deserialize_g2(None) == Z2


class TestSettingsRoundTrip:
    """KZGSettings 직렬화 왕복 테스트."""

    def test_domain(self, domain_small):
        restored = deserialize_domain(serialize_domain(domain_small))
        assert restored == domain_small

    def test_srs(self, srs_small):
        restored = deserialize_srs(serialize_srs(srs_small))
        assert restored.secret_g1 == srs_small.secret_g1
        assert restored.secret_g2 == srs_small.secret_g2

    def test_settings_without_cache(self, settings_small):
        data = serialize_settings(settings_small)
        assert data["precomputation"] is None
        restored = deserialize_settings(json.loads(json.dumps(data)))
        assert restored.domain.expanded_roots_of_unity == settings_small.domain.expanded_roots_of_unity
        assert restored.domain.roots_of_unity == settings_small.domain.roots_of_unity
        assert restored.secret_g1 == settings_small.secret_g1
        assert restored.secret_g2 == settings_small.secret_g2
        assert restored.precomputation is None

    def test_settings_with_cache(self):
        settings = KZGSettings.generate(scale=1, length=2, seed=bytes(32))
        table = settings.get_precomputation()
        data = serialize_settings(settings)
        assert data["precomputation"] is not None
        restored = deserialize_settings(data)
        assert restored.precomputation == table
        assert restored == settings

    def test_missing_cache_key(self, settings_small):
        data = serialize_settings(settings_small)
        del data["precomputation"]
        assert deserialize_settings(data).precomputation is None
