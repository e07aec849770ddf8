"""
KZG 데이터 직렬화/역직렬화 헬퍼
================================

TinyDB(JSON)에 저장 가능한 형태로 KZG 객체를 변환한다.
FR, G1, G2, Domain, SRS, PrecomputationTable, KZGSettings.

- FR: 10진수 문자열
- G1: [x, y] (아핀 좌표 문자열), 무한원점은 None
- G2: [[x0, x1], [y0, y1]], 무한원점은 None
- 사전계산 표가 없으면 "precomputation": None
"""

from py_ecc import optimized_bls12_381 as bls12_381

from kzg_core.domain import Domain
from kzg_core.field import FR, Z1, Z2, is_identity, to_affine
from kzg_core.precompute import PrecomputationTable
from kzg_core.settings import KZGSettings
from kzg_core.srs import SRS


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) → FR"""
    return FR(int(s))


def serialize_fr_list(lst):
    """list[FR] → list[str]"""
    return [serialize_fr(v) for v in lst]


def deserialize_fr_list(data):
    """list[str] → list[FR]"""
    return [deserialize_fr(s) for s in data]


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if is_identity(point):
        return None
    x, y, _ = to_affine(point)
    return [str(int(x)), str(int(y))]


def deserialize_g1(data):
    """[str, str] or None → G1 point (z = 1)"""
    if data is None:
        return Z1
    return (bls12_381.FQ(int(data[0])), bls12_381.FQ(int(data[1])), bls12_381.FQ.one())


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if is_identity(point):
        return None
    x, y, _ = to_affine(point)
    return [
        [str(int(x.coeffs[0])), str(int(x.coeffs[1]))],
        [str(int(y.coeffs[0])), str(int(y.coeffs[1]))],
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point (z = 1)"""
    if data is None:
        return Z2
    return (
        bls12_381.FQ2([int(data[0][0]), int(data[0][1])]),
        bls12_381.FQ2([int(data[1][0]), int(data[1][1])]),
        bls12_381.FQ2.one(),
    )


# ─── Domain ───

def serialize_domain(domain):
    """Domain → dict"""
    return {
        "max_width": domain.max_width,
        "root_of_unity": serialize_fr(domain.root_of_unity),
        "expanded_roots_of_unity": serialize_fr_list(domain.expanded_roots_of_unity),
        "reverse_roots_of_unity": serialize_fr_list(domain.reverse_roots_of_unity),
        "roots_of_unity": serialize_fr_list(domain.roots_of_unity),
    }


def deserialize_domain(data):
    """dict → Domain"""
    return Domain(
        data["max_width"],
        deserialize_fr(data["root_of_unity"]),
        deserialize_fr_list(data["expanded_roots_of_unity"]),
        deserialize_fr_list(data["reverse_roots_of_unity"]),
        deserialize_fr_list(data["roots_of_unity"]),
    )


# ─── SRS ───

def serialize_srs(srs):
    """SRS → dict"""
    return {
        "secret_g1": [serialize_g1(p) for p in srs.secret_g1],
        "secret_g2": [serialize_g2(p) for p in srs.secret_g2],
    }


def deserialize_srs(data):
    """dict → SRS"""
    return SRS(
        [deserialize_g1(p) for p in data["secret_g1"]],
        [deserialize_g2(p) for p in data["secret_g2"]],
    )


# ─── PrecomputationTable ───

def serialize_precomputation(table):
    """PrecomputationTable or None → list[list[G1]] or None"""
    if table is None:
        return None
    return [[serialize_g1(p) for p in row] for row in table.rows]


def deserialize_precomputation(data):
    """list[list[G1]] or None → PrecomputationTable or None"""
    if data is None:
        return None
    return PrecomputationTable([[deserialize_g1(p) for p in row] for row in data])


# ─── KZGSettings ───

def serialize_settings(settings):
    """KZGSettings → dict"""
    srs = serialize_srs(settings.srs)
    return {
        "domain": serialize_domain(settings.domain),
        "secret_g1": srs["secret_g1"],
        "secret_g2": srs["secret_g2"],
        "precomputation": serialize_precomputation(settings.precomputation),
    }


def deserialize_settings(data):
    """dict → KZGSettings"""
    return KZGSettings(
        deserialize_domain(data["domain"]),
        deserialize_srs({"secret_g1": data["secret_g1"], "secret_g2": data["secret_g2"]}),
        deserialize_precomputation(data.get("precomputation")),
    )

