"""
KZG 기반 모듈: 스칼라 필드(Scalar Field) 및 BLS12-381 곡선 연산
=================================================================

이 모듈은 KZG 커밋먼트 전체에서 사용되는 기본 대수적 도구를 정의한다.

**유한체 FR**:
  BLS12-381 곡선의 스칼라 필드. 도메인, SRS, 다항식 평가에서 사용되는
  기본 산술 단위이다.
  - 위수(order) r ≈ 2^255, 소수체(prime field)
  - r - 1 = 2^32 × m (m은 홀수) → 최대 2^32차 단위근을 지원

**타원곡선 연산**:
  G1, G2 그룹 연산과 다중 페어링(multi-pairing).
  py_ecc의 optimized_bls12_381 (동차 사영 좌표)를 사용한다.
  점은 (x, y, z) 삼중쌍이며 z == 0이면 무한원점이다.

**hash_to_field**:
  32바이트 시드를 스칼라로 바꾼다 (EIP-4844 hash_to_bls_field:
  SHA-256 → big-endian 정수 → mod r).

사용 예시:
    >>> from kzg_core.field import FR, G1, ec_mul
    >>> a = FR(3) * FR(7)     # FR(21)
    >>> P = ec_mul(G1, 5)      # 5·G1
"""

import hashlib

from py_ecc import optimized_bls12_381 as bls12_381
from py_ecc.fields import bls12_381_FQ as FQ


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """BLS12-381 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.

    예시:
        >>> x = FR(3)
        >>> x * x           # FR(9)
        >>> FR(1) / FR(3)   # 3의 모듈러 역원
    """
    field_modulus = bls12_381.curve_order


# 곡선 위수 (스칼라 필드 크기)
CURVE_ORDER = bls12_381.curve_order

# FR*의 생성자. ω_n = 7^((r-1)/n) (EIP-4844 PRIMITIVE_ROOT_OF_UNITY)
PRIMITIVE_ROOT_OF_UNITY = 7

# r - 1의 2-adicity
MAX_SCALE = 32


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

G1 = bls12_381.G1
G2 = bls12_381.G2

# 무한원점 (항등원)
Z1 = bls12_381.Z1
Z2 = bls12_381.Z2


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점, 사영 좌표)
    """
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bls12_381.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bls12_381.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원: -point (y좌표 반전)."""
    return bls12_381.neg(point)


def ec_eq(p1, p2):
    """사영 좌표 표현과 무관하게 두 점이 같은지 비교한다."""
    return bls12_381.eq(p1, p2)


def is_identity(point):
    """무한원점인지 확인."""
    return bls12_381.is_inf(point)


def to_affine(point):
    """점을 정규(canonical) 아핀 형태 (x/z, y/z, 1)로 변환한다.

    같은 점은 항상 같은 튜플이 되므로 == 비교와 직렬화에 안전하다.
    무한원점은 (1, 1, 0)으로 정규화한다.
    """
    x, y, z = point
    if z == z.zero():
        return (x.one(), x.one(), x.zero())
    ax, ay = bls12_381.normalize(point)
    return (ax, ay, ax.one())


def multi_pairing(g1_points, g2_points):
    """다중 페어링 Π e(Pᵢ, Qᵢ) → GT.

    각 쌍의 Miller loop 결과를 곱한 뒤 최종 지수승(final exponentiation)을
    한 번만 수행한다. 개별 페어링을 따로 계산하는 것보다 빠르다.

    Args:
        g1_points: G1 점 리스트
        g2_points: G2 점 리스트 (g1_points와 같은 길이)

    Returns:
        FQ12: 페어링 곱

    Raises:
        ValueError: 길이가 다르거나, 점이 곡선 위에 있지 않을 때
            (py_ecc 버전에 따라 AssertionError)

    주의:
        py_ecc의 pairing 인자 순서는 (G2, G1)이다.
    """
    if len(g1_points) != len(g2_points):
        raise ValueError(
            f"G1 점 {len(g1_points)}개와 G2 점 {len(g2_points)}개의 개수가 다릅니다"
        )
    result = bls12_381.FQ12.one()
    for p, q in zip(g1_points, g2_points):
        result = result * bls12_381.pairing(q, p, final_exponentiate=False)
    return bls12_381.final_exponentiate(result)


def is_gt_identity(value):
    """페어링 타깃 그룹 원소가 항등원(1)인지 확인."""
    return value == bls12_381.FQ12.one()


# ─────────────────────────────────────────────────────────────────────
# hash_to_field
# ─────────────────────────────────────────────────────────────────────

def hash_to_field(seed):
    """32바이트 시드를 스칼라 필드 원소로 해시한다.

    s = int(SHA-256(seed), big-endian) mod r

    Args:
        seed: 정확히 32바이트의 bytes

    Returns:
        FR: 해시된 스칼라

    Raises:
        ValueError: 시드가 bytes가 아니거나 32바이트가 아닐 때
    """
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise ValueError(f"시드는 bytes여야 합니다: {type(seed).__name__}")
    seed = bytes(seed)
    if len(seed) != 32:
        raise ValueError(f"시드는 32바이트여야 합니다: {len(seed)}바이트")
    digest = hashlib.sha256(seed).digest()
    return FR(int.from_bytes(digest, "big") % CURVE_ORDER)


# ─────────────────────────────────────────────────────────────────────
# 단위근 (Roots of Unity)
# ─────────────────────────────────────────────────────────────────────

def get_root_of_unity(n):
    """n차 원시 단위근 ω를 반환한다.

    ω = 7^((r-1)/n) 이면 ω^n = 1이고, 7이 FR*의 생성자이므로
    ω^k ≠ 1 (0 < k < n)이다.

    Args:
        n: 단위근의 차수 (2의 거듭제곱, ≤ 2^32)

    Returns:
        FR: n차 원시 단위근

    Raises:
        ValueError: n이 2의 거듭제곱이 아니거나 2^32을 초과할 때

    예시:
        >>> omega = get_root_of_unity(4)
        >>> omega ** 4 == FR(1)  # True
        >>> omega ** 2 != FR(1)  # True
    """
    if n < 1 or (n & (n - 1)) != 0:
        raise ValueError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if n > (1 << MAX_SCALE):
        raise ValueError(f"n은 2^{MAX_SCALE} 이하여야 합니다: {n}")
    if n == 1:
        return FR(1)
    return FR(PRIMITIVE_ROOT_OF_UNITY) ** ((CURVE_ORDER - 1) // n)


def scale2_root_of_unity(scale):
    """2^scale차 원시 단위근."""
    if not 0 <= scale <= MAX_SCALE:
        raise ValueError(f"scale은 0 이상 {MAX_SCALE} 이하여야 합니다: {scale}")
    return get_root_of_unity(1 << scale)
