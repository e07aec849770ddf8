"""
KZG 다항식 커밋먼트와 페어링 검증
==================================

**pairings_verify**:
  e(a1, a2) == e(b1, b2) 를 두 번의 페어링 대신 다중 페어링 한 번으로 확인한다.
      e(-a1, a2) · e(b1, b2) == 1

  입력 점이 곡선 위에 있지 않거나 잘못된 형태이면 False를 반환한다.
  "방정식 불성립"과 "잘못된 입력"을 구분하지 않으므로 외부 점의
  곡선/부분군 검증은 호출자의 책임이다.

**커밋먼트와 열기 증명**:
  - 커밋먼트: C = Σᵢ cᵢ · secret_g1[i] = p(s)·G1
  - 증명: π = q(s)·G1, q(x) = (p(x) - y) / (x - z)
  - 검증: e(C - y·G1, G2) == e(π, s·G2 - z·G2)

사용 예시:
    >>> C = commit(poly, settings)
    >>> proof = compute_proof_single(poly, FR(7), settings)
    >>> verify_proof_single(C, proof, FR(7), poly.evaluate(FR(7)), settings)  # True
"""

from kzg_core.field import (
    FR, G1, G2, Z1,
    ec_add, ec_mul, ec_neg, is_gt_identity, multi_pairing, to_affine,
)
from kzg_core.polynomial import Polynomial, poly_div


def pairings_verify(a1, a2, b1, b2):
    """e(a1, a2) == e(b1, b2) 인지 확인한다.

    Args:
        a1, b1: G1 점
        a2, b2: G2 점

    Returns:
        bool: 방정식이 성립하면 True. 성립하지 않거나 입력이 잘못되면 False
    """
    try:
        a1_neg = to_affine(ec_neg(a1))
        g1_points = [a1_neg, to_affine(b1)]
        g2_points = [to_affine(a2), to_affine(b2)]
        product = multi_pairing(g1_points, g2_points)
    except (ValueError, AssertionError, TypeError):
        return False
    return is_gt_identity(product)


def commit(poly, settings):
    """다항식을 KZG 커밋한다.

    C = Σᵢ cᵢ · secret_g1[i] = p(s) · G1

    settings에 사전계산 표가 있으면 표를 사용한다. 결과는 같다.

    Args:
        poly: Polynomial 또는 계수 리스트
        settings: KZGSettings

    Returns:
        G1 점 (정규 아핀 형태)

    Raises:
        ValueError: 계수 개수가 secret_g1 길이를 넘을 때
    """
    if not isinstance(poly, Polynomial):
        poly = Polynomial(poly)
    if len(poly.coeffs) > len(settings.secret_g1):
        raise ValueError(
            f"다항식 계수 {len(poly.coeffs)}개가 SRS 길이 {len(settings.secret_g1)}를 초과합니다"
        )

    if settings.precomputation is not None:
        return to_affine(settings.precomputation.multi_scalar_mul(poly.coeffs))

    result = Z1
    for i, coeff in enumerate(poly.coeffs):
        if coeff == FR(0):
            continue
        result = ec_add(result, ec_mul(settings.secret_g1[i], coeff))
    return to_affine(result)


def compute_proof_single(poly, point, settings):
    """p(z)에 대한 열기 증명 π = commit((p(x) - p(z)) / (x - z))를 만든다.

    Args:
        poly: 열어볼 다항식 p(x)
        point: 평가 점 z
        settings: KZGSettings

    Returns:
        G1 점: 열기 증명 π
    """
    if not isinstance(poly, Polynomial):
        poly = Polynomial(poly)
    if not isinstance(point, FR):
        point = FR(point)

    y = poly.evaluate(point)
    divisor = Polynomial([FR(0) - point, FR(1)])
    quotient, remainder = poly_div(poly - y, divisor)
    if not remainder.is_zero():
        raise ValueError("열기 증명 생성 실패: 나머지가 0이 아닙니다")
    return commit(quotient, settings)


def verify_proof_single(commitment, proof, point, evaluation, settings):
    """KZG 열기 증명을 검증한다.

    e(C - y·G1, G2) == e(π, s·G2 - z·G2)

    Args:
        commitment: 커밋먼트 C (G1)
        proof: 열기 증명 π (G1)
        point: 평가 점 z
        evaluation: 주장하는 평가값 y = p(z)
        settings: KZGSettings (secret_g2 길이가 2 이상이어야 한다)

    Returns:
        bool
    """
    if not isinstance(point, FR):
        point = FR(point)
    if not isinstance(evaluation, FR):
        evaluation = FR(evaluation)
    if len(settings.secret_g2) < 2:
        raise ValueError("검증에는 secret_g2 원소가 2개 이상 필요합니다")

    s_minus_z = ec_add(settings.secret_g2[1], ec_neg(ec_mul(G2, point)))
    commitment_minus_y = ec_add(commitment, ec_neg(ec_mul(G1, evaluation)))
    return pairings_verify(commitment_minus_y, G2, proof, s_minus_z)
