"""
다항식(Polynomial) 클래스와 평가
=================================

**Polynomial 클래스**:
  계수(coefficient) 표현 기반 다항식. p(x) = c₀ + c₁·x + c₂·x² + ...
  산술 연산자(+, -, *)와 평가(evaluation)를 지원한다.

**eval_poly**:
  계수 리스트(또는 Polynomial)를 한 점에서 평가한다.
  - 빈 계수 리스트는 영 다항식: 모든 x에서 0
  - [c]는 상수 다항식: 모든 x에서 c

**poly_div**:
  열기 증명의 몫 (p(x) - y) / (x - z)를 계산하는 데 쓰인다.

사용 예시:
    >>> from kzg_core.polynomial import Polynomial, eval_poly
    >>> eval_poly([FR(1), FR(2), FR(3)], FR(2))  # 1 + 4 + 12 = FR(17)
"""

from kzg_core.field import FR


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 리스트로 표현: coeffs = [c₀, c₁, c₂, ...] → c₀ + c₁x + c₂x² + ...
    생성 시 계수를 복사하므로 호출자의 리스트는 바뀌지 않는다.

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> q = Polynomial([FR(3), FR(4)])  # 3 + 4x
        >>> p * q                            # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: FR 원소(또는 정수)의 시퀀스 [c₀, c₁, ...].
                    None이면 영 다항식(0)을 생성한다.
        """
        if coeffs is None:
            self.coeffs = [FR(0)]
        else:
            self.coeffs = [c if isinstance(c, FR) else FR(c) for c in coeffs]
        self._trim()

    def _trim(self):
        """최고차 계수가 0인 항을 제거한다. 예: [1, 2, 0, 0] → [1, 2]"""
        while len(self.coeffs) > 1 and self.coeffs[-1] == FR(0):
            self.coeffs.pop()

    @property
    def degree(self):
        """다항식의 차수. 영 다항식의 차수는 0으로 정의한다."""
        if self.is_zero():
            return 0
        return len(self.coeffs) - 1

    def is_zero(self):
        """영 다항식인지 확인 (빈 계수 리스트 포함)."""
        return all(c == FR(0) for c in self.coeffs)

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        p(x) = c₀ + x(c₁ + x(c₂ + ...))

        Args:
            point: 평가할 FR 원소

        Returns:
            FR: p(point) 값
        """
        if not isinstance(point, FR):
            point = FR(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a + b)
        return Polynomial(result)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a - b)
        return Polynomial(result)

    def __mul__(self, other):
        """다항식 곱셈 (O(n²) 나이브) 또는 스칼라곱."""
        if isinstance(other, (int, FR)):
            if isinstance(other, int):
                other = FR(other)
            return Polynomial([c * other for c in self.coeffs])
        if not self.coeffs or not other.coeffs:
            return Polynomial.zero()
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def __eq__(self, other):
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return False
        if self.is_zero() and other.is_zero():
            return True
        return self.coeffs == other.coeffs

    @classmethod
    def zero(cls):
        """영 다항식 p(x) = 0."""
        return cls([FR(0)])


def eval_poly(coefficients, x):
    """계수 리스트로 정의된 다항식의 p(x)를 계산한다.

    Args:
        coefficients: Polynomial 또는 FR 시퀀스 (인덱스 i = xⁱ의 계수)
        x: 평가 점

    Returns:
        FR: p(x). 빈 계수 리스트이면 FR(0)
    """
    if not isinstance(coefficients, Polynomial):
        coefficients = Polynomial(coefficients)
    return coefficients.evaluate(x)


# ─────────────────────────────────────────────────────────────────────
# 다항식 나눗셈 (Polynomial Long Division)
# ─────────────────────────────────────────────────────────────────────

def poly_div(a, b):
    """다항식 나눗셈: a(x) = b(x) · q(x) + r(x).

    Args:
        a: 피제수 다항식 (Polynomial)
        b: 제수 다항식 (Polynomial)

    Returns:
        tuple: (몫 Polynomial, 나머지 Polynomial)

    Raises:
        ValueError: 제수가 영 다항식인 경우

    예시:
        >>> a = Polynomial([FR(-1), FR(0), FR(1)])  # x² - 1
        >>> b = Polynomial([FR(-1), FR(1)])          # x - 1
        >>> poly_div(a, b)                           # (x + 1, 0)
    """
    if b.is_zero():
        raise ValueError("0으로 나눌 수 없습니다")

    remainder = list(a.coeffs)
    divisor = b.coeffs
    deg_b = len(divisor) - 1
    deg_a = len(remainder) - 1

    if deg_a < deg_b:
        return Polynomial.zero(), Polynomial(remainder)

    quotient = [FR(0)] * (deg_a - deg_b + 1)
    lead_inv = FR(1) / divisor[-1]

    for i in range(deg_a - deg_b, -1, -1):
        coeff = remainder[i + deg_b] * lead_inv
        quotient[i] = coeff
        for j in range(deg_b + 1):
            remainder[i + j] = remainder[i + j] - coeff * divisor[j]

    return Polynomial(quotient), Polynomial(remainder[:deg_b] or [FR(0)])
