"""
평가 도메인 (Evaluation Domain)
================================

단위근 ω의 거듭제곱 표를 만든다. FFT/IFFT와 blob 인코딩이 이 표를 사용한다.

**expand_root_of_unity**:
  [ω⁰, ω¹, ω², ..., ωⁿ] (ωⁿ = 1에서 닫힘)
  - 곱하기를 width번 넘게 해도 1로 돌아오지 않으면 CycleTooLong
  - 1로 돌아왔지만 길이가 width + 1이 아니면 InvalidScale

  처음으로 1이 되는 지점에서 멈추므로, 길이가 width + 1이라는 것은
  곧 ω의 위수가 정확히 width라는 뜻이다 (ω가 원시 단위근).

**Domain**:
  max_width, root_of_unity, 그리고 세 가지 순서의 단위근 표를 묶는다.
  - expanded_roots_of_unity: [1, ω, ..., ω^(n-1), 1]
  - reverse_roots_of_unity: 위 리스트의 역순
  - roots_of_unity: [1, ω, ..., ω^(n-1)]을 비트 역순(bit-reversal)으로 재배열

사용 예시:
    >>> domain = Domain.from_scale(4)
    >>> domain.max_width                 # 16
    >>> len(domain.expanded_roots_of_unity)  # 17
"""

from kzg_core.field import FR, scale2_root_of_unity


class DomainError(ValueError):
    """(root, width) 쌍이 구조적으로 잘못되었다."""


class CycleTooLong(DomainError):
    """단위근이 width번 안에 1로 돌아오지 않는다."""


class InvalidScale(DomainError):
    """단위근이 1로 돌아왔지만 위수가 width와 다르다."""


def expand_root_of_unity(root, width):
    """단위근의 거듭제곱을 1로 돌아올 때까지 나열한다.

    Args:
        root: 단위근 ω (FR)
        width: 도메인 크기 n

    Returns:
        list[FR]: [1, ω, ω², ..., ωⁿ = 1] (길이 n + 1)

    Raises:
        CycleTooLong: 길이가 width를 넘도록 1로 돌아오지 않을 때
        InvalidScale: 닫힌 길이가 width + 1이 아닐 때

    예시:
        >>> omega = get_root_of_unity(4)
        >>> expand_root_of_unity(omega, 4)   # [1, ω, ω², ω³, 1]
        >>> expand_root_of_unity(FR(1), 4)   # InvalidScale ([1, 1]에서 닫힘)
    """
    if not isinstance(root, FR):
        root = FR(root)

    generated_powers = [FR.one(), root]
    while generated_powers[-1] != FR.one():
        if len(generated_powers) > width:
            raise CycleTooLong(
                f"단위근이 {width}번 안에 1로 돌아오지 않습니다"
            )
        generated_powers.append(generated_powers[-1] * root)

    if len(generated_powers) != width + 1:
        raise InvalidScale(
            f"단위근의 위수 {len(generated_powers) - 1}가 도메인 크기 {width}와 다릅니다"
        )

    return generated_powers


def reverse_bit_order(values):
    """인덱스를 비트 역순으로 재배열한 새 리스트를 반환한다.

    길이 n = 2^k일 때 결과[i] = values[rev_k(i)].

    Raises:
        ValueError: 길이가 2의 거듭제곱이 아닐 때

    예시:
        >>> reverse_bit_order([0, 1, 2, 3, 4, 5, 6, 7])
        [0, 4, 2, 6, 1, 5, 3, 7]
    """
    n = len(values)
    if n == 0 or (n & (n - 1)) != 0:
        raise ValueError(f"길이는 2의 거듭제곱이어야 합니다: {n}")
    bits = n.bit_length() - 1
    result = []
    for i in range(n):
        rev = int(format(i, f"0{bits}b")[::-1], 2) if bits else 0
        result.append(values[rev])
    return result


class Domain:
    """크기 max_width의 평가 도메인.

    속성:
        max_width: 도메인 크기 n
        root_of_unity: n차 원시 단위근 ω
        expanded_roots_of_unity: [1, ω, ..., ωⁿ] (길이 n + 1)
        reverse_roots_of_unity: expanded_roots_of_unity의 역순
        roots_of_unity: [1, ω, ..., ω^(n-1)]의 비트 역순 배열
    """

    def __init__(self, max_width, root_of_unity, expanded_roots_of_unity,
                 reverse_roots_of_unity, roots_of_unity):
        self.max_width = max_width
        self.root_of_unity = root_of_unity
        self.expanded_roots_of_unity = expanded_roots_of_unity
        self.reverse_roots_of_unity = reverse_roots_of_unity
        self.roots_of_unity = roots_of_unity

    @classmethod
    def from_root(cls, root, width):
        """단위근과 크기에서 도메인을 만든다.

        Raises:
            CycleTooLong, InvalidScale: expand_root_of_unity 참고
            ValueError: width가 2의 거듭제곱이 아니어서 비트 역순을 만들 수 없을 때
        """
        if not isinstance(root, FR):
            root = FR(root)
        expanded = expand_root_of_unity(root, width)
        reverse = list(reversed(expanded))
        roots = reverse_bit_order(expanded[:width])
        return cls(width, root, expanded, reverse, roots)

    @classmethod
    def from_scale(cls, scale):
        """크기 2^scale 도메인. 원시 단위근은 scale2_root_of_unity로 고른다."""
        return cls.from_root(scale2_root_of_unity(scale), 1 << scale)

    def __eq__(self, other):
        if not isinstance(other, Domain):
            return False
        return (
            self.max_width == other.max_width
            and self.root_of_unity == other.root_of_unity
            and self.expanded_roots_of_unity == other.expanded_roots_of_unity
            and self.reverse_roots_of_unity == other.reverse_roots_of_unity
            and self.roots_of_unity == other.roots_of_unity
        )

    def __repr__(self):
        return f"Domain(max_width={self.max_width})"
