"""
고정 기저(fixed-base) 사전계산 표
==================================

SRS의 G1 점들은 커밋할 때마다 같은 기저로 쓰이므로, 각 기저 Pᵢ에 대해
[Pᵢ, 2·Pᵢ, 4·Pᵢ, ..., 2^(k-1)·Pᵢ]를 미리 계산해 두면 스칼라 곱셈이
덧셈만으로 끝난다 (k = 스칼라 필드 비트 수).

표는 만들기 비싸지만 한 번 만들면 바뀌지 않으므로 여러 KZGSettings가
참조를 공유해도 안전하다. 표가 없어도 결과는 같아야 한다:
    PrecomputationTable.build(g1).multi_scalar_mul(scalars)
    == Σ scalarsᵢ · g1ᵢ
"""

from kzg_core.field import CURVE_ORDER, FR, Z1, ec_add, to_affine

SCALAR_BITS = CURVE_ORDER.bit_length()


class PrecomputationTable:
    """기저별 2의 거듭제곱 배수 표.

    속성:
        rows: rows[i][j] = 2ʲ · bases[i] (정규 아핀 형태, 튜플이라 불변)
    """

    def __init__(self, rows):
        self.rows = tuple(tuple(row) for row in rows)

    @classmethod
    def build(cls, bases):
        """기저 점 리스트에서 표를 만든다."""
        rows = []
        for base in bases:
            row = []
            current = base
            for _ in range(SCALAR_BITS):
                row.append(to_affine(current))
                current = ec_add(current, current)
            rows.append(row)
        return cls(rows)

    def multi_scalar_mul(self, scalars):
        """Σ scalarsᵢ · basesᵢ 를 계산한다.

        Raises:
            ValueError: 스칼라 개수가 기저 개수보다 많을 때
        """
        if len(scalars) > len(self.rows):
            raise ValueError(
                f"스칼라 {len(scalars)}개가 기저 {len(self.rows)}개보다 많습니다"
            )
        result = Z1
        for row, scalar in zip(self.rows, scalars):
            k = int(scalar) if isinstance(scalar, FR) else scalar % CURVE_ORDER
            bit = 0
            while k:
                if k & 1:
                    result = ec_add(result, row[bit])
                k >>= 1
                bit += 1
        return result

    def __len__(self):
        return len(self.rows)

    def __eq__(self, other):
        if not isinstance(other, PrecomputationTable):
            return False
        return self.rows == other.rows
