"""
KZG 설정 묶음 (KZGSettings)
============================

도메인과 SRS, 그리고 선택적인 사전계산 표를 한 단위로 묶는다.
증명 생성/검증 코드는 이 객체 하나만 받는다.

**생명주기**:
  1. 세리머니에서 만든 SRS와 따로 만든 Domain으로 한 번 생성
  2. 필요할 때 사전계산 표를 한 번만 만든다 (get_precomputation)
  3. 이후에는 읽기 전용

**사전계산 표 공유**:
  clone()은 domain, srs와 사전계산 표 자리(slot)를 공유한다.
  한 복제본에서 만든 표는 먼저 만든 복제본에서도 보인다.
  표는 만든 뒤 바뀌지 않으므로 여러 복제본이 동시에 읽어도 안전하다.
  표가 없어도 모든 연산의 결과는 같다 (순수한 성능 최적화).

사용 예시:
    >>> settings = KZGSettings.generate(scale=4, length=16, seed=bytes(32))
    >>> settings.get_precomputation()  # 처음 한 번만 계산
"""

import copy
import logging
import threading

from kzg_core.domain import Domain
from kzg_core.precompute import PrecomputationTable
from kzg_core.srs import SRS

logger = logging.getLogger(__name__)


class _PrecomputationSlot:
    """복제본끼리 공유하는 사전계산 표 자리와 그 잠금."""

    def __init__(self, table=None):
        self.table = table
        self.lock = threading.Lock()


class KZGSettings:
    """Domain + SRS + 선택적 PrecomputationTable.

    속성:
        domain: Domain
        srs: SRS
        precomputation: PrecomputationTable 또는 None
    """

    def __init__(self, domain, srs, precomputation=None):
        self.domain = domain
        self.srs = srs
        self._slot = _PrecomputationSlot(precomputation)

    @classmethod
    def generate(cls, scale, length, seed=None):
        """크기 2^scale 도메인과 길이 length의 SRS로 설정을 만든다."""
        return cls(Domain.from_scale(scale), SRS.generate(length, seed))

    @property
    def secret_g1(self):
        return self.srs.secret_g1

    @property
    def secret_g2(self):
        return self.srs.secret_g2

    @property
    def precomputation(self):
        return self._slot.table

    def get_precomputation(self):
        """사전계산 표를 반환한다. 없으면 한 번만 만든다.

        복제본들과 여러 스레드가 동시에 호출해도 표는 한 번만 만들어지고,
        만들어진 표는 모든 복제본에서 보인다.
        이미 만들어진 뒤에는 잠금 없이 반환한다.
        """
        slot = self._slot
        table = slot.table
        if table is not None:
            return table
        with slot.lock:
            if slot.table is None:
                logger.debug(
                    "building precomputation table for %d G1 points",
                    len(self.secret_g1),
                )
                slot.table = PrecomputationTable.build(self.secret_g1)
            return slot.table

    def clone(self):
        """domain, srs, 사전계산 표 자리를 공유하는 복제본."""
        return copy.copy(self)

    def __copy__(self):
        clone = KZGSettings(self.domain, self.srs)
        clone._slot = self._slot
        return clone

    def __eq__(self, other):
        if not isinstance(other, KZGSettings):
            return False
        return self.domain == other.domain and self.srs == other.srs

    def __repr__(self):
        return (
            f"KZGSettings(domain={self.domain!r}, srs={self.srs!r}, "
            f"precomputation={'present' if self.precomputation is not None else 'absent'})"
        )
