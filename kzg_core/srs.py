"""
Structured Reference String (SRS)
==================================

32바이트 시드에서 결정론적으로 신뢰 설정(trusted setup)을 생성한다.

**SRS란?**
  KZG 다항식 커밋먼트 스킴에 필요한 공개 파라미터이다.

  SRS = {
      secret_g1: [G1, s·G1, s²·G1, ..., s^(n-1)·G1]
      secret_g2: [G2, s·G2, s²·G2, ..., s^(n-1)·G2]
  }

**보안**:
  s = hash_to_field(seed)는 "toxic waste"이다. s를 아는 사람은 임의의
  거짓 증명을 만들 수 있으므로 s와 그 거듭제곱은 이 함수 밖으로 나가지
  않으며, 저장하거나 로그로 남기지 않는다. 시드 역시 호출자가 폐기해야 한다.

사용 예시:
    >>> g1, g2 = generate_trusted_setup(4, bytes(32))
    >>> srs = SRS.generate(16, seed=bytes(32))
    >>> len(srs)  # 16
"""

import logging
import secrets

from kzg_core.field import FR, G1, G2, ec_mul, hash_to_field, to_affine

logger = logging.getLogger(__name__)


def generate_trusted_setup(length, seed):
    """SRS의 두 점 시퀀스를 생성한다.

    같은 (length, seed)는 항상 같은 결과를 낸다.

    Args:
        length: 각 시퀀스의 길이 n (0이면 빈 리스트 두 개)
        seed: 32바이트 시드

    Returns:
        tuple: (secret_g1, secret_g2), 정규 아핀 형태의 점 리스트

    Raises:
        ValueError: 시드가 32바이트가 아닐 때
    """
    s = hash_to_field(seed)
    s_pow = FR.one()

    secret_g1 = []
    secret_g2 = []
    for _ in range(length):
        secret_g1.append(to_affine(ec_mul(G1, s_pow)))
        secret_g2.append(to_affine(ec_mul(G2, s_pow)))
        s_pow = s_pow * s

    logger.debug("generated trusted setup with %d powers", length)
    return secret_g1, secret_g2


class SRS:
    """Structured Reference String: KZG 커밋먼트용 공개 파라미터.

    속성:
        secret_g1: [G1, s·G1, ..., s^(n-1)·G1]
        secret_g2: [G2, s·G2, ..., s^(n-1)·G2]
    """

    def __init__(self, secret_g1, secret_g2):
        if len(secret_g1) != len(secret_g2):
            raise ValueError(
                f"secret_g1 길이 {len(secret_g1)}와 secret_g2 길이 {len(secret_g2)}가 다릅니다"
            )
        self.secret_g1 = secret_g1
        self.secret_g2 = secret_g2

    @classmethod
    def generate(cls, length, seed=None):
        """SRS를 생성한다.

        Args:
            length: 거듭제곱 개수 n (최대 n-1차 다항식을 커밋할 수 있다)
            seed: 32바이트 시드. None이면 무작위 시드를 사용한다
                  (실제 시스템에서는 MPC 세리머니가 시드 역할을 한다).
        """
        if seed is None:
            seed = secrets.token_bytes(32)
        secret_g1, secret_g2 = generate_trusted_setup(length, seed)
        return cls(secret_g1, secret_g2)

    @property
    def max_degree(self):
        """커밋할 수 있는 최대 차수 (n - 1)."""
        return len(self.secret_g1) - 1

    def __len__(self):
        return len(self.secret_g1)

    def __eq__(self, other):
        if not isinstance(other, SRS):
            return False
        return self.secret_g1 == other.secret_g1 and self.secret_g2 == other.secret_g2

    def __repr__(self):
        return f"SRS(length={len(self)})"
