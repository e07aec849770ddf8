import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from kzg_core.domain import Domain
from kzg_core.settings import KZGSettings
from kzg_core.srs import SRS


# ── 테스트 상수 ──
SEED = bytes(range(32))
OTHER_SEED = bytes(range(1, 33))


@pytest.fixture(scope="session")
def srs_small():
    """Small SRS for fast tests (length=8)."""
    return SRS.generate(8, seed=SEED)


@pytest.fixture(scope="session")
def domain_small():
    """Domain of width 8."""
    return Domain.from_scale(3)


@pytest.fixture
def settings_small(domain_small, srs_small):
    """Fresh settings per test so the precomputation slot starts empty."""
    return KZGSettings(domain_small, srs_small)
