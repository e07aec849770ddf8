"""
KZGSettings 저장소
==================

직렬화된 KZGSettings를 TinyDB 테이블 "settings"에 이름으로 저장한다.
path가 없으면 메모리 저장소(MemoryStorage)를 쓴다.

문서 형태: {"name": <이름>, "value": serialize_settings(settings)}

사용 예시:
    >>> store = SettingsStore()               # 메모리
    >>> store = SettingsStore("settings.json")  # 파일
    >>> store.save("mainnet", settings)
    >>> store.load("mainnet") == settings      # True
"""

import logging

from tinydb import Query, TinyDB
from tinydb.storages import MemoryStorage

from kzg_core.serializers import deserialize_settings, serialize_settings

logger = logging.getLogger(__name__)

SETTINGS = Query()


class SettingsStore:
    """이름 → KZGSettings TinyDB 저장소."""

    def __init__(self, path=None):
        if path is None:
            self.db = TinyDB(storage=MemoryStorage)
        else:
            self.db = TinyDB(path)
        self.table = self.db.table("settings")

    def save(self, name, settings):
        """같은 이름이 있으면 덮어쓴다."""
        value = serialize_settings(settings)
        self.table.upsert({"name": name, "value": value}, SETTINGS.name == name)
        logger.debug(
            "saved settings %r (width=%d, srs length=%d)",
            name, settings.domain.max_width, len(settings.secret_g1),
        )

    def load(self, name):
        """저장된 설정을 반환한다. 없으면 None."""
        row = self.table.get(SETTINGS.name == name)
        if row is None:
            return None
        return deserialize_settings(row["value"])

    def remove(self, name):
        self.table.remove(SETTINGS.name == name)

    def names(self):
        return [row["name"] for row in self.table.all()]

    def close(self):
        self.db.close()
