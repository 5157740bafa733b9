from functools import lru_cache

from config.settings import settings
from database.db import StudentStore


@lru_cache
def get_store() -> StudentStore:
    # 프로세스당 저장소 하나 (락을 요청 간에 공유해야 하므로)
    return StudentStore(settings.DATA_PATH)
