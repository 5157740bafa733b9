import json
import logging
import shutil
import threading
from pathlib import Path
from typing import Any, List, Union

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """학생 데이터 파일 쓰기 실패"""


class StudentStore:
    """
    학생 레코드 배열을 JSON 파일 하나에 저장하는 저장소.

    - 요청마다 파일 전체를 읽고, 메모리에서 수정한 뒤, 파일 전체를 다시 씁니다.
    - 읽기 실패(파일 없음, 손상된 JSON, 배열이 아닌 문서)는 로그만 남기고 빈 목록으로 취급.
    - 쓰기 실패는 StorageError 로 올려보냅니다.
    - lock: 읽기-수정-쓰기 한 사이클 동안 서비스 레이어가 잡는 프로세스 내부 락.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.lock = threading.Lock()

    def read_students(self) -> List[Any]:
        try:
            content = self.path.read_text(encoding="utf-8")
            data = json.loads(content)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"{self.path} does not hold a JSON array, treating as empty")
            return []
        return data

    def write_students(self, records: List[Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(records, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Error writing {self.path}: {e}")
            raise StorageError(str(e)) from e

    def seed_from(self, source: Union[str, Path]) -> bool:
        """최초 기동 시 원본 데이터 파일을 저장소 경로로 복사 (실패해도 서버는 계속 뜸)"""
        source = Path(source)
        if source.resolve() == self.path.resolve():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, self.path)
        except OSError as e:
            logger.warning(f"No initial students.json copy made: {e}")
            return False
        logger.info(f"Copied {source} to {self.path}")
        return True
