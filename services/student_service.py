import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from database.db import StudentStore, StorageError
from schemas.students import STUDENT_FIELDS, StudentRecord

logger = logging.getLogger(__name__)


# ==========================================================
# 서비스 예외 (middlewares/error_handler.py 에서 {"error": message} 로 변환)
# ==========================================================

class StudentServiceError(Exception):
    status_code = 500
    message = "Internal server error."

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldsError(StudentServiceError):
    status_code = 400
    message = "All fields are required."


class DuplicateStudentError(StudentServiceError):
    status_code = 409
    message = "Student ID already exists."


class StudentNotFoundError(StudentServiceError):
    status_code = 404
    message = "Student not found."


class StudentStorageError(StudentServiceError):
    status_code = 500


# ==========================================================
# 입력 검사
# ==========================================================

def missing_fields(payload: Any) -> List[str]:
    """
    누락된 필드 이름 목록.
    - Year Level: 키 자체가 없을 때만 누락 (0, "", null 허용)
    - 나머지: 값이 비어 있으면(None, "", 0, False) 누락
    """
    if not isinstance(payload, dict):
        return list(STUDENT_FIELDS)

    missing = []
    for field in STUDENT_FIELDS:
        if field == "Year Level":
            if field not in payload:
                missing.append(field)
        elif not payload.get(field):
            missing.append(field)
    return missing


# ==========================================================
# CRUD
# ==========================================================

def list_students(store: StudentStore) -> List[Any]:
    return store.read_students()


def create_student(store: StudentStore, payload: Any) -> Dict[str, Any]:
    missing = missing_fields(payload)
    if missing:
        logger.info(f"Rejected student create, missing: {', '.join(missing)}")
        raise MissingFieldsError()

    try:
        record = StudentRecord.model_validate(payload).to_json()
    except ValidationError as e:
        logger.info(f"Rejected student create, invalid values: {e.error_count()} error(s)")
        raise MissingFieldsError() from e

    with store.lock:
        students = store.read_students()

        if any(_student_id(s) == record["Student ID"] for s in students):
            raise DuplicateStudentError()

        students.append(record)

        try:
            store.write_students(students)
        except StorageError as e:
            raise StudentStorageError("Could not save student.") from e

    logger.info(f"Created student {record['Student ID']}")
    return record


def delete_student(store: StudentStore, student_id: str) -> Dict[str, Any]:
    with store.lock:
        students = store.read_students()
        index = next(
            (i for i, s in enumerate(students) if _student_id(s) == student_id),
            None,
        )
        if index is None:
            raise StudentNotFoundError()

        removed = students.pop(index)

        try:
            store.write_students(students)
        except StorageError as e:
            raise StudentStorageError("Could not delete student.") from e

    logger.info(f"Deleted student {student_id}")
    return removed


def _student_id(record: Any) -> Any:
    # 손으로 고친 파일에 객체가 아닌 항목이 섞여 있어도 건너뛰도록
    return record.get("Student ID") if isinstance(record, dict) else None
