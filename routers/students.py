from typing import Any, List

from fastapi import APIRouter, Body, Depends

from database.db import StudentStore
from dependencies.storage import get_store
from schemas.common import error_responses
from schemas.students import StudentDeleteResponse
from services import student_service

router = APIRouter(prefix="/students", tags=["Students"])


# ==========================================================
# CRUD 라우터
# - 검증/중복/저장 실패는 서비스 예외로 올라가고
#   middlewares/error_handler.py 가 {"error": "..."} 로 변환
# ==========================================================

# ✅ [READ] 전체 학생 조회 (파일 읽기 실패 시 빈 배열)
@router.get("", response_model=List[Any])
def read_students(store: StudentStore = Depends(get_store)):
    return student_service.list_students(store)


# ✅ [CREATE] 학생 추가
@router.post("", status_code=201, responses=error_responses(400, 409, 500))
def create_student(payload: Any = Body(None), store: StudentStore = Depends(get_store)):
    return student_service.create_student(store, payload)


# ✅ [DELETE] 학번으로 학생 삭제
@router.delete(
    "/{student_id:path}",
    response_model=StudentDeleteResponse,
    responses=error_responses(404, 500),
)
def delete_student(student_id: str, store: StudentStore = Depends(get_store)):
    removed = student_service.delete_student(store, student_id)
    return {"success": True, "removed": removed}
