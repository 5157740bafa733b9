"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorResponse
  2) 라우터 responses= 에 넣을 문서화용 헬퍼: error_responses()
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py에서 이 형태({"error": "..."})로 리턴
    """
    error: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) Swagger 문서화 헬퍼
# =========================================================

def error_responses(*status_codes: int) -> Dict[int, dict]:
    """
    에러 상태 코드 목록을 FastAPI responses= 형식으로 변환
    예: @router.post("", responses=error_responses(400, 409, 500))
    """
    return {code: {"model": ErrorResponse} for code in status_codes}
