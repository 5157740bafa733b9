from pydantic import BaseModel, ConfigDict, Field
from typing import Any

# ✅ 저장 파일/요청 본문에서 쓰는 JSON 키 (순서 = 저장 순서)
STUDENT_FIELDS = (
    "Student ID",
    "Full Name",
    "Gender",
    "Gmail",
    "Program",
    "Year Level",
    "University",
)


# ✅ 학생 레코드 (입력/출력 공용)
class StudentRecord(BaseModel):
    student_id: str = Field(..., alias="Student ID")           # 학번 (고유 키)
    full_name: str = Field(..., alias="Full Name")             # 이름
    gender: str = Field(..., alias="Gender")                   # 성별
    gmail: str = Field(..., alias="Gmail")                     # 이메일 (형식 검사 없음)
    program: str = Field(..., alias="Program")                 # 학과/전공
    year_level: Any = Field(..., alias="Year Level")           # 학년 (존재 여부만 검사, 값은 그대로 저장)
    university: str = Field(..., alias="University")           # 대학

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    def to_json(self) -> dict:
        """저장 파일에 쓰는 형태 (JSON 키 그대로)"""
        return self.model_dump(by_alias=True)


# ✅ 삭제 응답
class StudentDeleteResponse(BaseModel):
    success: bool = True
    removed: dict
