"""
services/student_view.py

- 학생 목록 화면을 그리는 순수 함수 모음 (서버 호출 없음)
- 포함 내용:
  1) 로컬 검색/필터: filter_students(), distinct_programs()
  2) 테이블/필터 옵션 HTML 렌더링: render_table(), render_program_options()
- HTML 은 templates/ 의 jinja2 템플릿으로 생성 (autoescape)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader

from schemas.students import STUDENT_FIELDS

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# encodeURIComponent 와 같은 비인코딩 문자 집합
_URI_COMPONENT_SAFE = "!*'()"

env = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=True)


@dataclass
class RenderedTable:
    html: str
    count: int


# =========================================================
# 1) 검색/필터
# =========================================================

def _text(record: Dict[str, Any], field: str) -> str:
    value = record.get(field)
    return "" if value is None else str(value)


def distinct_programs(records: Iterable[Dict[str, Any]]) -> List[str]:
    """처음 등장한 순서를 유지한 Program 값 목록"""
    return list(dict.fromkeys(_text(r, "Program") for r in records))


def filter_students(
    records: Iterable[Dict[str, Any]],
    search: str = "",
    gender: str = "",
    program: str = "",
) -> List[Dict[str, Any]]:
    """
    - search: Full Name 또는 Program 에 포함되면 매칭 (대소문자 무시)
    - gender/program: 빈 값이면 전체, 아니면 정확히 일치
    """
    term = (search or "").lower()
    return [
        r for r in records
        if (term in _text(r, "Full Name").lower() or term in _text(r, "Program").lower())
        and (not gender or _text(r, "Gender") == gender)
        and (not program or _text(r, "Program") == program)
    ]


# =========================================================
# 2) 렌더링
# =========================================================

def encode_student_id(student_id: Any) -> str:
    return quote(str(student_id), safe=_URI_COMPONENT_SAFE)


def render_table(records: Any) -> RenderedTable:
    """학생 행 HTML 과 표시 건수. 비어 있거나 리스트가 아니면 안내 행 1개, 건수 0"""
    if not isinstance(records, list) or not records:
        return RenderedTable(html=render_message("No records found"), count=0)

    rows = [
        {
            "cells": [_text(r, field) for field in STUDENT_FIELDS],
            "data_id": encode_student_id(_text(r, "Student ID")),
        }
        for r in records
    ]
    html = env.get_template("student_rows.html").render(rows=rows)
    return RenderedTable(html=html, count=len(records))


def render_message(message: str) -> str:
    return env.get_template("message_row.html").render(
        message=message, colspan=len(STUDENT_FIELDS) + 1
    )


def render_load_error() -> RenderedTable:
    return RenderedTable(html=render_message("Could not load students."), count=0)


def render_program_options(programs: Iterable[str]) -> str:
    return env.get_template("program_options.html").render(programs=list(programs))
