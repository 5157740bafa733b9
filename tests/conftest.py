import pytest
from fastapi.testclient import TestClient

from database.db import StudentStore
from dependencies.storage import get_store
from main import app


def make_student(student_id="S1", **overrides):
    record = {
        "Student ID": student_id,
        "Full Name": "A B",
        "Gender": "F",
        "Gmail": "a@b.com",
        "Program": "CS",
        "Year Level": "1",
        "University": "U",
    }
    record.update(overrides)
    return record


@pytest.fixture
def store(tmp_path):
    return StudentStore(tmp_path / "students.json")


@pytest.fixture
def client(store):
    # 실제 data/students.json 대신 임시 파일을 쓰도록 의존성 교체
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
