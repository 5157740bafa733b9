import pytest

from conftest import make_student
from schemas.students import STUDENT_FIELDS
from services.student_board import StudentBoard
from services.student_client import StudentAPIClient, StudentAPIError


class FakeAPI:
    """서버 호출 횟수만 세는 가짜 API"""

    def __init__(self, students):
        self.students = students
        self.calls = 0

    def list_students(self):
        self.calls += 1
        return list(self.students)


class BrokenAPI:
    def list_students(self):
        raise StudentAPIError("Could not reach server: connection refused")


@pytest.fixture
def notes():
    return []


@pytest.fixture
def board(client, notes):
    api = StudentAPIClient(client=client)
    return StudentBoard(api, notify=lambda message, level: notes.append((level, message)))


def make_form(student_id="S1"):
    return {field: f"  {value}  " for field, value in make_student(student_id).items()}


def test_load_populates_snapshot_programs_and_table(board, store):
    store.write_students([
        make_student("S1", Program="CS"),
        make_student("S2", Program="IT"),
        make_student("S3", Program="CS"),
    ])

    table = board.load()

    assert table.count == 3
    assert [s["Student ID"] for s in board.students] == ["S1", "S2", "S3"]
    assert board.programs == ["CS", "IT"]
    assert "<option>IT</option>" in board.program_options


def test_load_failure_renders_placeholder():
    board = StudentBoard(BrokenAPI())

    table = board.load()

    assert table.count == 0
    assert "Could not load students." in table.html
    assert board.students == []


def test_filter_uses_cached_snapshot_only():
    api = FakeAPI([
        {"Full Name": "Ann Lee", "Program": "CS", "Gender": "F"},
        {"Full Name": "Bob Diaz", "Program": "IT", "Gender": "M"},
    ])
    board = StudentBoard(api)
    board.load()

    table = board.apply_filter(search="an")

    assert api.calls == 1
    assert table.count == 1
    assert "Ann Lee" in table.html
    assert len(board.students) == 2
    assert (board.search, board.gender, board.program) == ("an", "", "")


def test_create_trims_clears_form_and_reloads(board, store, notes):
    form = make_form("S1")

    assert board.create(form) is True

    assert store.read_students() == [make_student("S1")]
    assert all(value == "" for value in form.values())
    assert board.table.count == 1
    assert notes == [("success", "Student added successfully.")]


def test_failed_create_keeps_form_and_reports_server_message(board, store, notes):
    store.write_students([make_student("S1")])
    form = make_form("S1")

    assert board.create(form) is False

    assert form == make_form("S1")
    assert notes == [("error", "Student ID already exists.")]


def test_create_with_blank_field_reports_missing(board, notes):
    form = make_form("S1")
    form["Gmail"] = "   "

    assert board.create(form) is False
    assert notes == [("error", "All fields are required.")]


def test_delete_declined_sends_nothing(client, store, notes):
    store.write_students([make_student("S1")])
    prompts = []

    def decline(prompt):
        prompts.append(prompt)
        return False

    board = StudentBoard(StudentAPIClient(client=client), notify=lambda message, level: notes.append(message), confirm=decline)

    assert board.delete("S1") is False
    assert prompts == ["Delete student S1?"]
    assert store.read_students() == [make_student("S1")]
    assert notes == []


def test_delete_decodes_id_and_reloads(board, store, notes):
    sid = "2024/07 A"
    store.write_students([make_student(sid), make_student("S2")])
    board.load()

    assert board.delete("2024%2F07%20A") is True

    assert [s["Student ID"] for s in store.read_students()] == ["S2"]
    assert board.table.count == 1
    assert notes == [("success", "Student deleted.")]


def test_delete_unknown_reports_not_found(board, notes):
    assert board.delete("missing") is False
    assert notes == [("error", "Student not found.")]


def test_form_fields_cover_record():
    assert set(make_form()) == set(STUDENT_FIELDS)


def test_create_keeps_numeric_zero_form_value(board, store):
    form = make_form("S1")
    form["Year Level"] = 0

    assert board.create(form) is True
    assert store.read_students()[0]["Year Level"] == "0"
