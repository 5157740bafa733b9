import logging
from typing import Any, Callable, Dict, List, MutableMapping, Optional
from urllib.parse import unquote

from schemas.students import STUDENT_FIELDS
from services.student_client import StudentAPIClient, StudentAPIError
from services import student_view
from services.student_view import RenderedTable

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]
Confirmer = Callable[[str], bool]


def _form_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _log_notification(message: str, level: str) -> None:
    logger.log(logging.ERROR if level == "error" else logging.INFO, message)


class StudentBoard:
    """
    학생 목록 화면 컨트롤러

    - students: 서버에서 받아온 전체 목록 스냅샷 (변경 후에는 항상 통째로 다시 받아옴)
    - programs: 스냅샷의 Program 값 (필터 옵션용)
    - search / gender / program: 현재 필터 상태
    - table: 마지막으로 렌더링한 결과
    """

    def __init__(
        self,
        api: StudentAPIClient,
        notify: Optional[Notifier] = None,
        confirm: Optional[Confirmer] = None,
    ):
        self.api = api
        self.notify = notify or _log_notification
        self.confirm = confirm or (lambda prompt: True)

        self.students: List[Dict[str, Any]] = []
        self.programs: List[str] = []
        self.search = ""
        self.gender = ""
        self.program = ""
        self.table = student_view.render_table([])

    @property
    def program_options(self) -> str:
        return student_view.render_program_options(self.programs)

    def load(self) -> RenderedTable:
        try:
            students = self.api.list_students()
        except StudentAPIError as e:
            logger.warning(f"Could not load students: {e.message}")
            self.students, self.programs = [], []
            self.table = student_view.render_load_error()
            return self.table

        self.students = students if isinstance(students, list) else []
        self.programs = student_view.distinct_programs(self.students)
        self.table = student_view.render_table(self.students)
        return self.table

    def apply_filter(self, search: str = "", gender: str = "", program: str = "") -> RenderedTable:
        self.search, self.gender, self.program = search, gender, program
        filtered = student_view.filter_students(self.students, search, gender, program)
        self.table = student_view.render_table(filtered)
        return self.table

    def create(self, form: MutableMapping[str, Any]) -> bool:
        record = {field: _form_text(form.get(field)) for field in STUDENT_FIELDS}
        try:
            self.api.create_student(record)
        except StudentAPIError as e:
            self.notify(e.detail or "Failed to add student.", "error")
            return False

        self.notify("Student added successfully.", "success")
        for field in STUDENT_FIELDS:
            form[field] = ""
        self.load()
        return True

    def delete(self, encoded_id: str) -> bool:
        student_id = unquote(encoded_id)
        if not self.confirm(f"Delete student {student_id}?"):
            return False

        try:
            self.api.delete_student(student_id)
        except StudentAPIError as e:
            self.notify(e.detail or "Failed to delete student.", "error")
            return False

        self.notify("Student deleted.", "success")
        self.load()
        return True
