import argparse
import csv
import logging
from typing import Dict

from schemas.students import STUDENT_FIELDS
from services.student_client import StudentAPIClient, StudentAPIError

logger = logging.getLogger(__name__)

CSV_PATH = "data/students.csv"  # ✅ 기본 파일 경로
BASE_URL = "http://localhost:3000"


def import_students(api: StudentAPIClient, csv_path: str) -> Dict[str, int]:
    """
    CSV 의 각 행을 POST /students 로 등록
    - 헤더는 레코드 키 그대로 (Student ID, Full Name, ...)
    - 이미 있는 학번(409)은 건너뛰고, 나머지 실패는 failed 로 집계
    """
    summary = {"created": 0, "skipped": 0, "failed": 0}

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            record = {field: (row.get(field) or "").strip() for field in STUDENT_FIELDS}
            try:
                api.create_student(record)
                summary["created"] += 1
            except StudentAPIError as e:
                if e.status_code == 409:
                    summary["skipped"] += 1
                    logger.info(f"line {line_no}: {record['Student ID']} already exists, skipped")
                else:
                    summary["failed"] += 1
                    logger.warning(f"line {line_no}: {e.message}")

    logger.info(
        f"✅ 학생 CSV → API 등록 완료: created={summary['created']} "
        f"skipped={summary['skipped']} failed={summary['failed']}"
    )
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Import students from a CSV file")
    parser.add_argument("csv_path", nargs="?", default=CSV_PATH)
    parser.add_argument("--base-url", default=BASE_URL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    summary = import_students(StudentAPIClient(args.base_url), args.csv_path)
    return 1 if summary["failed"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
