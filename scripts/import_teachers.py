import csv
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from database.db import SessionLocal
from routers.teachers import add_teacher
from schemas.teachers import TeacherCreate

logger = logging.getLogger(__name__)

CSV_PATH = "data/teachers.csv"  # ✅ 기본 파일 경로


def migrate_teachers(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> List[int]:
    """
    교사 CSV → DB 적재
    - 컬럼: teacherfname, teacherlname, employeenumber, hiredate, salary
    - 검증에 실패한 행은 로그만 남기고 건너뜀
    - 새로 발급된 teacherid 목록 반환
    """
    own_session = db is None
    if own_session:
        db = SessionLocal()

    created = []
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for line_no, row in enumerate(reader, start=2):
                try:
                    teacher = TeacherCreate(
                        teacher_first_name=row["teacherfname"],    # 이름
                        teacher_last_name=row["teacherlname"],     # 성
                        employee_number=row.get("employeenumber") or "",  # 사번 (빈 값 허용)
                        hire_date=row["hiredate"],                 # 입사일
                        salary=row["salary"],                      # 급여
                    )
                except (KeyError, ValidationError) as e:
                    logger.warning(f"⚠️ 잘못된 행 건너뜀 (line {line_no}): {e}")
                    continue
                created.append(add_teacher(teacher, db))
    finally:
        if own_session:
            db.close()

    logger.info(f"✅ 교사 정보 CSV → DB 마이그레이션 완료: {len(created)}건")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    migrate_teachers(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
