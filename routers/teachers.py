import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import String, delete, func, or_, select, update
from sqlalchemy.orm import Session

from database.db import get_db
from models.teachers import Teacher as TeacherModel
from schemas.teachers import Teacher, TeacherCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Teacher", tags=["교사 정보"])

# 관리 페이지(routers/teacher_pages.py)도 아래 함수를 직접 호출함 (HTTP 경유 X)
# DB 예외는 잡지 않고 그대로 올려보냄 → middlewares/error_handler.py 에서 500 처리


def _lower_contains(expr, key: str):
    # LIKE 와일드카드(%, _)는 이스케이프하여 순수 부분 문자열 검색
    return func.lower(expr, type_=String).contains(key, autoescape=True)


def _values(teacher: TeacherCreate) -> dict:
    return {
        "teacherfname": teacher.teacher_first_name,
        "teacherlname": teacher.teacher_last_name,
        "employeenumber": teacher.employee_number,
        "hiredate": teacher.hire_date,
        "salary": teacher.salary,
    }


# ==========================================================
# CRUD 라우터
# ==========================================================

# ✅ [READ] 전체 교사 조회 (SearchKey: 이름/성/"이름 성" 부분 일치, 대소문자 무시)
@router.get("/ListTeachers", response_model=List[Teacher])
def list_teachers(
    search_key: Optional[str] = Query(None, alias="SearchKey"),
    db: Session = Depends(get_db),
) -> List[Teacher]:
    stmt = select(TeacherModel)
    if search_key is not None:
        key = search_key.lower()
        full_name = TeacherModel.teacherfname + " " + TeacherModel.teacherlname
        stmt = stmt.where(
            or_(
                _lower_contains(TeacherModel.teacherfname, key),
                _lower_contains(TeacherModel.teacherlname, key),
                _lower_contains(full_name, key),
            )
        )

    records = db.execute(stmt).scalars().all()
    logger.debug(f"교사 목록 조회: search_key={search_key!r}, count={len(records)}")
    return [Teacher.from_row(r) for r in records]


# ✅ [READ] 특정 교사 조회 (없으면 TeacherId=0 인 빈 레코드)
@router.get("/FindTeacher/{teacher_id}", response_model=Teacher)
def find_teacher(teacher_id: int, db: Session = Depends(get_db)) -> Teacher:
    stmt = select(TeacherModel).where(TeacherModel.teacherid == teacher_id)
    row = db.execute(stmt).scalars().first()
    if row is None:
        logger.debug(f"교사 정보 없음: teacher_id={teacher_id}")
        return Teacher.empty()
    return Teacher.from_row(row)


# ✅ [CREATE] 교사 정보 추가 → DB에서 발급한 ID 반환
@router.post("/AddTeacher", response_model=int)
def add_teacher(teacher: TeacherCreate, db: Session = Depends(get_db)) -> int:
    db_teacher = TeacherModel(**_values(teacher))
    db.add(db_teacher)
    db.commit()
    db.refresh(db_teacher)
    logger.info(f"교사 정보 추가: teacher_id={db_teacher.teacherid}")
    return db_teacher.teacherid


# ✅ [DELETE] 교사 삭제 → 삭제된 행 수 반환 (없으면 0)
@router.delete("/DeleteTeacher/{teacher_id}", response_model=int)
def delete_teacher(teacher_id: int, db: Session = Depends(get_db)) -> int:
    result = db.execute(delete(TeacherModel).where(TeacherModel.teacherid == teacher_id))
    db.commit()
    logger.info(f"교사 정보 삭제: teacher_id={teacher_id}, rows={result.rowcount}")
    return result.rowcount


# ✅ [UPDATE] 교사 정보 전체 수정 → 수정 후 다시 조회한 레코드 반환
@router.put("/UpdateTeacher/{teacher_id}", response_model=Teacher)
def update_teacher(teacher_id: int, teacher: TeacherCreate, db: Session = Depends(get_db)) -> Teacher:
    result = db.execute(
        update(TeacherModel)
        .where(TeacherModel.teacherid == teacher_id)
        .values(**_values(teacher))
    )
    db.commit()
    logger.info(f"교사 정보 수정: teacher_id={teacher_id}, rows={result.rowcount}")
    return find_teacher(teacher_id, db)
