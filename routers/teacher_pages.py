from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from routers import teachers as teacher_api
from schemas.teachers import TeacherCreate

router = APIRouter(prefix="/TeacherPage", tags=["교사 관리 페이지"], include_in_schema=False)

templates = Jinja2Templates(directory=str(settings.TEMPLATE_DIR))


# ✅ 폼 입력 → TeacherCreate (필드 이름은 JSON API와 동일한 PascalCase)
def _teacher_form(
    teacher_first_name: str = Form(..., alias="TeacherFirstName"),
    teacher_last_name: str = Form(..., alias="TeacherLastName"),
    employee_number: str = Form("", alias="EmployeeNumber"),
    hire_date: date = Form(..., alias="HireDate"),
    salary: Decimal = Form(..., alias="Salary"),
) -> TeacherCreate:
    return TeacherCreate(
        teacher_first_name=teacher_first_name,
        teacher_last_name=teacher_last_name,
        employee_number=employee_number,
        hire_date=hire_date,
        salary=salary,
    )


# ✅ 목록 (검색 포함)
@router.get("/List", response_class=HTMLResponse)
def list_page(
    request: Request,
    search_key: Optional[str] = Query(None, alias="SearchKey"),
    db: Session = Depends(get_db),
):
    teachers = teacher_api.list_teachers(search_key, db)
    return templates.TemplateResponse(
        request, "teachers/list.html", {"teachers": teachers, "search_key": search_key or ""}
    )


# ✅ 상세
@router.get("/Show/{teacher_id}", response_class=HTMLResponse)
def show_page(request: Request, teacher_id: int, db: Session = Depends(get_db)):
    teacher = teacher_api.find_teacher(teacher_id, db)
    return templates.TemplateResponse(request, "teachers/show.html", {"teacher": teacher})


# ✅ 신규 등록 폼
@router.get("/New", response_class=HTMLResponse)
def new_page(request: Request):
    return templates.TemplateResponse(request, "teachers/new.html", {})


# ✅ 등록 처리 → 상세 페이지로 이동
@router.post("/Create")
def create_page(
    request: Request,
    teacher: TeacherCreate = Depends(_teacher_form),
    db: Session = Depends(get_db),
):
    teacher_id = teacher_api.add_teacher(teacher, db)
    return RedirectResponse(request.url_for("show_page", teacher_id=teacher_id), status_code=303)


# ✅ 삭제 확인
@router.get("/DeleteConfirm/{teacher_id}", response_class=HTMLResponse)
def delete_confirm_page(request: Request, teacher_id: int, db: Session = Depends(get_db)):
    teacher = teacher_api.find_teacher(teacher_id, db)
    return templates.TemplateResponse(request, "teachers/delete_confirm.html", {"teacher": teacher})


# ✅ 삭제 처리 → 목록으로 이동
@router.post("/Delete/{teacher_id}")
def delete_page(request: Request, teacher_id: int, db: Session = Depends(get_db)):
    teacher_api.delete_teacher(teacher_id, db)
    return RedirectResponse(request.url_for("list_page"), status_code=303)


# ✅ 수정 폼
@router.get("/Edit/{teacher_id}", response_class=HTMLResponse)
def edit_page(request: Request, teacher_id: int, db: Session = Depends(get_db)):
    teacher = teacher_api.find_teacher(teacher_id, db)
    return templates.TemplateResponse(request, "teachers/edit.html", {"teacher": teacher})


# ✅ 수정 처리 → 상세 페이지로 이동
@router.post("/Update/{teacher_id}")
def update_page(
    request: Request,
    teacher_id: int,
    teacher: TeacherCreate = Depends(_teacher_form),
    db: Session = Depends(get_db),
):
    teacher_api.update_teacher(teacher_id, teacher, db)
    return RedirectResponse(request.url_for("show_page", teacher_id=teacher_id), status_code=303)
