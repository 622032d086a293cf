from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


# ✅ 입력용 스키마: 교사 정보를 새로 생성/수정할 때 사용 (POST, PUT 요청 본문)
#    - 파이썬 속성은 snake_case, JSON 필드명은 기존 API와 동일한 PascalCase(alias)
class TeacherCreate(BaseModel):
    teacher_first_name: str = Field(alias="TeacherFirstName")    # 이름
    teacher_last_name: str = Field(alias="TeacherLastName")      # 성
    employee_number: str = Field(alias="EmployeeNumber")         # 사번 (예: T123)
    hire_date: date = Field(alias="HireDate")                    # 입사일 (YYYY-MM-DD)
    salary: Decimal = Field(alias="Salary")                      # 급여

    model_config = ConfigDict(populate_by_name=True)

    # Decimal은 JSON에서 문자열이 되므로 숫자로 내보냄
    @field_serializer("salary", when_used="json")
    def _salary_as_number(self, v: Decimal) -> float:
        return float(v)


# ✅ 출력용 스키마: 교사 정보를 조회할 때 사용 (GET 응답 등)
class Teacher(TeacherCreate):
    teacher_id: int = Field(alias="TeacherId")                   # 고유 교사 ID

    @classmethod
    def from_row(cls, row) -> "Teacher":
        """SQLAlchemy 모델(teachers 테이블 한 행)을 응답 레코드로 변환"""
        return cls(
            teacher_id=row.teacherid,
            teacher_first_name=row.teacherfname,
            teacher_last_name=row.teacherlname,
            employee_number=row.employeenumber or "",
            hire_date=row.hiredate,
            salary=row.salary,
        )

    @classmethod
    def empty(cls) -> "Teacher":
        """
        조회 결과가 없을 때 돌려주는 기본(빈) 레코드.
        - 별도의 404 신호 없이 TeacherId=0 인 레코드로 "없음"을 표현
        """
        return cls(
            teacher_id=0,
            teacher_first_name="",
            teacher_last_name="",
            employee_number="",
            hire_date=date.min,
            salary=Decimal("0"),
        )
