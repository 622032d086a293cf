from sqlalchemy import Column, Integer, String, Date, Numeric
from database.db import Base


class Teacher(Base):
    __tablename__ = "teachers"

    teacherid = Column(Integer, primary_key=True, autoincrement=True)   # 교사 고유 ID (PK, DB에서 발급)
    teacherfname = Column(String(255), nullable=False)                  # 이름
    teacherlname = Column(String(255), nullable=False)                  # 성
    employeenumber = Column(String(255))                                # 사번 (중복 검사 없음)
    hiredate = Column(Date, nullable=False)                             # 입사일
    salary = Column(Numeric(10, 2), nullable=False)                     # 급여
