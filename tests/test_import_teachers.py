from routers.teachers import find_teacher, list_teachers
from scripts.import_teachers import migrate_teachers

CSV = """teacherfname,teacherlname,employeenumber,hiredate,salary
Alexander,Bennett,T378,2016-08-05,55.30
Caitlin,Cummings,,2014-06-10,62.77
Broken,Row,T999,not-a-date,10
"""


def test_migrate_teachers_skips_invalid_rows(db, tmp_path):
    path = tmp_path / "teachers.csv"
    path.write_text(CSV, encoding="utf-8")

    ids = migrate_teachers(str(path), db)

    assert ids == [1, 2]
    assert len(list_teachers(None, db)) == 2
    caitlin = find_teacher(2, db)
    assert caitlin.teacher_first_name == "Caitlin"
    assert caitlin.employee_number == ""
    assert str(caitlin.salary) == "62.77"
