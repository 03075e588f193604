import pytest

from listkit.array_list import ArrayList, main
from listkit.student import (
    Student,
    compare_by_id_asc,
    compare_by_id_desc,
    compare_by_name_asc,
)


def make(student_id, name="A"):
    return Student(student_id, name, "01/01/2000", "Hue", 7.0)


def filled(*ids):
    students = ArrayList()
    for student_id in ids:
        students.insert(make(student_id), len(students))
    return students


def ids(students):
    return [s.student_id for s in students]


def test_insert_at_end_keeps_order():
    students = filled(1, 2, 3)
    assert ids(students) == [1, 2, 3]
    assert len(students) == 3


def test_insert_default_goes_first():
    students = filled(1, 2)
    students.insert(make(9))
    assert ids(students) == [9, 1, 2]


def test_insert_in_middle():
    students = filled(1, 3)
    students.insert(make(2), 1)
    assert ids(students) == [1, 2, 3]
    assert students[1].student_id == 2


@pytest.mark.parametrize("position", [-1, 3])
def test_insert_out_of_range(position):
    students = filled(1, 2)
    with pytest.raises(IndexError):
        students.insert(make(5), position)
    assert ids(students) == [1, 2]


def test_insert_beyond_capacity():
    students = ArrayList(capacity=2)
    students.insert(make(1))
    students.insert(make(2))
    with pytest.raises(OverflowError):
        students.insert(make(3))
    assert len(students) == 2


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ArrayList(capacity=0)


def test_delete_returns_removed_student():
    students = filled(1, 2, 3)
    removed = students.delete(1)
    assert removed.student_id == 2
    assert ids(students) == [1, 3]


def test_delete_default_first():
    students = filled(1, 2)
    students.delete()
    assert ids(students) == [2]


@pytest.mark.parametrize("position", [-1, 2])
def test_delete_out_of_range(position):
    students = filled(1, 2)
    with pytest.raises(IndexError):
        students.delete(position)


def test_index_of_finds_first_match():
    students = filled(4, 5, 5)
    assert students.index_of(5) == 1
    assert students.index_of(4) == 0


def test_index_of_missing():
    with pytest.raises(ValueError):
        filled(1, 2).index_of(99)


def test_find_then_delete():
    students = filled(10, 20, 30)
    students.delete(students.index_of(20))
    assert ids(students) == [10, 30]


def test_sort_by_id_ascending_and_descending():
    students = filled(3, 1, 4, 2, 5)
    students.sort(compare_by_id_asc)
    assert ids(students) == [1, 2, 3, 4, 5]
    students.sort(compare_by_id_desc)
    assert ids(students) == [5, 4, 3, 2, 1]


def test_sort_by_name():
    students = ArrayList()
    for student_id, name in [(1, "Cuong"), (2, "An"), (3, "Binh")]:
        students.insert(make(student_id, name), len(students))
    students.sort()
    assert [s.name for s in students] == ["An", "Binh", "Cuong"]


def test_sort_exchange_order_for_equal_names():
    students = ArrayList()
    for student_id, name in [(1, "B"), (2, "B"), (3, "A")]:
        students.insert(make(student_id, name), len(students))
    students.sort(compare_by_name_asc)
    assert ids(students) == [3, 2, 1]


def test_format_empty():
    assert ArrayList().format() == "Danh sach rong!\n"


def test_format_concatenates_blocks():
    students = filled(1, 2)
    assert students.format() == make(1).format() + make(2).format()


def test_main_prints_sorted_students(tmp_path, capsys):
    path = tmp_path / "SinhVien.txt"
    path.write_text(
        "2#Tran Thi B#02/02/2001#Hue#8\n1#Le Van A#01/01/2000#Ha Noi#6.5\n",
        encoding="utf-8",
    )
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("-------------SAP XEP DANH SACH------------------\n")
    assert out.index("Le Van A") < out.index("Tran Thi B")


def test_main_missing_file_prints_empty(tmp_path, capsys):
    assert main([str(tmp_path / "none.txt")]) == 0
    assert capsys.readouterr().out.endswith("Danh sach rong!\n")