import json

import pytest

from examseating.hall import Hall, Layout
from examseating.models import ExamStudent, Student
from examseating.pattern import Pattern, Variant


def _existing(layout):
    return sum(desk.exists for row in layout.desk_rows for desk in row)


@pytest.mark.parametrize("capacity", [0, 1, 6, 7, 12, 14, 35])
def test_capacity_layout(capacity):
    layout = Layout.with_capacity(capacity)
    assert len(layout.desk_rows) == -(-capacity // 6)
    assert all(len(row) == 6 for row in layout.desk_rows)
    assert _existing(layout) == capacity


def test_missing_desks_are_at_end_of_last_row():
    layout = Layout.with_capacity(14)
    last = [desk.exists for desk in layout.desk_rows[-1]]
    assert last == [True, True, False, False, False, False]


def test_negative_capacity():
    with pytest.raises(ValueError):
        Layout.with_capacity(-1)


def test_compact_json():
    assert Layout.with_capacity(2).to_json_str() == '{"desks":[[true,true,false,false,false,false]]}'


@pytest.mark.parametrize("capacity", [0, 5, 18, 23])
def test_json_round_trip(capacity):
    layout = Layout.with_capacity(capacity)
    restored = Layout.from_json_str(layout.to_json_str())
    assert restored.to_json_str() == layout.to_json_str()
    assert _existing(restored) == capacity


def test_from_json_short_and_odd_rows():
    text = json.dumps({"desks": [[True, True], "junk", [True, 1, None, True, True, True]]})
    layout = Layout.from_json_str(text)
    rows = [[d.exists for d in row] for row in layout.desk_rows]
    assert rows == [
        [True, True, False, False, False, False],
        [False] * 6,
        [True, False, False, True, True, True],
    ]


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '{"other": 1}'])
def test_from_json_unreadable_gives_empty(text):
    assert Layout.from_json_str(text).desk_rows == []


def test_clear_removes_students():
    layout = Layout.with_capacity(6)
    desk = layout.desk_rows[0][0]
    desk.student = ExamStudent.from_student(Student(id=1, grade=9, section="A"))
    desk.is_empty = False
    layout.clear()
    assert desk.student is None
    assert desk.is_empty is True


def test_hall_default_layout_from_capacity():
    hall = Hall("Lab", 10)
    assert _existing(hall.layout) == 10


def test_count_variant_requires_pattern():
    with pytest.raises(ValueError):
        Hall("Lab", 10).count_variant(Variant.A)


@pytest.mark.parametrize("grade_count", [1, 2, 3, 4])
def test_variant_counts_cover_capacity(grade_count):
    hall = Hall("Lab", 29, pattern=Pattern(grade_count, 2))
    assert sum(hall.count_variant(v) for v in Variant) == 29


def test_count_students():
    hall = Hall("Lab", 12)
    seats = [(9, "A"), (9, "A"), (9, "B"), (10, "A")]
    for col, (grade, section) in enumerate(seats):
        desk = hall.layout.desk_rows[0][col]
        desk.student = ExamStudent.from_student(Student(id=col, grade=grade, section=section))
        desk.is_empty = False
    empty_marked = hall.layout.desk_rows[1][0]
    empty_marked.student = ExamStudent.from_student(Student(id=99, grade=9, section="A"))
    assert hall.count_students(9, "A") == 2
    assert hall.count_students(9, "B") == 1
    assert hall.count_students(11, "A") == 0