import pytest

from examseating.database_page import (
    EOTY_LABEL,
    EXPORT_LABEL,
    IMPORT_LABEL,
    REMOVE_CLASS_LABEL,
    DatabasePage,
    class_table_rows,
    clean_class_name,
    delete_confirmation_text,
    remove_class_text,
)
from examseating.models import Student


class FakeDatabase:
    def __init__(self, students):
        self.students = list(students)

    def number_of_students(self):
        return len(self.students)

    def class_names(self):
        return sorted({f"{s.grade}-{s.section}" for s in self.students})

    def students_by_class_name(self, class_name):
        return [s for s in self.students if f"{s.grade}-{s.section}" == class_name]


@pytest.fixture
def students():
    return [
        Student(30, "Ali", "Kaya", 9, "A"),
        Student(12, "Ayşe", "Demir", 9, "A"),
        Student(7, "Can", "Yıldız", 10, "B"),
    ]


def test_clean_class_name_removes_ampersands():
    assert clean_class_name("9-&A") == "9-A"
    assert clean_class_name("10-B") == "10-B"


def test_description_of_empty_database():
    page = DatabasePage(FakeDatabase([]))
    assert page.description("") == "Okul mevcudu: 0"


def test_description_includes_current_class(students):
    page = DatabasePage(FakeDatabase(students))
    text = page.description("9-&A")
    assert text.startswith("Okul mevcudu: 3")
    assert text.endswith("9-A sınıf mevcudu: 2")
    assert "♦" in text


def test_menu_actions_without_classes():
    assert DatabasePage(FakeDatabase([])).menu_actions() == [IMPORT_LABEL]


def test_menu_actions_with_classes(students):
    actions = DatabasePage(FakeDatabase(students)).menu_actions()
    assert actions == [EOTY_LABEL, REMOVE_CLASS_LABEL, IMPORT_LABEL, EXPORT_LABEL]


def test_class_table_rows_sorted_by_id(students):
    rows = class_table_rows(students)
    ids = [row[0] for row in rows]
    assert ids == sorted(ids)
    assert (12, "Ayşe", "Demir") in rows
    assert len(rows) == len(students)


def test_class_table_rows_empty():
    assert class_table_rows([]) == []


def test_tabs_follow_class_names(students):
    tabs = DatabasePage(FakeDatabase(students)).tabs()
    assert [name for name, _ in tabs] == ["10-B", "9-A"]
    assert [row[0] for row in tabs[1][1]] == [12, 30]


def test_delete_confirmation_text(students):
    text = delete_confirmation_text(students[0])
    assert text.startswith("Adı Ali,\nSoyadı Kaya,\nSınıfı 9,\nŞubesi A olan\n30 numaralı")
    assert text.endswith("BU İŞLEM GERİ ALINAMAZ!")


def test_remove_class_text_names_class():
    text = remove_class_text("11-C")
    assert text.startswith("11-C sınıfındaki bütün öğrenciler")
    assert text.endswith("Emin misiniz?")