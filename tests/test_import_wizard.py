import pytest

from examseating.import_wizard import (
    ImportPage,
    ImportWizard,
    class_picker_description,
    grade_from_index,
    preview_description,
)
from examseating.models import Student


def _students():
    return [Student(id=1, first_name="Ali"), Student(id=2, first_name="Ayşe")]


def _at_preview():
    w = ImportWizard()
    w.next_page()
    w.handle_parsed(_students())
    w.apply_grade_and_section(10, "B")
    return w


def test_grade_from_index():
    assert grade_from_index(0) == 9
    assert grade_from_index(3) == 12
    with pytest.raises(ValueError):
        grade_from_index(-1)


def test_class_picker_description():
    assert class_picker_description("<n> öğrenci okundu", 7) == "7 öğrenci okundu"


def test_preview_description():
    students = [Student(grade=11, section="C"), Student(grade=11, section="C")]
    assert preview_description("<n>-<g>-<s>", students) == "2-11-C"


def test_preview_description_requires_students():
    with pytest.raises(ValueError):
        preview_description("<n>", [])


def test_happy_path_reaches_preview_and_sets_class():
    w = _at_preview()
    assert w.page is ImportPage.PREVIEW
    assert all(s.grade == 10 and s.section == "B" for s in w.parsed_students)
    assert not w.accepted


def test_failed_parse_returns_to_file_picker():
    w = ImportWizard()
    w.next_page()
    assert w.page is ImportPage.SPINNER
    w.handle_parsed(None)
    assert w.page is ImportPage.FILE_PICKER
    assert w.parsed_students is None


def test_prev_from_class_picker_skips_spinner():
    w = ImportWizard()
    w.next_page()
    w.handle_parsed(_students())
    assert w.page is ImportPage.CLASS_PICKER
    w.prev_page()
    assert w.page is ImportPage.FILE_PICKER


def test_prev_from_preview_goes_to_class_picker():
    w = _at_preview()
    w.prev_page()
    assert w.page is ImportPage.CLASS_PICKER


def test_prev_on_first_page_stays():
    w = ImportWizard()
    w.prev_page()
    assert w.page is ImportPage.FILE_PICKER


def test_spinner_needs_students_to_advance():
    w = ImportWizard()
    w.next_page()
    with pytest.raises(RuntimeError):
        w.next_page()


def test_class_choice_out_of_order_rejected():
    with pytest.raises(RuntimeError):
        ImportWizard().apply_grade_and_section(9, "A")


def test_confirm_all_added():
    w = _at_preview()
    title, message = w.confirm(10, 12)
    assert title == "Başarılı"
    assert message.startswith("2 ")
    assert w.accepted


def test_confirm_partial():
    w = _at_preview()
    title, message = w.confirm(10, 11)
    assert title == "Kısmen Başarılı"
    assert "okunan 2 öğrenciden 1 öğrenci" in message
    assert w.accepted


def test_confirm_before_preview_rejected():
    with pytest.raises(RuntimeError):
        ImportWizard().confirm(0, 0)