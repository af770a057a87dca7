"""The student database page: class tabs, page description and confirmations."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from examseating.models import Student

PAGE_NAME = "Öğrenci İşlemleri"
ERROR_TITLE = "Öğrenci İşlemlerinde Hata Oluştu"
TABLE_HEADERS = ("Okul No ", "Adı", "Soyadı")

ADD_SINGLE_LABEL = "Öğrenci Bilgilerini Elle Gir"
ADD_MULTI_LABEL = "Öğrenci Bilgilerini Excel Dosyasından Çek"
EOTY_LABEL = "Yıl sonu işlemlerini yap"
REMOVE_CLASS_LABEL = "Bu sınıftaki bütün öğrencileri sil"
IMPORT_LABEL = "Uygulama verilerini içe aktar"
EXPORT_LABEL = "Uygulama verilerini dışarı aktar"

EDIT_LABEL = "Öğrenci Bilgilerini Düzenle"
DELETE_LABEL = "Öğrenciyi Sil"

EMPTY_DATABASE_TITLE = "Öğrenci Veri Tabanı Boş"
EMPTY_EDIT_MESSAGE = "Hata: Öğrenci veri tabanı boş. Düzenlenecek öğrenci bulunamadı!"
EMPTY_DELETE_MESSAGE = "Hata: Öğrenci veri tabanı boş. Silinecek öğrenci bulunamadı!"

DELETE_TITLE = "Silme Onayı"
EOTY_TITLE = "Yıl Sonu İşlemleri"
EOTY_TEXT = (
    "Yıl sonu işlemleri kapsamında bütün öğrenciler bir sonraki sınıfa aktarılacak, "
    "12. sınıflar ise veri tabanından SİLİNECEKTİR.\nTamam düğmesine tıkladığınız an "
    "işlem gerçekleştirilecek ve geri dönüşü olmayacaktır.\nEmin misiniz?"
)
REMOVE_CLASS_TITLE = "Bu Sınıftaki Bütün Öğrencileri Sil"


class StudentDatabase(Protocol):
    """What the page needs to read from the student database."""

    def number_of_students(self) -> int: ...

    def class_names(self) -> Sequence[str]: ...

    def students_by_class_name(self, class_name: str) -> Sequence[Student]: ...


def clean_class_name(tab_text: str) -> str:
    """Strip the keyboard accelerator markers from a tab's text."""
    return tab_text.replace("&", "")


def class_table_rows(students: Iterable[Student]) -> list[tuple[int, str, str]]:
    """Rows of school number, first and last name, ordered by school number."""
    return [
        (student.id, student.first_name, student.last_name)
        for student in sorted(students, key=lambda s: s.id)
    ]


def delete_confirmation_text(student: Student) -> str:
    """The question asked before a student is deleted."""
    return (
        f"Adı {student.first_name},\nSoyadı {student.last_name},\nSınıfı {student.grade},\n"
        f"Şubesi {student.section} olan\n{student.id} numaralı "
        "öğrenciyi silmek istediğinizden emin misiniz?\n\n BU İŞLEM GERİ ALINAMAZ!"
    )


def remove_class_text(class_name: str) -> str:
    """The question asked before every student of a class is deleted."""
    return (
        f"{class_name} sınıfındaki bütün öğrenciler veri tabanından silinecektir. "
        "Tamam düğmesine tıkladığınız an işlem gerçekleştirilecek ve geri dönüşü olmayacaktır.\n"
        "Emin misiniz?"
    )


class DatabasePage:
    """The page listing the students of each class."""

    name = PAGE_NAME

    def __init__(self, database: StudentDatabase) -> None:
        self.database = database

    def description(self, current_tab_text: str) -> str:
        """School population, and the population of the shown class if any."""
        total = self.database.number_of_students()
        text = f"Okul mevcudu: {total}"
        if total == 0:
            return text
        class_name = clean_class_name(current_tab_text)
        population = len(self.database.students_by_class_name(class_name))
        return f"{text}  ♦  {class_name} sınıf mevcudu: {population}"

    def menu_actions(self) -> list[str]:
        """The entries of the 'more' menu; most need at least one class."""
        has_classes = bool(self.database.class_names())
        actions: list[str] = []
        if has_classes:
            actions += [EOTY_LABEL, REMOVE_CLASS_LABEL]
        actions.append(IMPORT_LABEL)
        if has_classes:
            actions.append(EXPORT_LABEL)
        return actions

    def tabs(self) -> list[tuple[str, list[tuple[int, str, str]]]]:
        """Each class name with the rows of its student table."""
        return [
            (name, class_table_rows(self.database.students_by_class_name(name)))
            for name in self.database.class_names()
        ]