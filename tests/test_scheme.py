import datetime

from examseating.scheme import Scheme, scheme_path, schemes_root


def _scheme():
    return Scheme(name="Midterm", date=datetime.date(2024, 3, 5), docs_root="/docs")


def test_schemes_root():
    assert schemes_root("/docs") == "/docs/Sınav Düzenleri/"


def test_scheme_path_format():
    assert _scheme().path() == "/docs/Sınav Düzenleri/05.03.2024/Midterm"


def test_instance_path_matches_function():
    scheme = _scheme()
    assert scheme.path() == scheme_path(scheme.docs_root, scheme.name, scheme.date)
    assert scheme.path().startswith(schemes_root(scheme.docs_root))


def test_file_paths():
    scheme = _scheme()
    assert scheme.class_list_path() == scheme.path() + "/Sınıf Karma Listeleri.xlsx"
    assert scheme.hall_layout_path() == scheme.path() + "/Oturma Planları.xlsx"


def test_defaults_are_independent():
    first, second = _scheme(), _scheme()
    first.hall_layouts.append("x")
    assert second.hall_layouts == []
    assert second.class_lists == []