# examseating

The building blocks of a mixed seating planner for school exams. Students
from several classes are placed into exam halls so that neighbouring desks
hold different exam variants. The package holds the data model, the variant
patterns, the hall layouts and the step-by-step logic of the screens that
import students and create a new exam scheme.

## What is inside

- `examseating.models` – `Student`, `ExamStudent` (ordered by school number,
  made with `ExamStudent.from_student`), `Desk` and `DeskCoordinates`
  (`DeskCoordinates.from_index` turns a 1-based desk number into a row and
  column, six desks to a row).
- `examseating.pattern` – the exam variants `Variant.A` to `Variant.D` and the
  `Pattern` that says which variant sits at each desk for one to four grades.
  `Pattern.random(grade_count)` picks a random starting row offset;
  `variant_at(row, col)` looks up a desk.
- `examseating.hall` – `Layout`, rows of six desks stored as compact JSON
  (`with_capacity`, `from_json_str`, `to_json_str`, `clear`), and `Hall` with
  `count_variant` and `count_students`.
- `examseating.scheme` – a generated `Scheme` and where its files live
  (`path`, `class_list_path`, `hall_layout_path`, `schemes_root`,
  `scheme_path`).
- `examseating.app` – application name and version, the light colour palette
  (`fusion_light`, `Palette`, `Color`, `ColorGroup`, `ColorRole`),
  `splash_text` and `restart_detached`, which starts a new detached process.
- `examseating.import_wizard` – the pages of importing one class from a
  spreadsheet (`ImportWizard`, `ImportPage`) and the texts it fills in.
- `examseating.scheme_wizard` – the pages of creating a new exam scheme
  (`SchemeWizard`, `SchemePage`, `ExamInfo`), the preview grid with its two
  aisles (`preview_grid`, `effective_column`) and `fill_template`.
- `examseating.pickers` – choosing attending classes and exam halls
  (`ListPicker`), with the last choice remembered in a JSON file or in memory
  (`SelectionStore`).
- `examseating.pages` – the main window's pages (`WelcomePage`, `AboutPage`),
  `PageNavigator` and `demo_status_message`.
- `examseating.widgets` – `ErrorReporter`, `contact_link_html`, `Spinner`,
  `TwoButtonNav` and `ActivationButtons`.
- `examseating.database_page` – the student database page's description,
  menu entries, class tables and confirmation texts (`DatabasePage`).
- `examseating.student_editor` – the add/edit student form (`StudentForm`,
  `EditorMode`) and its texts.

## Examples

Desk layouts are rows of six desks; desks beyond the capacity in the last row
do not exist:

```python
from examseating.hall import Layout

layout = Layout.with_capacity(27)
text = layout.to_json_str()
same = Layout.from_json_str(text)
```

A pattern picks the exam variant for every desk. With three grades sitting
together, the rows cycle through six arrangements, starting at a random offset:

```python
from examseating.pattern import Pattern

pattern = Pattern.random(3)
variant = pattern.variant_at(0, 1)
```

Every scheme is stored under a folder named for its date and exam:

```python
from datetime import date
from examseating.scheme import scheme_path

folder = scheme_path("/home/teacher/exams", "1. Dönem 1. Yazılı", date(2024, 11, 4))
# "/home/teacher/exams/Sınav Düzenleri/04.11.2024/1. Dönem 1. Yazılı"
```

## What the package does not do

- It has no windows and no command to start: the pages, wizards and widgets
  keep state and produce texts, but nothing draws them on screen.
- It does not store students. `DatabasePage` works with any object that
  answers `number_of_students`, `class_names` and `students_by_class_name`.
- It does not read spreadsheets, generate the seating itself or write the
  exported class lists and seating plans. `SchemeWizard` is handed a
  generator object, and `ImportWizard` is handed the students already read.
- It does not list the history of earlier exam schemes.
- It does not check or activate licences.

## Running the tests

Install the `test` extra and run pytest from the project directory.