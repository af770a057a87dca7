"""Mixed seating plans for school exams: students, halls, variant patterns and wizard steps."""

__version__ = "4.2.0"