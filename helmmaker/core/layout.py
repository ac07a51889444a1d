"""File and directory names inside a chart."""

CHART_FILE_NAME = "Chart.yaml"
VALUES_FILE_NAME = "values.yaml"
IGNORE_FILE_NAME = ".helmignore"
TEMPLATES_DIR = "templates"
HELPERS_FILE_NAME = "_helpers.tpl"
NOTES_FILE_NAME = "NOTES.txt"
TEMPLATES_TESTS_DIR = f"{TEMPLATES_DIR}/tests"
