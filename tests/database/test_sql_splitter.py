from tutor_desk.database.bootstrap import _strip_comments, _strip_create_db_and_use, iter_sql_statements


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO classes (class_name) VALUES ('A; B');\nSELECT 1;\n"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO classes (class_name) VALUES ('A; B')", "SELECT 1"]


def test_trailing_statement_without_semicolon():
    assert list(iter_sql_statements("SELECT 1; SELECT 2")) == ["SELECT 1", "SELECT 2"]


def test_strips_database_selection_and_comments():
    sql = "-- schema\nCREATE DATABASE IF NOT EXISTS tutor_desk;\nUSE tutor_desk;\nCREATE TABLE t (id INT);\n"

    cleaned = _strip_create_db_and_use(_strip_comments(sql))

    assert list(iter_sql_statements(cleaned)) == ["CREATE TABLE t (id INT)"]
