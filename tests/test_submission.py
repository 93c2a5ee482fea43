import pytest

from chaosworkshop import submission

VALID_ID = "0123456789abcdef"


@pytest.fixture
def data_root(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_ROOT", str(tmp_path))
    (tmp_path / "data").mkdir()
    return tmp_path


def test_valid_submission_id():
    assert submission.is_valid_submission_id(VALID_ID) is True


@pytest.mark.parametrize(
    "submission_id",
    ["0123456789ABCDEF", "0123456789abcde", "0123456789abcdef0", "0123456789abcde-", "0123456789abcdé", ""],
)
def test_invalid_submission_ids(submission_id):
    assert submission.is_valid_submission_id(submission_id) is False


def test_submission_dir():
    assert submission.submission_dir(VALID_ID) == "data/submissions/" + VALID_ID


def test_open_database_creates_table(tmp_path):
    connection = submission.open_database(str(tmp_path / "subs.db"))
    columns = [row[1] for row in connection.execute("PRAGMA table_info(submissions)")]
    connection.close()
    assert columns == ["id", "author", "description", "lastupdated", "name", "sha256", "version"]


def test_open_database_twice_keeps_rows(tmp_path):
    path = str(tmp_path / "subs.db")
    first = submission.open_database(path)
    first.execute(
        "INSERT INTO submissions VALUES ('0123456789abcdef', 'author', NULL, 1, 'name', NULL, '1.0')"
    )
    first.close()
    second = submission.open_database(path)
    count = second.execute("SELECT COUNT(*) FROM submissions").fetchone()[0]
    second.close()
    assert count == 1


def test_open_database_default_path(data_root):
    connection = submission.open_database()
    tables = [row[0] for row in connection.execute("SELECT name FROM sqlite_master WHERE type='table'")]
    connection.close()
    assert tables == ["submissions"]
    assert (data_root / "data" / "submissions.db").exists()


def test_changelog_round_trip(data_root):
    (data_root / "data" / "submissions" / VALID_ID).mkdir(parents=True)
    changelog = {"changelog": {"1.0": "First release", "1.1": "Fixes"}}
    submission.write_changelog_json(VALID_ID, changelog)
    assert submission.get_changelog_json(VALID_ID) == changelog


def test_changelog_is_indented(data_root):
    directory = data_root / "data" / "submissions" / VALID_ID
    directory.mkdir(parents=True)
    submission.write_changelog_json(VALID_ID, {"changelog": {}})
    assert (directory / "changelog.json").read_text().startswith("{\n    ")


def test_missing_changelog(data_root):
    assert submission.get_changelog_json(VALID_ID) is None