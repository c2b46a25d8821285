import json
import logging

from app.storage import (
    CSV_COLUMNS,
    DEFAULT_EVENT,
    StorageConfig,
    append_row,
    ensure_data_files,
    format_csv_row,
    read_collection,
    write_collection,
)


def test_read_missing_file_returns_empty(tmp_path):
    assert read_collection(str(tmp_path / "nope.json")) == []


def test_read_blank_file_is_empty_without_warning(tmp_path, caplog):
    path = tmp_path / "users.json"
    path.write_text("   \n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="app.storage"):
        assert read_collection(str(path)) == []
    assert caplog.records == []


def test_read_corrupt_file_is_empty_and_logged(tmp_path, caplog):
    path = tmp_path / "users.json"
    path.write_text("[{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="app.storage"):
        assert read_collection(str(path)) == []
    assert any("corrupta" in r.getMessage() for r in caplog.records)


def test_read_non_array_is_empty(tmp_path):
    path = tmp_path / "events.json"
    path.write_text('{"id": "1"}', encoding="utf-8")
    assert read_collection(str(path)) == []


def test_write_then_read_returns_same_records(tmp_path):
    path = str(tmp_path / "users.json")
    records = [
        {"fullName": f"Lead {i}", "email": f"l{i}@example.com", "mobile": str(9000 + i)}
        for i in range(5)
    ]
    write_collection(path, records)
    assert read_collection(path) == records


def test_write_overwrites_previous_content(tmp_path):
    path = str(tmp_path / "events.json")
    write_collection(path, [{"id": "1"}, {"id": "2"}])
    write_collection(path, [{"id": "3"}])
    assert read_collection(path) == [{"id": "3"}]


def test_csv_row_doubles_embedded_quotes():
    row = format_csv_row({"fullName": 'Ravi "RK" Kumar', "email": "r@x.in", "mobile": "99"})
    assert row == '"Ravi ""RK"" Kumar","r@x.in","99","","","",""'


def test_append_row_adds_one_line(tmp_path):
    path = tmp_path / "users.csv"
    path.write_text(",".join(CSV_COLUMNS) + "\n", encoding="utf-8")
    append_row(str(path), {"fullName": "A", "email": "a@b.c", "mobile": "1", "city": "Bhopal"})
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[1] == '"A","a@b.c","1","","Bhopal","",""'


def test_ensure_data_files_seeds_once(tmp_path):
    storage = StorageConfig.from_dir(str(tmp_path / "data"))
    ensure_data_files(storage)

    assert read_collection(storage.users_json) == []
    with open(storage.users_csv, encoding="utf-8") as f:
        assert f.read() == "fullName,email,mobile,college,city,state,createdAt\n"
    events = read_collection(storage.events_json)
    assert len(events) == 1
    assert events[0]["title"] == DEFAULT_EVENT["title"]
    assert events[0]["id"]

    # no pisa datos existentes
    write_collection(storage.events_json, [])
    ensure_data_files(storage)
    with open(storage.events_json, encoding="utf-8") as f:
        assert json.load(f) == []


def test_read_drops_non_object_elements_and_logs(tmp_path, caplog):
    path = tmp_path / "events.json"
    path.write_text('[null, {"id": "1"}, 3, "x"]', encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="app.storage"):
        assert read_collection(str(path)) == [{"id": "1"}]
    assert any("no-objeto" in r.getMessage() for r in caplog.records)
