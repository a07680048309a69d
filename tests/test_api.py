import pytest
from fastapi.testclient import TestClient

from namecase.config import Settings, get_settings
from namecase.log import setup_logging
from namecase.main import app

client = TestClient(app)


@pytest.fixture
def irish_off():
    app.dependency_overrides[get_settings] = lambda: Settings(NAMECASE_IRISH=False)
    yield
    app.dependency_overrides.clear()


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_namecase_single():
    r = client.post("/namecase", json={"name": "mary o'brien"})
    assert r.status_code == 200

    data = r.json()
    assert data["original"] == "mary o'brien"
    assert data["formatted"] == "Mary O'Brien"
    assert data["options"] == {"lazy": True, "irish": True, "spanish": True}


def test_namecase_request_options():
    r = client.post("/namecase", json={"name": "juan y maria", "options": {"spanish": False}})
    assert r.status_code == 200
    assert r.json()["formatted"] == "Juan Y Maria"
    assert r.json()["options"]["spanish"] is False


def test_namecase_unknown_option_rejected():
    r = client.post("/namecase", json={"name": "x", "options": {"german": True}})
    assert r.status_code == 422


def test_namecase_service_defaults(irish_off):
    r = client.post("/namecase", json={"name": "macdonald"})
    assert r.json()["formatted"] == "Macdonald"

    r = client.post("/namecase", json={"name": "macdonald", "options": {"irish": True}})
    assert r.json()["formatted"] == "MacDonald"


def test_namecase_batch():
    names = ["john smith", "LOUIS XIV", "McDonald", ""]
    r = client.post("/namecase/batch", json={"names": names})
    assert r.status_code == 200

    data = r.json()
    assert data["count"] == 4
    assert [item["formatted"] for item in data["results"]] == ["John Smith", "Louis XIV", "McDonald", ""]
    assert [item["original"] for item in data["results"]] == names


def test_file_txt_latin1():
    # Latin-1 bytes to force encoding detection
    raw = "rené lévesque\r\n\r\nCONDE DE LA TORRE\r\n".encode("latin-1")

    files = {"file": ("names.txt", raw, "text/plain")}
    r = client.post("/namecase/file", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["source"] == {"format": "txt"}
    assert [item["formatted"] for item in data["results"]] == ["René Lévesque", "Conde de la Torre"]
    assert data["encoding"]["decode_fallback"] is False


def test_file_csv_column_and_form_options():
    raw = b"id,full_name\n1,macdonald\n2,juan y maria\n3,\n"

    files = {"file": ("people.csv", raw, "text/csv")}
    form = {"column": "full_name", "irish": "false"}
    r = client.post("/namecase/file", files=files, data=form)
    assert r.status_code == 200

    data = r.json()
    assert data["source"] == {"format": "csv", "column": "full_name"}
    assert data["options"]["irish"] is False
    assert [item["formatted"] for item in data["results"]] == ["Macdonald", "Juan y Maria"]


def test_file_csv_missing_column():
    files = {"file": ("people.csv", b"id,surname\n1,smith\n", "text/csv")}
    r = client.post("/namecase/file", files=files)
    assert r.status_code == 422
    assert "'name'" in r.json()["detail"]


def test_file_rejects_other_formats():
    files = {"file": ("names.xlsx", b"\x00\x01", "application/octet-stream")}
    r = client.post("/namecase/file", files=files)
    assert r.status_code == 422
    assert r.json()["detail"] == "Only TXT or CSV files are supported"


def test_setup_logging_only_configures():
    assert setup_logging("INFO") is None
