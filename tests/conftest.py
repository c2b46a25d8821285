import pytest

from app import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "DATA_DIR": str(tmp_path / "data"),
            "ADMIN_USER": "admin",
            "ADMIN_PASS": "s3cret",
        }
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    return app.extensions["storage"]


@pytest.fixture
def admin_client(client):
    resp = client.post("/admin/login", data={"username": "admin", "password": "s3cret"})
    assert resp.status_code == 302
    return client
