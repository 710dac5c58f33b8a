import base64

import pytest

from huffpress.config_loader import load_config
from huffpress.server import create_app


@pytest.fixture
def client():
    app = create_app(load_config())
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_compress_and_decompress(client):
    response = client.post("/compress", json={"text": "2150"})
    assert response.status_code == 200
    body = response.get_json()
    assert base64.b64decode(body["data"]) == bytes.fromhex("0730310032350000009c")
    assert body["original_size"] == 4
    assert body["compressed_size"] == 10

    response = client.post("/decompress", json={"data": body["data"]})
    assert response.status_code == 200
    assert response.get_json() == {"text": "2150"}


def test_compress_requires_text(client):
    assert client.post("/compress", json={"message": "hi"}).status_code == 400
    assert client.post("/compress", json=["hi"]).status_code == 400


def test_compress_empty_text(client):
    response = client.post("/compress", json={"text": ""})
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_decompress_invalid_base64(client):
    response = client.post("/decompress", json={"data": "not base64!"})
    assert response.status_code == 400


def test_decompress_corrupt_container(client):
    data = base64.b64encode(b"\x05ab").decode("ascii")
    response = client.post("/decompress", json={"data": data})
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_compress_lone_surrogate(client):
    response = client.post("/compress", data='{"text": "a\\ud800b"}',
                           content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_compress_text_outside_configured_encoding():
    config = load_config()
    config["codec"]["encoding"] = "latin-1"
    app = create_app(config)
    response = app.test_client().post("/compress", json={"text": "東京"})
    assert response.status_code == 400
    assert "error" in response.get_json()
