import json

import pytest

from tagminer.config import Settings
from tagminer.server.app import create_app


@pytest.fixture
def inputs(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    (data / "a.json").write_text(json.dumps({"tags": ["tag1"], "children": [{"tags": ["tag2"]}]}))
    (data / "b.json").write_text("{ not json")
    tags_file = tmp_path / "tags.txt"
    tags_file.write_text("tag1\ntag2\ntag3")
    return data, tags_file


class TestServer:
    @pytest.mark.timeout(10)
    def test_report_page_uses_html_separator(self, inputs):
        data, tags_file = inputs
        client = create_app(Settings(data_dir=data, tags_file=tags_file)).test_client()

        response = client.get("/")

        assert response.status_code == 200
        assert response.content_type.startswith("text/html")
        assert response.get_data(as_text=True) == "tag2 1<br/>tag1 1<br/>tag3 0"

    def test_report_api(self, inputs):
        data, tags_file = inputs
        client = create_app(Settings(data_dir=data, tags_file=tags_file)).test_client()

        payload = client.get("/api/report").get_json()

        assert payload["ranked"] == [["tag2", 1], ["tag1", 1], ["tag3", 0]]
        assert len(payload["malformed"]) == 1

    def test_missing_vocabulary_returns_500(self, inputs, tmp_path):
        data, _ = inputs
        client = create_app(
            Settings(data_dir=data, tags_file=tmp_path / "missing.txt")
        ).test_client()

        response = client.get("/")

        assert response.status_code == 500
        assert "missing.txt" in response.get_data(as_text=True)
