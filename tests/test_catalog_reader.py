import json

import pytest

from gustanto_pos.infrastructure.catalog import CatalogReader, CatalogNotFoundError


class TestCatalogReader:

    def test_returns_document_unchanged(self, tmp_path):
        codex = {"items": [{"name": "Tea", "price": 20}]}
        path = tmp_path / "codex.json"
        path.write_text(json.dumps(codex), encoding="utf-8")

        assert CatalogReader(path).get_catalog() == codex

    def test_missing_file_raises_not_found(self, tmp_path):
        with pytest.raises(CatalogNotFoundError):
            CatalogReader(tmp_path / "absent.json").get_catalog()

    def test_invalid_json_raises_not_found(self, tmp_path):
        path = tmp_path / "codex.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogNotFoundError):
            CatalogReader(path).get_catalog()

    def test_rereads_file_on_every_call(self, tmp_path):
        path = tmp_path / "codex.json"
        path.write_text('{"version": 1}', encoding="utf-8")
        reader = CatalogReader(path)
        assert reader.get_catalog() == {"version": 1}

        path.write_text('{"version": 2}', encoding="utf-8")
        assert reader.get_catalog() == {"version": 2}
