"""
Command line: end-to-end runs against the fixture catalog.
"""

import json
import logging
import threading

import pytest

from exceptions import WriterError
from infrastructure.filesystem import FileDocumentWriter
from ogc_styles.cli import build_config, build_parser, main

STORAGE_ENV = [
    "FILE_DESTINATION",
    "AZURE_STORAGE_CONNECTION_STRING", "AZURE_STORAGE_ACCOUNT_NAME",
    "AZURE_STORAGE_CONTAINER", "AZURE_STORAGE_BLOBS_PREFIX",
    "API_FORMATS",
]


@pytest.fixture(autouse=True)
def clean_storage_env(monkeypatch):
    for var in STORAGE_ENV:
        monkeypatch.delenv(var, raising=False)


class TestBuildConfig:
    def test_flags_override_environment(self, monkeypatch):
        monkeypatch.setenv("FILE_DESTINATION", "/from/env")
        monkeypatch.setenv("API_FORMATS", "html")
        args = build_parser().parse_args(["assets", "config.yaml", "--file-destination", "/from/flag", "--formats", "json"])

        config = build_config(args)
        assert config.storage.file_destination == "/from/flag"
        assert config.formats == ["json"]

    def test_environment_used_without_flags(self, monkeypatch):
        monkeypatch.setenv("AZURE_STORAGE_CONTAINER", "styles")
        args = build_parser().parse_args(["assets", "config.yaml", "--azure-storage-blobs-prefix", "v1"])

        config = build_config(args)
        assert config.storage.azure_container == "styles"
        assert config.storage.azure_prefix == "v1/"


class TestMain:
    def test_writes_documents(self, tmp_path, asset_dir, config_path):
        exit_code = main([str(asset_dir), str(config_path), "--file-destination", str(tmp_path)])

        assert exit_code == 0
        assert (tmp_path / "styles" / "night.sld").read_bytes() == \
            b'<root href="https://example.org/catalog/1.0">SLD</root>\n'
        assert (tmp_path / "resources" / "thumbnail.png").exists()
        assert (tmp_path / "fonts" / "0-255.pbf").exists()
        styles = json.loads((tmp_path / "styles.json").read_text())
        assert styles["default"] == "night"

    def test_destination_from_environment(self, tmp_path, monkeypatch, asset_dir, config_path):
        monkeypatch.setenv("FILE_DESTINATION", str(tmp_path))
        assert main([str(asset_dir), str(config_path)]) == 0
        assert (tmp_path / "styles" / "night" / "metadata.json").exists()

    def test_invalid_catalog_fails(self, tmp_path, asset_dir, minimal_config_path):
        exit_code = main([str(asset_dir), str(minimal_config_path), "--file-destination", str(tmp_path)])
        assert exit_code == 1
        assert not (tmp_path / "styles.json").exists()

    def test_missing_asset_fails(self, tmp_path, config_path):
        empty_assets = tmp_path / "assets"
        empty_assets.mkdir()
        out = tmp_path / "out"
        assert main([str(empty_assets), str(config_path), "--file-destination", str(out)]) == 1
        assert not (out / "styles.json").exists()

    def test_missing_config_fails(self, tmp_path, asset_dir):
        assert main([str(asset_dir), str(tmp_path / "absent.yaml"), "--file-destination", str(tmp_path)]) == 1

    def test_no_destination_fails(self, asset_dir, config_path):
        assert main([str(asset_dir), str(config_path)]) == 1

    def test_run_context_carries_destination(self, tmp_path, asset_dir, config_path, caplog):
        with caplog.at_level(logging.INFO):
            assert main([str(asset_dir), str(config_path), "--file-destination", str(tmp_path)]) == 0

        dims = [getattr(r, "custom_dimensions", {}) for r in caplog.records]
        assert any(d.get("destination") == "file" and d.get("run_id") for d in dims)

    def test_writer_failure_stops_producer(self, tmp_path, monkeypatch, asset_dir, config_path):
        def failing_write(self, path, content, media_type):
            raise WriterError("disk full", path=path)

        monkeypatch.setattr(FileDocumentWriter, "write", failing_write)
        assert main([str(asset_dir), str(config_path), "--file-destination", str(tmp_path)]) == 1
        assert not [t for t in threading.enumerate() if t.name == "styles-document-producer"]
