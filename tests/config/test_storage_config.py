"""
Storage configuration: destination selection and environment loading.
"""

import pytest

from config import StorageConfig, StorageDestination
from exceptions import ConfigurationError


class TestDestination:
    def test_file_destination(self, clean_env):
        clean_env.setenv("FILE_DESTINATION", "/srv/styles")
        storage = StorageConfig.from_environment()
        assert storage.destination == StorageDestination.FILE
        assert storage.file_destination == "/srv/styles"

    def test_azure_with_connection_string(self, clean_env):
        clean_env.setenv("AZURE_STORAGE_CONNECTION_STRING", "UseDevelopmentStorage=true")
        clean_env.setenv("AZURE_STORAGE_CONTAINER", "styles")
        assert StorageConfig.from_environment().destination == StorageDestination.AZURE_BLOB

    def test_azure_with_account_name(self, clean_env):
        clean_env.setenv("AZURE_STORAGE_ACCOUNT_NAME", "acct")
        clean_env.setenv("AZURE_STORAGE_CONTAINER", "styles")
        storage = StorageConfig.from_environment()
        assert storage.destination == StorageDestination.AZURE_BLOB
        assert storage.azure_account_url == "https://acct.blob.core.windows.net"

    def test_azure_without_container_is_incomplete(self, clean_env):
        clean_env.setenv("AZURE_STORAGE_CONNECTION_STRING", "UseDevelopmentStorage=true")
        storage = StorageConfig.from_environment()
        assert not storage.azure_configured
        with pytest.raises(ConfigurationError):
            storage.destination

    def test_file_wins(self, clean_env):
        clean_env.setenv("FILE_DESTINATION", "/srv/styles")
        clean_env.setenv("AZURE_STORAGE_CONNECTION_STRING", "UseDevelopmentStorage=true")
        clean_env.setenv("AZURE_STORAGE_CONTAINER", "styles")
        assert StorageConfig.from_environment().destination == StorageDestination.FILE

    def test_nothing_configured(self, clean_env):
        with pytest.raises(ConfigurationError, match="no output destination configured"):
            StorageConfig.from_environment().destination

    def test_empty_values_ignored(self, clean_env):
        clean_env.setenv("FILE_DESTINATION", "")
        assert StorageConfig.from_environment().file_destination is None


class TestPrefix:
    @pytest.mark.parametrize("raw,expected", [
        ("", ""),
        ("catalog", "catalog/"),
        ("catalog/1.0/", "catalog/1.0/"),
        ("/catalog/", "catalog/"),
        ("/", ""),
    ])
    def test_trailing_slash(self, raw, expected):
        assert StorageConfig(azure_prefix=raw).azure_prefix == expected

    def test_from_environment(self, clean_env):
        clean_env.setenv("AZURE_STORAGE_BLOBS_PREFIX", "v1")
        assert StorageConfig.from_environment().azure_prefix == "v1/"


class TestDebugDict:
    def test_connection_string_masked(self):
        storage = StorageConfig(azure_connection_string="AccountKey=secret", azure_container="styles")
        debug = storage.debug_dict()
        assert debug["azure_connection_string"] == "***MASKED***"
        assert "secret" not in str(debug)
