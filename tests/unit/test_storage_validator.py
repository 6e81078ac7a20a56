"""
Unit tests for the storage connection check.
"""
import pytest

from nvr_console.domain.services.storage_validator import (
    REQUIRED_KEYS,
    STUB_SUCCESS_MESSAGE,
    validate_connection,
)

S3_CONFIG = {
    "endpoint": "https://s3.example.com",
    "bucket": "nvr-archive",
    "accessKey": "AKIAEXAMPLE",
    "secretKey": "secret",
}


class TestValidateConnection:
    """Tests for validate_connection"""

    def test_s3_without_config_lists_every_key(self):
        result = validate_connection("s3", {})
        assert result.ok is False
        assert result.message == "Missing S3 fields: endpoint, bucket, accessKey, secretKey"
        assert result.missing_fields == ["endpoint", "bucket", "accessKey", "secretKey"]

    def test_s3_complete_passes(self):
        result = validate_connection("s3", S3_CONFIG)
        assert result.ok is True
        assert result.message == STUB_SUCCESS_MESSAGE
        assert result.missing_fields == []

    def test_s3_partial_names_only_missing(self):
        config = dict(S3_CONFIG)
        del config["secretKey"]
        result = validate_connection("s3", config)
        assert result.ok is False
        assert result.missing_fields == ["secretKey"]

    def test_empty_value_counts_as_missing(self):
        result = validate_connection("ftp", {"host": "ftp.example.com", "username": "", "password": "pw"})
        assert result.ok is False
        assert result.missing_fields == ["username"]
        assert result.message == "Missing FTP fields: username"

    def test_http_uses_singular_label(self):
        result = validate_connection("http", None)
        assert result.ok is False
        assert result.message == "Missing HTTP field: url"

    def test_http_with_url_passes(self):
        assert validate_connection("http", {"url": "https://archive.example.com/upload"}).ok is True

    def test_local_needs_nothing(self):
        assert validate_connection("local", None).ok is True
        assert validate_connection("local", {"path": "/data"}).ok is True

    def test_extra_keys_are_ignored(self):
        config = dict(S3_CONFIG, region="eu-west-1")
        assert validate_connection("s3", config).ok is True

    @pytest.mark.parametrize("storage_type", ["azure", "", None])
    def test_unsupported_type(self, storage_type):
        result = validate_connection(storage_type, {"url": "x"})
        assert result.ok is False
        assert "Unsupported storage type" in result.message
        assert "s3, ftp, http, local" in result.message

    def test_required_keys_cover_every_type(self):
        assert set(item.value for item in REQUIRED_KEYS) == {"s3", "ftp", "http", "local"}
