"""Tests for R2 object storage."""

import asyncio
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from tenacity import wait_none

from cdn_client import R2Storage, StorageNotConfiguredError, UploadFile
from cdn_client import storage as storage_module
from cdn_client.storage import IMMUTABLE_CACHE, MUTABLE_CACHE, sanitize_name

FILE = UploadFile(buffer=b"{}", originalname="Geo Data.json", mimetype="application/json", size=2)


@pytest.fixture
def s3(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(storage_module.boto3, "client", MagicMock(return_value=client))
    monkeypatch.setattr(R2Storage._put.retry, "wait", wait_none())
    return client


def configured(public_url="https://cdn.example.com/") -> R2Storage:
    return R2Storage("acct", "key", "secret", "bucket", public_url)


class TestConfig:
    def test_disabled_without_credentials(self):
        storage = R2Storage(None, None, None, None, None)
        assert storage.is_enabled() is False
        assert storage.get_public_url("a.json") is None

    def test_upload_when_disabled_raises(self):
        storage = R2Storage(None, None, None, None, None)
        with pytest.raises(StorageNotConfiguredError):
            asyncio.run(storage.upload_file(FILE))

    def test_endpoint(self, s3):
        configured()
        kwargs = storage_module.boto3.client.call_args.kwargs
        assert kwargs["endpoint_url"] == "https://acct.r2.cloudflarestorage.com"
        assert kwargs["region_name"] == "auto"

    def test_public_url_trailing_slash(self, s3):
        assert configured().get_public_url("geo-data/geo-data.json") == "https://cdn.example.com/geo-data/geo-data.json"


class TestUpload:
    def test_fixed_key(self, s3):
        result = asyncio.run(configured().upload_file(FILE, "geo-data", timestamped=False))
        assert result.file_name == "geo-data/geo-data.json"
        assert result.url == "https://cdn.example.com/geo-data/geo-data.json"
        kwargs = s3.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "bucket"
        assert kwargs["CacheControl"] == MUTABLE_CACHE
        assert kwargs["ContentType"] == "application/json"

    def test_timestamped_key(self, s3):
        result = asyncio.run(configured().upload_file(FILE))
        assert result.file_name.startswith("uploads/")
        assert result.file_name.endswith("-geo-data.json")
        assert s3.put_object.call_args.kwargs["CacheControl"] == IMMUTABLE_CACHE

    def test_url_without_public_base(self, s3):
        result = asyncio.run(configured(public_url=None).upload_file(FILE, "geo-data", timestamped=False))
        assert result.file_name == "geo-data/geo-data.json"
        assert result.url is None

    def test_retries_connection_errors(self, s3):
        s3.put_object.side_effect = [EndpointConnectionError(endpoint_url="https://r2"), {}]
        asyncio.run(configured().upload_file(FILE))
        assert s3.put_object.call_count == 2

    def test_gives_up_after_three_attempts(self, s3):
        s3.put_object.side_effect = EndpointConnectionError(endpoint_url="https://r2")
        with pytest.raises(EndpointConnectionError):
            asyncio.run(configured().upload_file(FILE))
        assert s3.put_object.call_count == 3

    def test_client_errors_not_retried(self, s3):
        s3.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied"}, "ResponseMetadata": {"HTTPStatusCode": 403}}, "PutObject"
        )
        with pytest.raises(ClientError):
            asyncio.run(configured().upload_file(FILE))
        assert s3.put_object.call_count == 1

    def test_server_errors_retried(self, s3):
        error = ClientError({"Error": {"Code": "InternalError"}, "ResponseMetadata": {"HTTPStatusCode": 503}}, "PutObject")
        s3.put_object.side_effect = [error, {}]
        asyncio.run(configured().upload_file(FILE))
        assert s3.put_object.call_count == 2


class TestSanitize:
    def test_sanitize(self):
        assert sanitize_name("My  File (1).JSON") == "my-file-1-.json"
