"""
Test suite for ObjectStorageClient.

Uses a MagicMock boto3 client; no AWS access.

System role: Verification of the audio upload boundary
"""

import uuid
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from study_gateway.boundary.storage import ObjectStorageClient
from study_gateway.core.exceptions import StorageError


@pytest.fixture
def mock_s3() -> MagicMock:
    return MagicMock()


@pytest.fixture
def storage(mock_s3: MagicMock) -> ObjectStorageClient:
    return ObjectStorageClient(bucket="documents", key_prefix="audio", s3_client=mock_s3)


def client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "PutObject")


class TestObjectStorageClient:
    """Test suite for ObjectStorageClient."""

    def test_upload_should_put_under_user_folder(
        self, storage: ObjectStorageClient, mock_s3: MagicMock
    ) -> None:
        # Arrange
        user_id = uuid.uuid4()

        # Act
        key = storage.upload_audio(user_id, b"audio-bytes", "audio/mpeg")

        # Assert
        assert key.startswith(f"{user_id}/audio/")
        mock_s3.put_object.assert_called_once()
        kwargs = mock_s3.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "documents"
        assert kwargs["Key"] == key
        assert kwargs["ContentType"] == "audio/mpeg"

    def test_upload_failure_should_raise_storage_error(
        self, storage: ObjectStorageClient, mock_s3: MagicMock
    ) -> None:
        mock_s3.put_object.side_effect = client_error("AccessDenied")

        with pytest.raises(StorageError) as exc_info:
            storage.upload_audio(uuid.uuid4(), b"x", "audio/webm")

        assert exc_info.value.details["operation"] == "upload"
        assert mock_s3.put_object.call_count == 1

    def test_throttling_should_be_retried(
        self, storage: ObjectStorageClient, mock_s3: MagicMock
    ) -> None:
        # Arrange
        mock_s3.put_object.side_effect = [client_error("SlowDown"), None]

        # Act
        with patch("time.sleep"):
            key = storage.upload_audio(uuid.uuid4(), b"x", "audio/webm")

        # Assert
        assert key
        assert mock_s3.put_object.call_count == 2

    def test_delete_failure_should_raise_storage_error(
        self, storage: ObjectStorageClient, mock_s3: MagicMock
    ) -> None:
        mock_s3.delete_object.side_effect = client_error("NoSuchBucket")

        with pytest.raises(StorageError):
            storage.delete("user/audio/1.webm")
