"""
Object storage client for audio uploads.

Moves large audio payloads out of the request body: audio is written under
the owner's folder and the transcription request then references the
storage path. Works with AWS S3 and S3-compatible providers.

Dependencies: boto3, tenacity
System role: Object storage boundary for transcription
"""

import logging
import mimetypes
import time
import uuid
from uuid import UUID

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from study_gateway.core.exceptions import StorageError

logger = logging.getLogger(__name__)

_THROTTLING_CODES = {"SlowDown", "Throttling", "ThrottlingException", "RequestLimitExceeded", "503"}


def _is_throttling(exc: BaseException) -> bool:
    return (
        isinstance(exc, ClientError)
        and exc.response.get("Error", {}).get("Code") in _THROTTLING_CODES
    )


class ObjectStorageClient:
    """S3-compatible client for the audio bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        key_prefix: str = "audio",
        s3_client=None,
    ) -> None:
        """
        Initialize object storage client.

        Args:
            bucket: Bucket name
            region: Bucket region
            endpoint_url: Endpoint of an S3-compatible provider (None for AWS)
            key_prefix: Folder under each user's directory
            s3_client: Preconfigured boto3 client (tests)
        """
        self._bucket = bucket
        self._key_prefix = key_prefix.strip("/")
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    def build_key(self, user_id: UUID, mime_type: str) -> str:
        """Key of a new audio object: <user_id>/<prefix>/<timestamp>-<uuid><ext>."""
        extension = mimetypes.guess_extension(mime_type.split(";")[0].strip()) or ".webm"
        return (
            f"{user_id}/{self._key_prefix}/"
            f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{extension}"
        )

    @retry(
        retry=retry_if_exception(_is_throttling),
        stop=stop_after_attempt(5),
        wait=wait_exponential_jitter(initial=1, max=30, jitter=5),
        reraise=True,
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:_put_object - Retry {retry_state.attempt_number}/5 after throttling"
        ),
    )
    def _put_object(self, key: str, data: bytes, mime_type: str) -> None:
        self._s3_client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=data,
            ContentType=mime_type,
        )

    def upload_audio(self, user_id: UUID, data: bytes, mime_type: str) -> str:
        """
        Upload audio and return its storage path.

        Args:
            user_id: Owner of the recording
            data: Audio bytes
            mime_type: Audio MIME type

        Returns:
            str: Storage path (object key)

        Raises:
            StorageError: If the upload fails
        """
        key = self.build_key(user_id, mime_type)
        logger.info(f"{__name__}:upload_audio - START key={key} bytes={len(data)}")
        try:
            self._put_object(key, data, mime_type)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:upload_audio - {type(e).__name__}: {e}")
            raise StorageError(
                f"Failed to upload audio: {e}",
                operation="upload",
                details={"key": key},
            ) from e
        return key

    def delete(self, storage_path: str) -> None:
        """
        Delete an object.

        Args:
            storage_path: Object key returned by upload_audio

        Raises:
            StorageError: If the delete fails
        """
        try:
            self._s3_client.delete_object(Bucket=self._bucket, Key=storage_path)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:delete - {type(e).__name__}: {e}")
            raise StorageError(
                f"Failed to delete object: {e}",
                operation="delete",
                details={"key": storage_path},
            ) from e
