"""Remote object storage for published images."""

import logging
from typing import Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from blog_publisher.errors import UploadError

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    def put(self, bucket: str, key: str, body: bytes) -> None:
        ...


class S3ObjectStore:
    """Uploads objects to Amazon S3 (or an S3-compatible endpoint)."""

    def __init__(self, region: str, endpoint_url: Optional[str] = None, client=None):
        """Initialize S3ObjectStore.

        Args:
            region: AWS region name
            endpoint_url: Optional endpoint for S3-compatible services
            client: Pre-built boto3 S3 client (built lazily when omitted)
        """
        self.region = region
        self.endpoint_url = endpoint_url
        self._client = client

    def _get_s3_client(self):
        if self._client is None:
            kwargs = {"region_name": self.region}
            if self.endpoint_url:
                kwargs["endpoint_url"] = self.endpoint_url
            self._client = boto3.client("s3", **kwargs)
        return self._client

    def put(self, bucket: str, key: str, body: bytes) -> None:
        try:
            self._get_s3_client().put_object(Bucket=bucket, Key=key, Body=body)
        except (BotoCoreError, ClientError) as e:
            raise UploadError(key, str(e)) from e
        logger.debug("PUT s3://%s/%s (%d bytes)", bucket, key, len(body))
