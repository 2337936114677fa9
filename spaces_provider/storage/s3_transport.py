"""
S3-compatible transport (DigitalOcean Spaces, MinIO, AWS S3).

Uses boto3 against the configured endpoint. boto3 is blocking, so every
call runs in a worker thread to keep the event loop free.
"""

import asyncio
import io
import logging
from typing import Any
from urllib.parse import quote

import boto3
from botocore.config import Config

from spaces_provider.config import SpacesConfig
from spaces_provider.core.key_url import has_url_scheme
from spaces_provider.storage.base import ObjectTransport, PutResult

logger = logging.getLogger(__name__)


class S3Transport(ObjectTransport):
    """boto3 client bound to one endpoint and set of credentials."""

    def __init__(self, config: SpacesConfig, client: Any = None) -> None:
        self.endpoint = config.endpoint.rstrip("/")
        if client is None:
            client = boto3.client(
                "s3",
                endpoint_url=self.endpoint_url,
                aws_access_key_id=config.access_key,
                aws_secret_access_key=config.secret_key,
                region_name=config.region,
                config=Config(signature_version="s3v4"),
            )
            logger.info("S3 client initialized for endpoint: %s", self.endpoint_url)
        self._client = client

    @property
    def endpoint_url(self) -> str:
        """Endpoint with a scheme, as boto3 requires one."""
        if has_url_scheme(self.endpoint):
            return self.endpoint
        return f"https://{self.endpoint}"

    def object_location(self, bucket: str, key: str) -> str:
        """
        Virtual-hosted address of bucket/key. Keeps the endpoint's scheme
        only when the endpoint was configured with one.
        """
        if has_url_scheme(self.endpoint):
            scheme, host = self.endpoint.split("://", 1)
            return f"{scheme}://{bucket}.{host}/{quote(key)}"
        return f"{bucket}.{self.endpoint}/{quote(key)}"

    async def put(
        self,
        bucket: str,
        key: str,
        payload: Any,
        content_type: str,
        *,
        acl: str,
        cache_control: str,
    ) -> PutResult:
        if isinstance(payload, (bytes, bytearray, memoryview)):
            payload = io.BytesIO(payload)
        await asyncio.to_thread(
            self._client.upload_fileobj,
            payload,
            bucket,
            key,
            ExtraArgs={
                "ACL": acl,
                "ContentType": content_type,
                "CacheControl": cache_control,
            },
        )
        logger.debug("Uploaded %s to bucket %s", key, bucket)
        return PutResult(key=key, location=self.object_location(bucket, key))

    async def delete(self, bucket: str, key: str) -> None:
        # delete_object succeeds for missing keys; head_object raises ClientError (404).
        # Needs s3:GetObject as well as s3:DeleteObject on the key.
        await asyncio.to_thread(self._client.head_object, Bucket=bucket, Key=key)
        await asyncio.to_thread(self._client.delete_object, Bucket=bucket, Key=key)
        logger.debug("Deleted %s from bucket %s", key, bucket)
