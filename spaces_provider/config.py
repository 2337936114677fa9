"""Provider configuration built from the host's options."""

import hashlib

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from spaces_provider.exceptions import ConfigurationError

# Fixed parameters sent with every upload
PUBLIC_READ_ACL = "public-read"
CACHE_CONTROL = "public, max-age=31536000, immutable"  # 1 year

DEFAULT_HASH_ALGORITHM = "md5"
DEFAULT_REGION = "us-east-1"


class SpacesConfig(BaseModel):
    """Options the host passes to ``init``. Immutable once built."""

    endpoint: str = Field(..., min_length=1)
    access_key: str = Field(..., validation_alias=AliasChoices("key", "access_key"))
    secret_key: str = Field(..., validation_alias=AliasChoices("secret", "secret_key"))
    bucket: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("space", "bucket", "bucket_or_space_id"),
    )
    directory: str | None = None
    cdn_base_url: str | None = Field(
        default=None, validation_alias=AliasChoices("cdn", "cdn_base_url")
    )
    hash_algorithm: str = Field(
        default=DEFAULT_HASH_ALGORITHM,
        validation_alias=AliasChoices("hash", "hash_algorithm"),
    )
    region: str = DEFAULT_REGION

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("directory", "cdn_base_url", mode="before")
    @classmethod
    def _empty_to_none(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("directory")
    @classmethod
    def _strip_slashes(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip("/") or None

    @field_validator("hash_algorithm", mode="before")
    @classmethod
    def _check_algorithm(cls, value):
        if not value:
            return DEFAULT_HASH_ALGORITHM
        name = str(value).lower()
        if name not in hashlib.algorithms_available or name.startswith("shake_"):
            raise ValueError(f"unsupported hash algorithm: {value}")
        return name

    @classmethod
    def from_options(cls, options: dict) -> "SpacesConfig":
        """Validate a raw options mapping, raising ConfigurationError on failure."""
        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as exc:
            fields = {
                ".".join(str(part) for part in err["loc"]) or "options": err["msg"]
                for err in exc.errors()
            }
            raise ConfigurationError(
                f"Invalid provider options: {', '.join(sorted(fields))}",
                details=fields,
            ) from exc
