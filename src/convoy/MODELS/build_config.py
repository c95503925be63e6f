"""
Models describing a single convoy build run.
"""
from typing import List
from pydantic import BaseModel, field_validator

IMAGE_TAG = "convoy:local"
CONSUL_LOCATION_ENV = "CONVOY_CONSUL_LOCATION"
# Must match the ENVOY_VERSION default in embeddable/Dockerfile
DEFAULT_ENVOY_VERSION = "1.26"


class BuildConfig(BaseModel):
    """
    Validated configuration for a build.

    An empty envoy_version means the Dockerfile's default envoy version is used.
    """
    consul_location: str
    envoy_version: str = ""

    @field_validator("consul_location")
    @classmethod
    def _require_location(cls, value: str) -> str:
        if not value:
            raise ValueError("consul location must be supplied")
        return value


class BuildContext(BaseModel):
    """
    A temporary directory populated with everything `docker build` needs.
    """
    path: str
    files: List[str] = []
