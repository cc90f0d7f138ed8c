# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Image reference parsing.
Splits references like 'rust:1.83-slim' or 'ghcr.io/org/tool@sha256:...'
into registry, repository, tag and digest so that a container name can be
derived from the base image.
"""

import re
from typing import Optional
from dataclasses import dataclass

_NAME_UNSAFE = re.compile(r"[^a-z0-9_-]+")


@dataclass(frozen=True)
class ImageReference:
    """
    Parsed image reference.

    Examples:
        - ubuntu -> docker.io/library/ubuntu:latest
        - rust:1.83-slim -> docker.io/library/rust:1.83-slim
        - mcr.microsoft.com/devcontainers/python:3.12 -> registry mcr.microsoft.com
        - localhost:5000/tool -> registry localhost:5000, tag latest
    """

    registry: str
    repository: str
    tag: Optional[str] = None
    digest: Optional[str] = None

    DEFAULT_REGISTRY = "docker.io"
    DEFAULT_TAG = "latest"

    @classmethod
    def parse(cls, reference: str) -> "ImageReference":
        """
        Parse an image reference string.

        Args:
            reference: Image reference string (e.g., 'ubuntu:22.04', 'myuser/myimage:v1')

        Returns:
            Parsed ImageReference object.
        """
        reference = reference.strip()
        if not reference:
            raise ValueError("Empty image reference")

        digest = None
        if "@" in reference:
            reference, digest = reference.rsplit("@", 1)

        tag = None
        last_colon = reference.rfind(":")
        # A colon followed by a path segment is a registry port, not a tag
        if last_colon != -1 and "/" not in reference[last_colon + 1:]:
            tag = reference[last_colon + 1:]
            reference = reference[:last_colon]

        parts = reference.split("/")
        first_part = parts[0]
        if len(parts) > 1 and ("." in first_part or ":" in first_part or first_part == "localhost"):
            registry = first_part
            repository = "/".join(parts[1:])
        elif len(parts) == 1:
            registry = cls.DEFAULT_REGISTRY
            repository = f"library/{first_part}"
        else:
            registry = cls.DEFAULT_REGISTRY
            repository = reference

        if not tag and not digest:
            tag = cls.DEFAULT_TAG

        return cls(registry=registry, repository=repository, tag=tag, digest=digest)

    @property
    def name(self) -> str:
        """Last path component of the repository, e.g. 'python' for 'devcontainers/python'."""
        return self.repository.rsplit("/", 1)[-1]

    def container_name(self) -> str:
        """
        Derive a container/service name from the repository name.
        Lower-cased; characters outside [a-z0-9_-] collapse to '-'.
        """
        slug = _NAME_UNSAFE.sub("-", self.name.lower()).strip("-_")
        return slug or "app"

    @property
    def full_name(self) -> str:
        """Get full image name with registry."""
        name = f"{self.registry}/{self.repository}"
        if self.digest:
            return f"{name}@{self.digest}"
        if self.tag:
            return f"{name}:{self.tag}"
        return name

    def __str__(self) -> str:
        return self.full_name
