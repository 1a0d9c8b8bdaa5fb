"""Abstract store for uploaded product images."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ImageStore(ABC):

    @abstractmethod
    def save(self, payload: bytes, content_type: str, filename: str) -> str:
        """Store the image and return a stable reference path."""
