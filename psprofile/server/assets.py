"""
Static asset providers for the chart page.

The HTTP layer only needs "give me the bytes for this path"; where the bytes
come from is up to the provider handed to `create_app`.
"""
import mimetypes
from abc import ABC, abstractmethod
from importlib import resources
from typing import Dict, Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class AssetProvider(ABC):
    """Read-only source of named byte blobs"""

    @abstractmethod
    def get(self, name: str) -> Optional[bytes]:
        """Return the asset content, or None if there is no such asset."""

    def content_type(self, name: str) -> str:
        guessed, _ = mimetypes.guess_type(name)
        return guessed or DEFAULT_CONTENT_TYPE


class PackageAssetProvider(AssetProvider):
    """Serves files bundled as package data (psprofile/static by default)"""

    def __init__(self, package: str = "psprofile", directory: str = "static"):
        self.root = resources.files(package).joinpath(directory)

    def get(self, name: str) -> Optional[bytes]:
        parts = [p for p in name.split("/") if p]
        if not parts or any(p in (".", "..") for p in parts):
            return None
        asset = self.root.joinpath(*parts)
        if not asset.is_file():
            return None
        return asset.read_bytes()


class MemoryAssetProvider(AssetProvider):
    """Serves assets from an in-memory mapping of path to bytes"""

    def __init__(self, assets: Dict[str, bytes]):
        self.assets = dict(assets)

    def get(self, name: str) -> Optional[bytes]:
        return self.assets.get(name.lstrip("/"))
