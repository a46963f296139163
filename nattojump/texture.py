"""Name-indexed texture registry that loads each file once."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

MAX_TEXTURES = 100


class TextureError(Exception):
    """Raised when a texture cannot be loaded or looked up."""


class TextureRegistry:
    """Loads textures through ``loader`` and hands out stable integer indices.

    Loading a name that is already registered returns its existing index.
    Without a loader the name itself is stored as the texture.
    """

    def __init__(
        self,
        loader: Callable[[str], Any] | None = None,
        capacity: int = MAX_TEXTURES,
    ) -> None:
        self._loader = loader
        self.capacity = capacity
        self._indices: dict[str, int] = {}
        self._textures: list[Any] = []

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def load(self, name: str) -> int:
        """Return the index of ``name``, loading it first if it is new."""
        name = str(name)
        if name in self._indices:
            return self._indices[name]
        if len(self._textures) >= self.capacity:
            raise TextureError(f"texture limit of {self.capacity} reached loading {name!r}")
        if self._loader is None:
            texture: Any = name
        else:
            try:
                texture = self._loader(name)
            except Exception as exc:
                raise TextureError(f"cannot load texture {name!r}") from exc
        index = len(self._textures)
        self._textures.append(texture)
        self._indices[name] = index
        return index

    def get(self, index: int) -> Any:
        """Return the texture stored at ``index``."""
        if not 0 <= index < len(self._textures):
            raise TextureError(f"no texture at index {index}")
        return self._textures[index]

    def release(self) -> None:
        """Drop every loaded texture."""
        self._textures.clear()
        self._indices.clear()