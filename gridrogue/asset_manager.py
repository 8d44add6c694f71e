"""Discovery of asset files under a boot directory and loading of the tileset."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from gridrogue.hashed_string import HashedString
from gridrogue.primitives import Rect
from gridrogue.utilities import is_sub_path

ASSET_EXTENSIONS = frozenset({".json", ".bmp"})
TILESET_INFO = "TilesetInfo.json"


@dataclass
class Tileset:
    """The tileset image and the named source rectangles inside it."""

    surface: pygame.Surface | None = None
    source_rects: dict[HashedString, Rect] = field(default_factory=dict)

    def is_valid(self) -> bool:
        return self.surface is not None


class AssetManager:
    """Indexes asset files by their path relative to the boot directory."""

    def __init__(self, boot_dir: str | os.PathLike[str]) -> None:
        self.boot_dir = Path(boot_dir)
        self._discovered: dict[str, Path] = {}
        self._tileset = Tileset()

    def load(self) -> None:
        """Discover every asset, then load the tileset they describe."""
        self._discover_assets()
        self._load_tileset()

    @property
    def tileset(self) -> Tileset:
        """The loaded tileset; raises RuntimeError before :meth:`load`."""
        if not self._tileset.is_valid():
            raise RuntimeError("the tileset has not been loaded")
        return self._tileset

    def get_path(self, asset_name: str) -> Path | None:
        """Return the full path of ``asset_name``, or None if it was not found."""
        return self._discovered.get(asset_name)

    def get_assets(self, directory: str | os.PathLike[str]) -> list[Path]:
        """Return the full paths of every asset whose name starts with ``directory``."""
        prefix = os.fspath(directory)
        return [path for name, path in self._discovered.items() if is_sub_path(name, prefix)]

    def _discover_assets(self) -> None:
        for path in sorted(self.boot_dir.rglob("*")):
            if not path.is_file() or path.suffix not in ASSET_EXTENSIONS:
                continue
            name = path.relative_to(self.boot_dir).as_posix()
            self._discovered.setdefault(name, path)

    def _load_tileset(self) -> None:
        info_path = self.get_path(TILESET_INFO)
        if info_path is None:
            raise FileNotFoundError(f"{TILESET_INFO} not found under {self.boot_dir}")

        try:
            info = json.loads(info_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"couldn't parse tileset info {info_path}") from exc

        image_path = self.get_path(info["SourceFile"])
        if image_path is None:
            raise FileNotFoundError(f"tileset image {info['SourceFile']!r} not found")

        surface = pygame.image.load(os.fspath(image_path))
        source_rects: dict[HashedString, Rect] = {}
        for tile in info["Tiles"]:
            rect = tile["Rect"]
            source_rects.setdefault(
                HashedString(tile["Name"]),
                Rect(rect["X"], rect["Y"], rect["W"], rect["H"]),
            )
        self._tileset = Tileset(surface, source_rects)