"""Images held in memory as raw 8-bit pixel bytes."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from .file import File, PathLike

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}
_CHANNELS = {mode: channels for channels, mode in _MODES.items()}


class ImageError(Exception):
    """Raised when an image cannot be loaded or saved."""


@dataclass(frozen=True)
class InMemoryImage:
    """Pixel rows stored top to bottom, channels interleaved, one byte each."""

    width: int
    height: int
    channels: int
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if self.channels not in _MODES:
            raise ValueError("channels must be between 1 and 4")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(f"expected {expected} bytes of pixel data, got {len(self.data)}")

    @classmethod
    def from_file(cls, file: PathLike) -> "InMemoryImage":
        """Load an image; three-channel images gain an opaque alpha channel."""
        path = File(file).path
        try:
            with Image.open(path) as source:
                source.load()
                image = source if source.mode in _CHANNELS else source.convert("RGBA")
                if image.mode == "RGB":
                    image = image.convert("RGBA")
                return cls(image.width, image.height, _CHANNELS[image.mode], image.tobytes())
        except (OSError, UnidentifiedImageError) as error:
            raise ImageError(f"Failed to load image: {path}") from error

    def save(self, filename: PathLike) -> None:
        """Write the image as PNG."""
        if self.width == 0 or self.height == 0:
            raise ImageError("cannot save an empty image")
        image = Image.frombytes(_MODES[self.channels], (self.width, self.height), self.data)
        try:
            image.save(File(filename).path, format="PNG")
        except OSError as error:
            raise ImageError(f"Failed to save image: {filename}") from error