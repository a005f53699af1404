"""Conversion of image files between the formats Pillow can write."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from cutetools.recent import PathArg


def supported_formats() -> list[str]:
    """Lower-case names of every image format that can be written, sorted."""
    Image.init()
    return sorted(name.lower() for name in Image.SAVE)


def _resolve_format(fmt: str) -> str:
    Image.init()
    name = fmt.strip().lstrip(".")
    if name.upper() in Image.SAVE:
        return name.upper()
    by_extension = Image.registered_extensions().get("." + name.lower())
    if by_extension and by_extension in Image.SAVE:
        return by_extension
    raise ValueError(f"unsupported image format: {fmt!r}")


def convert_image(source: PathArg, target: PathArg, fmt: str) -> str:
    """Load ``source`` and write it to ``target`` in format ``fmt``; return the target."""
    pil_format = _resolve_format(fmt)
    target_path = str(target)
    with Image.open(Path(source)) as image:
        image.load()
        try:
            image.save(target_path, format=pil_format)
        except (OSError, ValueError, KeyError):
            image.convert("RGB").save(target_path, format=pil_format)
    return target_path