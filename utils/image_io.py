"""Image file reading."""

from pathlib import Path


def read_image_bytes(path: str) -> bytes:
    """Read an encoded image file as raw bytes."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"No image file at {path}")
    return file_path.read_bytes()
