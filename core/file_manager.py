"""File discovery for images and hash-named targets."""

from pathlib import Path
from typing import List, Optional, Set

from PIL import Image


class FileManager:
    """Locates files the image library can decode."""

    @staticmethod
    def readable_extensions() -> Set[str]:
        """Lowercase extensions (with dot) of formats Pillow can both open and save."""
        return {
            ext.lower()
            for ext, image_format in Image.registered_extensions().items()
            if image_format in Image.OPEN and image_format in Image.SAVE
        }

    @staticmethod
    def is_readable_image(path: Path, extensions: Optional[Set[str]] = None) -> bool:
        """Check whether Pillow can read the file's format and write it back."""
        if extensions is None:
            extensions = FileManager.readable_extensions()
        return Path(path).suffix.lower() in extensions

    @staticmethod
    def find_images(directory: str, recursive: bool = True) -> List[Path]:
        """
        Find all readable images in directory.

        Args:
            directory: Directory path to search
            recursive: If True, search subdirectories recursively

        Returns:
            Sorted list of image paths
        """
        dir_path = Path(directory)
        if not dir_path.is_dir():
            return []

        extensions = FileManager.readable_extensions()
        glob_pattern = '**/*' if recursive else '*'

        return sorted(
            path for path in dir_path.glob(glob_pattern)
            if path.is_file() and FileManager.is_readable_image(path, extensions)
        )

    @staticmethod
    def get_hashed_path(file_path: Path, digest: str) -> Path:
        """Sibling path named after the digest, keeping the original extension."""
        file_path = Path(file_path)
        return file_path.with_name(f"{digest}{file_path.suffix}")
