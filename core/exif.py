"""EXIF removal with orientation correction."""

import logging
import os
from pathlib import Path

from PIL import Image, ImageOps

from .file_manager import FileManager
from .results import OperationReport, OperationResult

logger = logging.getLogger(__name__)


def strip_exif(image_path: str, jpeg_quality: int = 95):
    """
    Auto-orient an image from its EXIF orientation, drop the EXIF block
    and overwrite the file in its original format.

    MPO files are rewritten as plain JPEG.

    Raises:
        OSError: The file cannot be decoded or written.
        ValueError: The image is an animation or multi-page file carrying EXIF,
            or Pillow cannot write its format.
    """
    path = Path(image_path)

    with Image.open(path) as img:
        image_format = img.format
        icc_profile = img.info.get('icc_profile')

        if image_format == 'MPO':
            # Camera JPEGs with embedded previews; keep only the primary image
            image_format = 'JPEG'
        elif getattr(img, 'n_frames', 1) > 1:
            if 'exif' not in img.info:
                return
            raise ValueError(f"Multi-frame {image_format} images are not supported")

        if image_format not in Image.SAVE:
            raise ValueError(f"Writing {image_format} images is not supported")

        img.load()
        # Always a detached copy, so the source handle can close before the overwrite
        oriented = ImageOps.exif_transpose(img)

    oriented.info.pop('exif', None)

    save_kwargs = {}
    if icc_profile:
        save_kwargs['icc_profile'] = icc_profile
    if image_format == 'JPEG':
        save_kwargs['quality'] = jpeg_quality

    # Encode next to the original, then swap, so a failed save leaves it intact
    tmp_path = path.with_name(path.name + '.tmp')
    try:
        oriented.save(tmp_path, format=image_format, **save_kwargs)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class ExifStripper:
    """Strips EXIF from a file, or from every readable image under a directory."""

    action = 'removeexif'

    def __init__(self, jpeg_quality: int = 95):
        self.jpeg_quality = jpeg_quality

    def process(self, path: str) -> OperationReport:
        target = Path(path)
        report = OperationReport(self.action, target)

        if target.is_file():
            report.add(self._strip(target))
        elif target.is_dir():
            images = FileManager.find_images(str(target), recursive=True)
            logger.info(f"Found {len(images)} readable images under {target}")
            for image_path in images:
                report.add(self._strip(image_path))
        else:
            logger.warning(f"Path does not exist: {target}")

        report.message = f"EXIF data removed from {report.processed_count} files."
        return report

    def _strip(self, image_path: Path) -> OperationResult:
        try:
            strip_exif(str(image_path), jpeg_quality=self.jpeg_quality)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.error(f"Failed to remove EXIF from {image_path}: {e}")
            return OperationResult.failure(image_path, e)

        logger.debug(f"Removed EXIF from {image_path}")
        return OperationResult.success(image_path)
