"""Content hashing and hash-based renaming."""

import errno
import hashlib
import logging
from pathlib import Path

from .file_manager import FileManager
from .results import OperationReport, OperationResult

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def hash_file_content(file_path: str) -> str:
    """Generate SHA256 hash of file content."""
    sha256_hash = hashlib.sha256()

    with open(file_path, "rb") as f:
        for byte_block in iter(lambda: f.read(CHUNK_SIZE), b""):
            sha256_hash.update(byte_block)

    return sha256_hash.hexdigest()


def rename_to_hash(file_path: str) -> Path:
    """
    Rename a file to its SHA256 digest, keeping the extension.

    Raises:
        FileExistsError: A file with the target name already exists,
            including when the file is already named after its hash.
    """
    path = Path(file_path)
    target = FileManager.get_hashed_path(path, hash_file_content(str(path)))

    if target.exists():
        raise FileExistsError(errno.EEXIST, "Target file already exists", str(target))

    path.rename(target)
    return target


class HashRenamer:
    """Renames single files to their content hash. Directories are ignored."""

    action = 'renametohash'

    def process(self, path: str) -> OperationReport:
        target = Path(path)
        report = OperationReport(self.action, target)

        if not target.is_file():
            logger.debug(f"Skipping {target}: not a file")
            return report

        try:
            new_path = rename_to_hash(str(target))
        except OSError as e:
            logger.error(f"Failed to rename {target}: {e}")
            report.add(OperationResult.failure(target, e))
            return report

        logger.info(f"Renamed {target} -> {new_path}")
        report.add(OperationResult.success(target, str(new_path)))
        report.message = f"File renamed to {new_path}."
        return report
