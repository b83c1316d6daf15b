"""Asset handling for natsize builds."""

import shutil
import time
from pathlib import Path

# Image files copied next to the rendered pages
IMAGE_EXTENSIONS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".webp",
    ".bmp",
    ".ico",
}


def robust_rmtree(path: Path, retries: int = 3, delay: float = 0.1) -> None:
    """Remove a directory tree with retry logic for macOS file descriptor races."""
    for attempt in range(retries):
        try:
            shutil.rmtree(path)
            return
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay * (attempt + 1))
            else:
                raise


def is_path_ignored(file_path: Path, base_dir: Path, ignored_folders: list[str]) -> bool:
    """Check if file is in an ignored folder (or in a dot-directory).

    Args:
        file_path: Path to the file to check
        base_dir: Base directory for computing relative path
        ignored_folders: List of folder names to ignore

    Returns:
        True if the file is in an ignored folder
    """
    try:
        rel_path = file_path.relative_to(base_dir)
    except ValueError:
        return False
    # Check directories only (not the filename)
    for part in rel_path.parts[:-1]:
        if part in ignored_folders or part.startswith("."):
            return True
    return False


def copy_image_assets(
    project_path: Path, build_dir: Path, ignored_folders: list[str]
) -> int:
    """Copy images from the project into the build directory.

    Relative layout is kept so ``src`` values in rendered pages stay valid.
    Files whose copy is already up to date are skipped.

    Returns:
        Number of files copied
    """
    copied = 0
    for src_file in project_path.glob("**/*"):
        if not src_file.is_file() or src_file.suffix.lower() not in IMAGE_EXTENSIONS:
            continue
        if is_path_ignored(src_file, project_path, ignored_folders):
            continue

        target_file = build_dir / src_file.relative_to(project_path)
        if (
            target_file.exists()
            and src_file.stat().st_mtime <= target_file.stat().st_mtime
        ):
            continue

        target_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_file, target_file)
        copied += 1
    return copied
