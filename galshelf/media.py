import io
from pathlib import Path
from typing import Tuple

import requests
from loguru import logger
from PIL import Image, UnidentifiedImageError

USER_AGENT = "galshelf/0.1"

def _fetch_image(url: str, timeout: float) -> bytes:
    resp = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    resp.raise_for_status()
    data = resp.content
    with Image.open(io.BytesIO(data)) as im:
        im.verify()
    return data

def download_image(url: str, dest_dir: Path, filename: str, *,
                   timeout: float = 30, overwrite: bool = True) -> Tuple[bool, str]:
    """Fetch url into dest_dir/<basename of filename>. Returns (ok, path_or_error)."""
    name = Path(filename or "").name
    if not url or not name:
        return False, "url and filename are required."
    dest_dir = Path(dest_dir)
    dest = dest_dir / name

    if dest.exists() and not overwrite:
        return True, str(dest)

    try:
        data = _fetch_image(url, timeout)
    except requests.HTTPError as e:
        logger.warning("Image download failed for {}: {}", url, e)
        return False, f"HTTP error: {e.response.status_code if e.response is not None else e}"
    except requests.RequestException as e:
        logger.warning("Image download failed for {}: {}", url, e)
        return False, f"Failed to download image: {e}"
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning("Not an image at {}: {}", url, e)
        return False, "Downloaded file is not a valid image."

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(data)
    except OSError as e:
        return False, f"Failed to save image: {e}"
    return True, str(dest)

def download_cover(url: str, covers_dir: Path, filename: str, timeout: float = 30) -> Tuple[bool, str]:
    return download_image(url, covers_dir, filename, timeout=timeout, overwrite=True)

def download_screenshot(url: str, screenshots_dir: Path, filename: str, timeout: float = 30) -> Tuple[bool, str]:
    # existing screenshots are kept
    return download_image(url, screenshots_dir, filename, timeout=timeout, overwrite=False)
