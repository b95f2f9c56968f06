import logging
import os
import cv2
import numpy as np

logger = logging.getLogger(__name__)


def save_image(buffer: np.ndarray, filepath: str, scale: int = 1) -> str:
    """
    Writes a bitmap from viz.bitmap.render to disk.
    The format follows the file extension (.png, .bmp, ...).
    Each pixel becomes a scale x scale block.
    """
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
        raise ValueError(f"scale must be a positive integer, got {scale!r}")

    if scale > 1:
        h, w = buffer.shape[:2]
        buffer = cv2.resize(buffer, (w * scale, h * scale), interpolation=cv2.INTER_NEAREST)

    folder = os.path.dirname(filepath)
    if folder:
        os.makedirs(folder, exist_ok=True)

    try:
        ok = cv2.imwrite(filepath, buffer)
    except cv2.error as exc:
        raise ValueError(f"Cannot encode image to {filepath}: {exc}") from exc

    if not ok:
        raise OSError(f"Failed to write image {filepath}")

    logger.debug("Wrote %dx%d image to %s", buffer.shape[1], buffer.shape[0], filepath)
    return filepath
