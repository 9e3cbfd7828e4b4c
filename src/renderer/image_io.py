# renderer/image_io.py
import logging
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

MAX_COLOR_VALUE = 255

def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """
    Writes a (height, width, 3) uint8 image as plain-text PPM (P3), one
    "R G B" line per pixel, top row first.
    """
    height, width, _ = image.shape
    stream.write(f"P3\n{width} {height}\n{MAX_COLOR_VALUE}\n")
    for row in image:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))

def save_image(image: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Saves the image, picking the format from the file suffix: ".ppm" is
    written as plain-text PPM, anything else goes through Pillow.
    OSError from the filesystem is left to the caller.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with path.open("w", encoding="ascii", newline="\n") as f:
            write_ppm(image, f)
    else:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    logger.info("Wrote %dx%d image to %s", image.shape[1], image.shape[0], path)
    return path
