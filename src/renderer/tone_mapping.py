# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def gamma_tone_mapping_kernel(linear_image, output_image):
    """
    Gamma-2 tone mapping followed by 8-bit quantization.
    NaN and non-positive channels become 0, channels at or above 1 become 255.
    """
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                if value != value or value <= 0.0:
                    output_image[y, x, c] = 0
                elif value >= 1.0:
                    output_image[y, x, c] = 255
                else:
                    output_image[y, x, c] = int(255.99 * math.sqrt(value))

def gamma_tone_mapping(linear_image: np.ndarray) -> np.ndarray:
    """
    Convert an averaged linear radiance image of shape (height, width, 3)
    to a display-referred uint8 image.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    if linear_image.ndim != 3 or linear_image.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) image, got shape {linear_image.shape}")
    output = np.zeros(linear_image.shape, dtype=np.uint8)
    gamma_tone_mapping_kernel(linear_image, output)
    return output
