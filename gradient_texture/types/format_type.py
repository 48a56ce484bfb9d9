from enum import Enum
import numpy as np


class ContainerFormat(str, Enum):
    PNG = "png"
    TGA = "tga"
    EXR = "exr"


class GradientMode(str, Enum):
    BLEND = "blend"
    FIXED = "fixed"


class BufferState(str, Enum):
    ABSENT = "absent"
    STALE = "stale"
    FRESH = "fresh"


# HDR storage is half float, LDR storage is 8 bit per channel
storage_dtypes = {
    True: np.float16,
    False: np.uint8,
}

LDR_MAX = 255
