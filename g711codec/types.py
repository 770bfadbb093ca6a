"""Type aliases for the G.711 codec."""
from collections.abc import Buffer
from typing import TypeAlias

import numpy as np

BufferLike: TypeAlias = Buffer | np.ndarray
