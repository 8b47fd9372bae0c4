"""Helpers for turning returned embeddings into NumPy arrays."""
import base64
from typing import List, Optional, Union

import numpy as np

from .models import OutputDtype

_NUMPY_DTYPES = {
    OutputDtype.FLOAT: np.float32,
    OutputDtype.INT8: np.int8,
    OutputDtype.BINARY: np.int8,
    OutputDtype.UINT8: np.uint8,
    OutputDtype.UBINARY: np.uint8,
}


def numpy_dtype(output_dtype: Optional[Union[OutputDtype, str]] = None) -> type:
    """Return the NumPy scalar type used on the wire for ``output_dtype``."""

    if output_dtype is None:
        return np.float32
    return _NUMPY_DTYPES[OutputDtype(output_dtype)]


def decode_embedding(
    embedding: Union[List[float], str],
    output_dtype: Optional[Union[OutputDtype, str]] = None,
) -> np.ndarray:
    """Convert an embedding from a response into a 1-d array.

    Base64 payloads are raw little-endian buffers; binary/ubinary values are
    bit-packed, so the array is 1/8 of the embedding dimension.
    """
    dtype = np.dtype(numpy_dtype(output_dtype)).newbyteorder("<")
    if isinstance(embedding, str):
        return np.frombuffer(base64.b64decode(embedding), dtype=dtype)
    return np.asarray(embedding, dtype=dtype)
