from .JsonMaskPy import (
    TARGET_SUFFIX,
    REPLACE_CHAR,
    UNSUPPORTED_VALUE_MESSAGE,
    JsonMaskErrorKind,
    JsonMaskError,
    JsonMaskResult,
    JsonMaskReader,
    mask_target_values,
    mask_target_values_from_bytes,
)

__all__ = [
    "TARGET_SUFFIX",
    "REPLACE_CHAR",
    "UNSUPPORTED_VALUE_MESSAGE",
    "JsonMaskErrorKind",
    "JsonMaskError",
    "JsonMaskResult",
    "JsonMaskReader",
    "mask_target_values",
    "mask_target_values_from_bytes",
]
