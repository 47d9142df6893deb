from dblang.domain.models import (
    STRING_VALUE_TYPE,
    CachedProperty,
    CultureEntries,
    CultureInfo,
    FormItemEdit,
    MessageEdit,
    MessageResult,
    SurfaceEntry,
)

__all__ = [
    "STRING_VALUE_TYPE",
    "CachedProperty",
    "CultureEntries",
    "CultureInfo",
    "FormItemEdit",
    "MessageEdit",
    "MessageResult",
    "SurfaceEntry",
]
