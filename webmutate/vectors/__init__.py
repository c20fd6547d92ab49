from .base import CanonicalKey, InputVector
from .cookie import CookieVector
from .form import FormVector
from .header import HeaderVector
from .link import LinkVector

__all__ = [
    "CanonicalKey",
    "CookieVector",
    "FormVector",
    "HeaderVector",
    "InputVector",
    "LinkVector",
]
