from acceptlang import acceptparse
from acceptlang.acceptparse import *
from acceptlang.functions import (
    accepts_language,
    get_accept_language,
    get_preferred_language,
    is_rtl_language,
)
from acceptlang.languages import COMMON_LANGUAGES, get_common_languages

__all__ = acceptparse.__all__ + [
    'get_accept_language', 'get_preferred_language', 'accepts_language',
    'is_rtl_language',
    'COMMON_LANGUAGES', 'get_common_languages',
]
