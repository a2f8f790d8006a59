"""
Display names for commonly offered languages.

The parser never uses this table; it exists for building language
selection menus.
"""

COMMON_LANGUAGES = {
    'en': 'English',
    'en-US': 'English (US)',
    'en-GB': 'English (UK)',
    'es': 'Spanish',
    'es-ES': 'Spanish (Spain)',
    'es-MX': 'Spanish (Mexico)',
    'fr': 'French',
    'fr-FR': 'French (France)',
    'fr-CA': 'French (Canada)',
    'de': 'German',
    'de-DE': 'German (Germany)',
    'de-AT': 'German (Austria)',
    'it': 'Italian',
    'pt': 'Portuguese',
    'pt-BR': 'Portuguese (Brazil)',
    'pt-PT': 'Portuguese (Portugal)',
    'nl': 'Dutch',
    'ru': 'Russian',
    'ja': 'Japanese',
    'zh': 'Chinese',
    'zh-CN': 'Chinese (Simplified)',
    'zh-TW': 'Chinese (Traditional)',
    'ko': 'Korean',
    'ar': 'Arabic',
    'hi': 'Hindi',
    'tr': 'Turkish',
    'pl': 'Polish',
    'sv': 'Swedish',
    'da': 'Danish',
    'no': 'Norwegian',
    'fi': 'Finnish',
    'el': 'Greek',
    'he': 'Hebrew',
    'th': 'Thai',
    'vi': 'Vietnamese',
    'id': 'Indonesian',
    'ms': 'Malay',
    'cs': 'Czech',
    'hu': 'Hungarian',
    'ro': 'Romanian',
    'uk': 'Ukrainian',
}


def to_options(items):
    """
    Convert a mapping of value to label into a list of
    ``{'value': ..., 'label': ...}`` dicts, keeping the mapping's order.
    """
    return [
        {'value': value, 'label': label}
        for value, label in items.items()
    ]


def get_common_languages(as_options=False):
    """
    Return the common languages, as a new ``dict`` of tag to display name,
    or, with `as_options`, in the form returned by :func:`to_options`.
    """
    if as_options:
        return to_options(COMMON_LANGUAGES)
    return dict(COMMON_LANGUAGES)
