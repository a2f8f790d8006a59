"""
Parses the ``Accept-Language`` header and matches it against offered
languages.

The header generally takes the form of::

    en-US, en;q=0.9, de;q=0.8

Where the ``q`` parameter is optional.  Only the common two-part
``language-region`` shape is understood; other parameters are ignored.
"""

import re
import textwrap

from acceptlang.util import ENVIRON_KEY, header_from_environ

__all__ = [
    'AcceptLanguage', 'RTL_LANGUAGES', 'DEFAULT_QUALITY',
    'accept_language_property', 'create_accept_language_header',
    'parse', 'normalize', 'extract_language', 'extract_region',
    'get_primary', 'get_primary_language', 'get_primary_region',
    'get_all', 'get_languages', 'accepts', 'get_quality',
    'get_best_match', 'is_rtl',
]

DEFAULT_QUALITY = 1.0

# Scripts written right-to-left, keyed by base language subtag.
RTL_LANGUAGES = frozenset([
    'ar',  # Arabic
    'he',  # Hebrew
    'fa',  # Persian
    'ur',  # Urdu
    'yi',  # Yiddish
    'ps',  # Pashto
    'sd',  # Sindhi
    'ug',  # Uyghur
    'ku',  # Kurdish (Sorani)
    'dv',  # Divehi
])

# RFC 7231 Section 5.3.1 "Quality Values", loosened: any digits with at most
# one decimal point.  Out-of-range values are clamped after conversion.  The
# ``q`` name is case-insensitive, like all parameter names (RFC 7231 Section
# 3.1.1.1).
qvalue_compiled_re = re.compile(r'[qQ]=([0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def _clamp_quality(qvalue):
    return min(max(qvalue, 0.0), 1.0)


def _parse_quality(params):
    match = qvalue_compiled_re.search(params)
    if match is None:
        return DEFAULT_QUALITY
    return _clamp_quality(float(match.group(1)))


def _item_qvalue_pair_to_header_element(pair):
    item, qvalue = pair
    # Fixed point, at most three decimals (RFC 7231 Section 5.3.1).
    qvalue = '{:.3f}'.format(qvalue).rstrip('0').rstrip('.')
    if qvalue == '1':
        element = item
    else:
        element = '{};q={}'.format(item, qvalue)
    return element


def normalize(code):
    """
    Normalize a language code.

    Lowercases the language subtag and uppercases the region, converting
    ``_`` separators to ``-``::

        >>> normalize('EN-us')
        'en-US'
        >>> normalize('DE_at')
        'de-AT'

    Only the first hyphen separates language from region; the rest of the
    code is uppercased as one piece.

    :param code: (``str`` or ``None``) language code
    :return: (``str``) the normalized code, or ``''`` for an empty code
    """
    code = (code or '').strip()
    if not code:
        return ''
    code = code.replace('_', '-')
    if '-' in code:
        language, region = code.split('-', 1)
        return language.lower() + '-' + region.upper()
    return code.lower()


def extract_language(locale):
    """Return the lowercased language subtag of `locale` (``'en-US'`` ->
    ``'en'``)."""
    locale = locale.replace('_', '-')
    return locale.split('-')[0].lower()


def extract_region(locale):
    """
    Return the uppercased region subtag of `locale`, or ``None``.

    The region is always the second hyphen-separated segment, so
    ``'zh-Hans-CN'`` yields ``'HANS'``.
    """
    locale = locale.replace('_', '-')
    if '-' not in locale:
        return None
    return locale.split('-')[1].upper()


def parse(header):
    """
    Parse an ``Accept-Language`` header.

    :param header: (``str`` or ``None``) header value
    :return: ``tuple`` of (language tag, quality value) pairs, tags
             normalized and unique, in descending order of quality value.
             Tags with the same quality value keep the order in which they
             first appear in the header.

    Malformed input never raises: entries without a tag are skipped, a
    missing or unreadable ``q`` parameter counts as ``1.0``, and a tag
    listed twice keeps the quality value of its last occurrence.
    """
    if not header:
        return ()
    languages = {}
    for part in header.split(','):
        part = part.strip()
        if not part:
            continue
        if ';' in part:
            lang, params = part.split(';', 1)
            qvalue = _parse_quality(params)
        else:
            lang, qvalue = part, DEFAULT_QUALITY
        lang = normalize(lang)
        if lang:
            languages[lang] = qvalue
    return tuple(
        sorted(languages.items(), key=lambda item: item[1], reverse=True)
    )


class AcceptLanguage(object):
    """
    Represent an ``Accept-Language`` header.

    The header is parsed once, when the object is created, and every query
    works on that parsed form.  This object should not be modified; create
    a new one for a new header value.
    """

    __slots__ = ('_header_value', '_parsed')

    def __init__(self, header_value=None):
        """
        Create an :class:`AcceptLanguage` instance.

        :param header_value: (``str`` or ``None``) header value. ``None``
                             means the header was not in the request.
        """
        self._header_value = header_value
        self._parsed = parse(header_value)

    @property
    def header_value(self):
        """(``str`` or ``None``) The header value."""
        return self._header_value

    @property
    def parsed(self):
        """
        (``tuple``) Parsed form of the header.

        A tuple of (language tag, quality value) pairs, most preferred
        first.
        """
        return self._parsed

    def __bool__(self):
        """
        Return whether the header lists at least one language.

        An empty, malformed or missing header gives ``False``.
        """
        return bool(self._parsed)

    def __contains__(self, language):
        """Same as ``self.accepts(language)``."""
        return self.accepts(language)

    def __iter__(self):
        """Return the language tags, most preferred first."""
        for lang, qvalue in self._parsed:
            yield lang

    def __repr__(self):
        return '<{} ({!r})>'.format(self.__class__.__name__, str(self))

    def __str__(self):
        """
        Return a tidied up version of the header value.

        e.g. If the ``header_value`` is ``'en_us, de;q=0.500, fr;q=0'``,
        ``str(instance)`` returns ``'en-US, de;q=0.5, fr;q=0'``.
        """
        return ', '.join(
            _item_qvalue_pair_to_header_element(pair=pair)
            for pair in self._parsed
        )

    def get_primary(self):
        """Return the most preferred language tag, or ``None``."""
        if not self._parsed:
            return None
        return self._parsed[0][0]

    def get_primary_language(self):
        primary = self.get_primary()
        if primary is None:
            return None
        return extract_language(primary)

    def get_primary_region(self):
        primary = self.get_primary()
        if primary is None:
            return None
        return extract_region(primary)

    def get_all(self):
        """Return the language tags in order of preference."""
        return list(self)

    def get_languages(self):
        """
        Return the unique base languages in order of preference.

        ``'en-US, en;q=0.9, de;q=0.8'`` gives ``['en', 'de']``.
        """
        languages = []
        for locale in self:
            lang = extract_language(locale)
            if lang and lang not in languages:
                languages.append(lang)
        return languages

    def accepts(self, language, exact=False):
        """
        Return whether `language` is accepted by the header.

        :param language: (``str``) language tag, e.g. ``'en'`` or ``'en-US'``
        :param exact: (``bool``) when false, a tag in the header sharing the
                      base language of `language` is also a match
        :return: (``bool``)
        """
        language = normalize(language)
        if not language:
            return False
        accepted = self.get_all()
        if language in accepted:
            return True
        if exact:
            return False
        base_language = extract_language(language)
        return any(
            extract_language(lang) == base_language for lang in accepted
        )

    def get_quality(self, language):
        """
        Return the quality value of `language` in the header, or ``None``.

        Only an exact tag match counts; ``'en'`` is not found in
        ``'en-US'``.
        """
        return dict(self._parsed).get(normalize(language))

    def get_best_match(self, available, default=None):
        """
        Return the best match from the sequence of language tags `available`.

        The preferences in the header are considered by descending quality
        value, first looking for an offer equal to the preference (after
        normalization), then, if none matched, for an offer sharing the
        preference's base language.  In that second pass offers are tried
        in the order given.

        :param available: (iterable of ``str``) language tags the
                          application can serve. Empty tags are ignored.
        :param default: value returned when nothing matches
        :return: the offer exactly as it was passed in, or `default`
        """
        if not self._parsed or not available:
            return default

        offers = {}
        for offer in available:
            normalized = normalize(offer)
            if normalized:
                offers[normalized] = offer

        # An exact match always wins over a base language match, whatever
        # the quality values of the two.
        for lang in self:
            if lang in offers:
                return offers[lang]

        for lang in self:
            base_language = extract_language(lang)
            for normalized, offer in offers.items():
                if extract_language(normalized) == base_language:
                    return offer

        return default

    def is_rtl(self, rtl_languages=RTL_LANGUAGES):
        """Return whether the primary language is written right-to-left."""
        primary = self.get_primary_language()
        if not primary:
            return False
        return primary in rtl_languages

    @classmethod
    def _python_value_to_header_str(cls, value):
        if isinstance(value, str):
            header_str = value
        else:
            if hasattr(value, 'items'):
                value = sorted(
                    value.items(),
                    key=lambda item: item[1],
                    reverse=True,
                )
            if isinstance(value, (tuple, list)):
                result = []
                for item in value:
                    if isinstance(item, (tuple, list)):
                        item = _item_qvalue_pair_to_header_element(pair=item)
                    result.append(item)
                header_str = ', '.join(result)
            else:
                header_str = str(value)
        return header_str


# Shortcuts for callers holding a bare header value.  Each call parses the
# header again.


def get_primary(header):
    return AcceptLanguage(header).get_primary()


def get_primary_language(header):
    return AcceptLanguage(header).get_primary_language()


def get_primary_region(header):
    return AcceptLanguage(header).get_primary_region()


def get_all(header):
    return AcceptLanguage(header).get_all()


def get_languages(header):
    return AcceptLanguage(header).get_languages()


def accepts(header, language, exact=False):
    return AcceptLanguage(header).accepts(language, exact=exact)


def get_quality(header, language):
    return AcceptLanguage(header).get_quality(language)


def get_best_match(header, available, default=None):
    return AcceptLanguage(header).get_best_match(available, default=default)


def is_rtl(header, rtl_languages=RTL_LANGUAGES):
    return AcceptLanguage(header).is_rtl(rtl_languages=rtl_languages)


def create_accept_language_header(header_value):
    """
    Create an object representing the ``Accept-Language`` header in a request.

    :param header_value: (``str``, ``None`` or :class:`AcceptLanguage`)
                         header value
    :return: a new :class:`AcceptLanguage` instance
    """
    if isinstance(header_value, AcceptLanguage):
        header_value = header_value.header_value
    return AcceptLanguage(header_value=header_value)


def accept_language_property():
    doc = """
        The request's ``Accept-Language`` header as an :class:`AcceptLanguage`.

        Reading it builds a new :class:`AcceptLanguage` from
        ``environ['HTTP_ACCEPT_LANGUAGE']`` each time, so later changes to
        the environ are always seen.  Assigning stores a header string,
        rendering a ``dict`` of tag to quality or a list of tags and
        (tag, quality) pairs first; assigning ``None`` or deleting removes
        the key.
    """

    def fget(request):
        """Get an object representing the header in the request."""
        return create_accept_language_header(
            header_value=header_from_environ(request.environ)
        )

    def fset(request, value):
        """
        Set the corresponding key in the request environ.

        `value` can be:

        * ``None``
        * a ``str``
        * a ``dict``, with language tags as keys and qvalues as values
        * a ``tuple`` or ``list``, of language tag ``str``\\ s or of ``tuple``
          or ``list`` (language tag, qvalue) pairs (``str``\\ s and pairs can
          be mixed within the ``tuple`` or ``list``)
        * an :class:`AcceptLanguage` instance
        * object of any other type that returns a value for ``__str__``
        """
        if isinstance(value, AcceptLanguage):
            value = value.header_value
        if value is None:
            fdel(request=request)
        else:
            request.environ[ENVIRON_KEY] = \
                AcceptLanguage._python_value_to_header_str(value=value)

    def fdel(request):
        """Delete the corresponding key from the request environ."""
        try:
            del request.environ[ENVIRON_KEY]
        except KeyError:
            pass

    return property(fget, fset, fdel, textwrap.dedent(doc))
