"""
Shortcuts reading the ``Accept-Language`` header straight from a WSGI
environ.

Each call parses the header found in `environ` again; keep an
:class:`acceptlang.AcceptLanguage` around when several queries are needed
for the same request.
"""

import logging

from acceptlang.acceptparse import create_accept_language_header
from acceptlang.util import ENVIRON_KEY, header_from_environ

log = logging.getLogger(__name__)


def _header(environ):
    header_value = header_from_environ(environ)
    if header_value is None:
        log.debug('no %s in environ', ENVIRON_KEY)
    return create_accept_language_header(header_value)


def get_accept_language(environ):
    """Return the primary language tag of the request (e.g. ``'en-US'``),
    or ``None``."""
    return _header(environ).get_primary()


def get_preferred_language(environ, available, default=None):
    """
    Return the entry of `available` best matching the request, or
    `default`.

    See :meth:`acceptlang.AcceptLanguage.get_best_match`.
    """
    return _header(environ).get_best_match(available, default=default)


def accepts_language(environ, language, exact=False):
    return _header(environ).accepts(language, exact=exact)


def is_rtl_language(environ):
    return _header(environ).is_rtl()
