import logging

import pytest

from acceptlang.acceptparse import accept_language_property

log = logging.getLogger(__name__)


class Request(object):
    """Minimal stand-in for a WSGI request object."""

    accept_language = accept_language_property()

    def __init__(self, environ=None):
        self.environ = {} if environ is None else environ


@pytest.fixture
def make_request():
    def _make_request(header_value=None, **environ):
        if header_value is not None:
            environ['HTTP_ACCEPT_LANGUAGE'] = header_value
        log.debug("request environ %r", environ)
        return Request(environ)

    return _make_request
