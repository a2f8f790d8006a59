# CGI name of the header in a WSGI environ (PEP 3333).
ENVIRON_KEY = 'HTTP_ACCEPT_LANGUAGE'


def text_(s, encoding='latin-1', errors='strict'):
    if isinstance(s, bytes):
        return str(s, encoding, errors)

    return s


def header_from_environ(environ):
    """Return the raw ``Accept-Language`` header from `environ`, or
    ``None``."""
    return text_(environ.get(ENVIRON_KEY))
