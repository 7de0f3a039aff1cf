"""Break URL strings down into their named components."""

import re
from typing import NamedTuple
from typing import Optional
from typing import Tuple
from urllib.parse import urlsplit

from urleq.component import Component
from urleq.exception import DecompositionError
from urleq.utils.sanitize import sanitize

__author__ = "urleq"

# Characters allowed somewhere in a RFC 3986 URI reference, plus valid
# percent-encoded octets.
URI_REFERENCE = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})*")


class DecomposedUrl(NamedTuple):
    scheme: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    query: Optional[str] = None
    fragment: Optional[str] = None

    def get(self, component: Component):
        """Return the value of the field that corresponds to a component."""
        return getattr(self, component.value)


def _split_netloc(netloc: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """
    Split the authority part into user, password and host without altering case.

    :param netloc: The netloc as returned by urlsplit
    :return: A (user, password, host) tuple
    """
    user = password = None
    if "@" in netloc:
        userinfo, _, hostport = netloc.rpartition("@")
        user, has_password, _password = userinfo.partition(":")
        if has_password:
            password = _password
    else:
        hostport = netloc

    if hostport.startswith("["):
        host = hostport[1 : hostport.find("]")]
    else:
        host = hostport.partition(":")[0]

    return user, password, host or None


def decompose(url) -> DecomposedUrl:
    """
    Break a URL string down into a DecomposedUrl.

    Values are kept exactly as they appear in the string. The only
    processing is the conversion of the port to an integer.

    :param url: The URL as a string
    :return: A DecomposedUrl instance
    :raises DecompositionError: If the value is not a URL
    """
    if not isinstance(url, str):
        raise DecompositionError("Not a URL string: %r" % type(url), url)
    if not url:
        raise DecompositionError("Empty URL", url)
    if not URI_REFERENCE.fullmatch(url):
        raise DecompositionError("Illegal characters in URL: %s" % sanitize(url), url)

    try:
        part = urlsplit(url)
        port = part.port
    except ValueError as err:
        raise DecompositionError("%s: %s" % (err, sanitize(url)), url) from err

    # urlsplit lowercases the scheme, the original is a prefix of the string
    scheme = url[: len(part.scheme)] if part.scheme else None
    user, password, host = _split_netloc(part.netloc)

    # Keep an empty query or fragment apart from a missing one
    before_fragment, has_fragment, _ = url.partition("#")
    query = part.query if "?" in before_fragment else None
    fragment = part.fragment if has_fragment else None

    return DecomposedUrl(
        scheme=scheme,
        user=user,
        password=password,
        host=host,
        port=port,
        path=part.path,
        query=query,
        fragment=fragment,
    )
