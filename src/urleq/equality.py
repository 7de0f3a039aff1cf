"""
Structural equality of URLs.

Two URLs are equal when all their components are equal, except for the
components the caller asked to ignore. No normalization is done, ``HTTP``
and ``http`` are different schemes and ``:80`` is different from no port.
A value that can not be decomposed is never equal to anything, not even to
itself.
"""

import logging

from urleq.component import Component
from urleq.component import ComponentSet
from urleq.decompose import DecomposedUrl
from urleq.decompose import decompose
from urleq.exception import DecompositionError
from urleq.utils.sanitize import sanitize

logger = logging.getLogger(__name__)

__author__ = "urleq"


def as_decomposed(url) -> DecomposedUrl:
    """
    Get a DecomposedUrl from whatever represents the URL.

    :param url: A URL string, a DecomposedUrl or an object with an url
        attribute, like requests.Request, requests.PreparedRequest or
        requests.Response
    :return: DecomposedUrl instance
    :raises DecompositionError: If no URL could be found or decomposed
    """
    if isinstance(url, DecomposedUrl):
        return url
    if not isinstance(url, str) and hasattr(url, "url"):
        url = url.url
    return decompose(url)


def differing(lhs: DecomposedUrl, rhs: DecomposedUrl, ignore=None) -> ComponentSet:
    """Return the components, not ignored, whose values differ."""
    _ignore = ComponentSet.coerce(ignore)
    return ComponentSet(
        c for c in Component if not _ignore.contains(c) and lhs.get(c) != rhs.get(c)
    )


def compare_components(lhs: DecomposedUrl, rhs: DecomposedUrl, ignore=None) -> bool:
    """
    Compare two decomposed URLs field by field.

    :param lhs: DecomposedUrl instance
    :param rhs: DecomposedUrl instance
    :param ignore: The components to skip
    :return: True if all compared fields are equal
    """
    _ignore = ComponentSet.coerce(ignore)
    for component in Component:
        if _ignore.contains(component):
            continue
        if lhs.get(component) != rhs.get(component):
            return False
    return True


def compare(url_a, url_b, ignore=None) -> bool:
    """
    Check if two URLs are equal.

    If you need to check that two URLs are equal except for the host, just
    add Component.HOST to the ignored components.

    :param url_a: The URL to check
    :param url_b: The URL to check against
    :param ignore: Components that should be ignored in the equality check.
        A Component, a ComponentSet, or an iterable of components or names.
    :return: True if equal, otherwise False
    """
    _ignore = ComponentSet.coerce(ignore)
    try:
        lhs = as_decomposed(url_a)
        rhs = as_decomposed(url_b)
    except DecompositionError as err:
        logger.debug("Not comparable: %s" % sanitize(err))
        return False

    return compare_components(lhs, rhs, _ignore)


def mismatches(url_a, url_b, ignore=None) -> ComponentSet:
    """
    Find out why two URLs are not equal.

    :param url_a: The URL to check
    :param url_b: The URL to check against
    :param ignore: Components that should be ignored
    :return: The components that differ, empty if the URLs are equal
    :raises DecompositionError: If one of the URLs can not be decomposed
    """
    return differing(as_decomposed(url_a), as_decomposed(url_b), ignore)
