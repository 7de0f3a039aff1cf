"""Match URLs and HTTP requests against previously recorded ones."""

import logging
from typing import Iterable
from typing import List
from typing import Optional

import requests

from urleq.component import ComponentSet
from urleq.equality import as_decomposed
from urleq.equality import compare_components
from urleq.equality import differing
from urleq.exception import DecompositionError
from urleq.utils.sanitize import sanitize
from urleq.utils.settings import MatcherSettings

logger = logging.getLogger(__name__)

__author__ = "urleq"


def request_method(request) -> Optional[str]:
    """Return the upper cased HTTP method of a request or a response."""
    if isinstance(request, requests.Response):
        request = request.request
    method = getattr(request, "method", None)
    if method is None:
        return None
    return str(method).upper()


class UrlMatcher:
    """
    Decides whether an URL, or a request, is the same as a recorded one.

    :param ignore: Components left out of the comparisons. Defaults to the
        ignore set of the settings.
    :param settings: MatcherSettings instance
    """

    def __init__(self, ignore=None, settings: Optional[MatcherSettings] = None):
        self.settings = settings or MatcherSettings()
        if ignore is None:
            ignore = self.settings.ignore
        self.ignore = ComponentSet.coerce(ignore)

    def __repr__(self):
        return "%s(ignore=%r)" % (self.__class__.__name__, self.ignore)

    def _decomposed(self, url):
        try:
            return as_decomposed(url)
        except DecompositionError as err:
            logger.debug("Skipping: %s" % sanitize(err))
            return None

    def _match(self, lhs, candidate) -> bool:
        rhs = self._decomposed(candidate)
        if lhs is None or rhs is None:
            return False
        if compare_components(lhs, rhs, self.ignore):
            return True
        if self.settings.log_mismatches:
            logger.info(
                "No match, %s differs: %s"
                % (
                    ", ".join(c.value for c in differing(lhs, rhs, self.ignore)),
                    sanitize(getattr(candidate, "url", candidate)),
                )
            )
        return False

    def matches(self, url_a, url_b) -> bool:
        """Compare two URLs using the ignore set of this matcher."""
        return self._match(self._decomposed(url_a), url_b)

    def find_all(self, url, candidates: Iterable) -> List:
        """
        Return all candidates that match a URL.

        :param url: A URL string, DecomposedUrl or object with an url attribute
        :param candidates: URLs or objects with an url attribute
        :return: List of matching candidates, in the order given
        """
        lhs = self._decomposed(url)
        if lhs is None:
            return []
        return [c for c in candidates if self._match(lhs, c)]

    def find(self, url, candidates: Iterable):
        """
        Return the first candidate that matches a URL.

        :return: A candidate or None if there is none that matches
        """
        lhs = self._decomposed(url)
        if lhs is None:
            return None
        for candidate in candidates:
            if self._match(lhs, candidate):
                return candidate
        return None

    def match_request(self, request, recorded: Iterable):
        """
        Find the recorded request that corresponds to a request.

        The URLs are compared with the ignore set of this matcher. If
        match_method is set the HTTP methods must be the same too.

        :param request: requests.Request, requests.PreparedRequest or
            anything with url and method attributes
        :param recorded: Requests or responses recorded earlier
        :return: The matching recorded item or None
        """
        lhs = self._decomposed(request)
        if lhs is None:
            return None

        method = request_method(request)
        for item in recorded:
            if self.settings.match_method and request_method(item) != method:
                continue
            if self._match(lhs, item):
                logger.debug("Matched %s %s" % (method, sanitize(getattr(item, "url", item))))
                return item
        return None
