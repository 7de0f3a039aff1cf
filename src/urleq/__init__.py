"""Structural URL equality with selectively ignored components."""

from urleq.component import Component
from urleq.component import ComponentSet
from urleq.decompose import DecomposedUrl
from urleq.decompose import decompose
from urleq.equality import compare
from urleq.equality import mismatches
from urleq.exception import DecompositionError
from urleq.matcher import UrlMatcher

__author__ = "urleq"
__version__ = "1.0.0"

__all__ = [
    "Component",
    "ComponentSet",
    "DecomposedUrl",
    "DecompositionError",
    "UrlMatcher",
    "compare",
    "decompose",
    "mismatches",
]
