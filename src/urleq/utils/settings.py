"""
Settings for urleq objects.

The module level :func:`urleq.equality.compare` is never configured, its
ignore set is always passed per call. The settings are used by objects that
are built once and used many times, such as :class:`urleq.matcher.UrlMatcher`.

The settings make use of `pydantic-settings <https://docs.pydantic.dev/usage/settings/>`_ library.
It is possible to instance them directly or use environment values to fill the settings.
Environment variables carry the ``URLEQ_`` prefix, sets are given as JSON lists::

    URLEQ_IGNORE='["query", "fragment"]'
"""

from typing import FrozenSet

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from urleq.component import Component
from urleq.component import ComponentSet


class UrleqSettings(BaseSettings):
    """Main class for all settings."""

    model_config = SettingsConfigDict(env_prefix="urleq_")


class MatcherSettings(UrleqSettings):
    """Settings for matching URLs and requests against recorded ones."""

    ignore: FrozenSet[Component] = frozenset()
    """Components left out of every comparison made by the matcher."""
    match_method: bool = True
    """Whether recorded requests must also have the same HTTP method."""
    log_mismatches: bool = False
    """Log, at INFO level, which components made a candidate fail to match."""

    @field_validator("ignore", mode="before")
    @classmethod
    def _component_names(cls, value):
        if isinstance(value, str):
            value = [v for v in value.split(",") if v.strip()]
        return frozenset(ComponentSet.coerce(value))
