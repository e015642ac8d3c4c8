from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Dict

from wistia_api.http import WistiaError

logger = logging.getLogger(__name__)


class NotPersistedError(WistiaError):
    """The entity has no upstream identifier yet, so the call cannot be made."""


class APIEntity:
    """
    Base for objects populated from API payloads.

    FIELDS is the allow-list mapping JSON keys to attribute names. Keys not in
    it are dropped, and keys missing from a payload leave the attribute as is,
    so new upstream fields never break deserialisation.
    """

    FIELDS: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_json(cls, data: Any, **kwargs: Any):
        obj = cls(**kwargs)
        obj.hydrate(data)
        return obj

    def hydrate(self, data: Any) -> None:
        if data is None:
            return
        if not isinstance(data, Mapping):
            logger.debug(
                "Ignoring non-object payload for %s: %s",
                type(self).__name__,
                type(data).__name__,
            )
            return
        for key, value in data.items():
            self._hydrate_field(key, value)

    def _hydrate_field(self, key: str, value: Any) -> None:
        attr = self.FIELDS.get(key)
        if attr is not None:
            setattr(self, attr, value)

    def as_dict(self) -> Dict[str, Any]:
        return {attr: getattr(self, attr) for attr in self.FIELDS.values()}
