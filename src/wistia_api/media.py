from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from wistia_api.entity import APIEntity, NotPersistedError
from wistia_api.stats import Stats

if TYPE_CHECKING:
    from wistia_api.account import Account

logger = logging.getLogger(__name__)


class MediaType(str, enum.Enum):
    VIDEO = "Video"
    IMAGE = "Image"
    AUDIO = "Audio"
    SWF = "Swf"
    MICROSOFT_OFFICE_DOCUMENT = "MicrosoftOfficeDocument"
    PDF_DOCUMENT = "PdfDocument"
    UNKNOWN = "UnknownType"

    @classmethod
    def parse(cls, value: Any) -> "MediaType":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(eq=False)
class Media(APIEntity):
    """
    A media hosted on Wistia. Medias listed inside a project payload are
    stubs without an embed code; get_embed_code() completes them on demand.
    """

    FIELDS: ClassVar[Dict[str, str]] = {
        "id": "id",
        "hashed_id": "hashed_id",
        "name": "name",
        "description": "description",
        "duration": "duration",
        "embedCode": "embed_code",
        "type": "type",
        "created": "created",
        "updated": "updated",
        "status": "status",
        "progress": "progress",
        "thumbnail": "thumbnail",
        "assets": "assets",
    }

    account: Optional["Account"] = field(default=None, repr=False)
    id: Optional[int] = None
    hashed_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[float] = None  # seconds (pages for documents)
    embed_code: str = field(default="", repr=False)
    type: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    status: Optional[str] = None
    progress: Optional[float] = None
    thumbnail: Optional[Dict[str, Any]] = field(default=None, repr=False)
    assets: Optional[list] = field(default=None, repr=False)
    _complete: bool = field(default=False, init=False, repr=False)

    @property
    def media_type(self) -> MediaType:
        return MediaType.parse(self.type)

    def get_embed_code(self) -> str:
        if self.id and not self.embed_code and not self._complete:
            logger.debug("Completing media %s to read its embed code", self.id)
            self.hydrate(self.account.call(f"medias/{self.id}.json"))
            self._complete = True
        return self.embed_code

    def delete(self) -> Any:
        """Deletes the media from Wistia. Use with caution!"""
        return self.account.call(f"medias/{self._require_hashed_id()}.json", "DELETE")

    def get_stats(self) -> Stats:
        response = self.account.call(f"stats/medias/{self._require_hashed_id()}.json")
        return Stats.from_json(response)

    def _require_hashed_id(self) -> str:
        if not self.hashed_id:
            raise NotPersistedError("Media has no hashed_id")
        return self.hashed_id
