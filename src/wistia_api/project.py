from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional

from wistia_api.entity import APIEntity, NotPersistedError
from wistia_api.media import Media
from wistia_api.stats import Stats

if TYPE_CHECKING:
    from wistia_api.account import Account

logger = logging.getLogger(__name__)

UPLOAD_WIDGET_JS = "https://static.wistia.com/javascripts/upload_widget.js"

_UPLOADER_TEMPLATE = """\
<div id="wistia-upload-widget" style="width: 500px; height: 75px;"></div>
<script src="{script}"></script>
<script>
var widget1 = new wistia.UploadWidget({{ divId: 'wistia-upload-widget', publicProjectId: '{public_id}' }});
</script>
"""


@dataclass(eq=False)
class Project(APIEntity):
    """
    A Wistia project, the container every media belongs to.

    Projects returned by Account.get_projects() carry a media_count but no
    medias; get_medias() fetches the full project the first time the two
    disagree.
    """

    FIELDS: ClassVar[Dict[str, str]] = {
        "id": "id",
        "publicId": "public_id",
        "name": "name",
        "description": "description",
        "mediaCount": "media_count",
        "public": "public",
        "anonymousCanUpload": "anonymous_can_upload",
        "anonymousCanDownload": "anonymous_can_download",
        "created": "created",
        "updated": "updated",
    }

    account: Optional["Account"] = field(default=None, repr=False)
    id: Optional[int] = None
    public_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    media_count: int = 0
    public: bool = False
    anonymous_can_upload: bool = False
    anonymous_can_download: bool = False
    created: Optional[str] = None
    updated: Optional[str] = None
    medias: List[Media] = field(default_factory=list, repr=False)
    _complete: bool = field(default=False, init=False, repr=False)

    def _hydrate_field(self, key: str, value: Any) -> None:
        # "medias" is a list of media payloads, each one becomes a Media
        if key == "medias":
            self.medias = [
                Media.from_json(m, account=self.account) for m in (value or [])
            ]
        else:
            super()._hydrate_field(key, value)

    def as_dict(self) -> Dict[str, Any]:
        out = super().as_dict()
        out["medias"] = [m.as_dict() for m in self.medias]
        return out

    def get_medias(self) -> List[Media]:
        if len(self.medias) != (self.media_count or 0) and not self._complete:
            logger.debug(
                "Project %s lists %s medias, holds %s; refetching",
                self.public_id,
                self.media_count,
                len(self.medias),
            )
            self.hydrate(self.account.call(self._path()))
            self._complete = True
        return self.medias

    def save(self) -> Any:
        """
        Saves name and permission flags to Wistia. Only updates existing
        projects; use Account.create_project() to create new ones.
        """
        params = {
            "name": self.name,
            "public": int(bool(self.public)),
            "anonymousCanUpload": int(bool(self.anonymous_can_upload)),
            "anonymousCanDownload": int(bool(self.anonymous_can_download)),
        }
        return self.account.call(self._path(), "PUT", params)

    def delete(self) -> Any:
        """Deletes the project from Wistia. Use with caution!"""
        return self.account.call(self._path(), "DELETE")

    def get_stats(self) -> Stats:
        self._require_public_id()
        response = self.account.call(f"stats/projects/{self.public_id}.json")
        return Stats.from_json(response)

    def get_uploader_code(self) -> str:
        """HTML for an upload button. Requires anonymous_can_upload on Wistia's side."""
        return _UPLOADER_TEMPLATE.format(
            script=UPLOAD_WIDGET_JS, public_id=self.public_id or ""
        )

    def _require_public_id(self) -> str:
        if not self.public_id:
            raise NotPersistedError("Project has no public_id; it was never saved")
        return self.public_id

    def _path(self) -> str:
        return f"projects/{self._require_public_id()}.json"
