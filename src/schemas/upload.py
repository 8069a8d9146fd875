from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UploadResult:
    """Response envelope for /api/upload: either a public url or an error."""
    url: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.url and self.error:
            raise ValueError("UploadResult carries either url or error, not both")

    def to_dict(self):
        # unset fields are left out of the JSON body
        body = {}
        if self.url:
            body["url"] = self.url
        if self.error:
            body["error"] = self.error
        return body
