"""Upload result schema."""

from pydantic import BaseModel


class StoredUpload(BaseModel):
    """A file written to the upload directory."""

    url: str
    original_name: str
    filename: str
    size_bytes: int
