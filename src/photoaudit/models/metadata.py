"""Per-file attribute models (filesystem and embedded image properties)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class MetadataKey(str, Enum):
    """Fixed set of attribute keys gathered for every image."""

    NAME = "Name"
    SIZE = "Size"
    DATE_CREATED = "DateCreated"
    DATE_ACCESSED = "DateAccessed"
    DATE_MODIFIED = "DateModified"
    ATTRIBUTES = "Attributes"
    URL = "URL"
    OWNER = "Owner"
    DATE_TAKEN = "DateTaken"
    TAGS = "Tags"
    CAMERA_MODEL = "CameraModel"
    DIMENSIONS = "Dimensions"
    CAMERA_MAKE = "CameraMake"
    LOCATION = "Location"
    SUBJECT = "Subject"
    TITLE = "Title"
    FILE_DESCRIPTION = "FileDescription"
    KEYWORD1 = "Keyword1"
    KEYWORD2 = "Keyword2"
    ORIENTATION = "Orientation"
    FOLDER_PATH = "FolderPath"


# Keys that come from the image itself rather than the filesystem
EMBEDDED_KEYS = (
    MetadataKey.DATE_TAKEN,
    MetadataKey.TAGS,
    MetadataKey.CAMERA_MODEL,
    MetadataKey.DIMENSIONS,
    MetadataKey.CAMERA_MAKE,
    MetadataKey.SUBJECT,
    MetadataKey.TITLE,
    MetadataKey.FILE_DESCRIPTION,
    MetadataKey.KEYWORD1,
    MetadataKey.KEYWORD2,
    MetadataKey.ORIENTATION,
)

_FIELD_NAMES = {
    MetadataKey.NAME: "name",
    MetadataKey.SIZE: "size",
    MetadataKey.DATE_CREATED: "date_created",
    MetadataKey.DATE_ACCESSED: "date_accessed",
    MetadataKey.DATE_MODIFIED: "date_modified",
    MetadataKey.ATTRIBUTES: "attributes",
    MetadataKey.URL: "url",
    MetadataKey.OWNER: "owner",
    MetadataKey.DATE_TAKEN: "date_taken",
    MetadataKey.TAGS: "tags",
    MetadataKey.CAMERA_MODEL: "camera_model",
    MetadataKey.DIMENSIONS: "dimensions",
    MetadataKey.CAMERA_MAKE: "camera_make",
    MetadataKey.LOCATION: "location",
    MetadataKey.SUBJECT: "subject",
    MetadataKey.TITLE: "title",
    MetadataKey.FILE_DESCRIPTION: "file_description",
    MetadataKey.KEYWORD1: "keyword1",
    MetadataKey.KEYWORD2: "keyword2",
    MetadataKey.ORIENTATION: "orientation",
    MetadataKey.FOLDER_PATH: "folder_path",
}


class RawMetadataSet(BaseModel):
    """String values for every MetadataKey; unavailable values are empty."""

    model_config = ConfigDict(frozen=True)

    # Filesystem
    name: str = ""
    size: str = ""
    date_created: str = ""
    date_accessed: str = ""
    date_modified: str = ""
    attributes: str = ""
    url: str = ""
    owner: str = ""
    folder_path: str = ""
    location: str = ""

    # Embedded image properties
    date_taken: str = ""
    tags: str = ""
    camera_model: str = ""
    dimensions: str = ""
    camera_make: str = ""
    subject: str = ""
    title: str = ""
    file_description: str = ""
    keyword1: str = ""
    keyword2: str = ""
    orientation: str = ""

    def get(self, key: MetadataKey) -> str:
        """Look a value up by its MetadataKey."""
        return getattr(self, _FIELD_NAMES[key])

    @classmethod
    def field_for(cls, key: MetadataKey) -> str:
        """Return the model field name backing a MetadataKey."""
        return _FIELD_NAMES[key]

    @property
    def has_embedded(self) -> bool:
        """Check if any embedded image property was found."""
        return any(self.get(key) for key in EMBEDDED_KEYS)
