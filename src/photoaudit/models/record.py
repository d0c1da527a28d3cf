"""Per-image record consumed by the report and map writers."""

from pydantic import BaseModel, ConfigDict, Field

from .file import ImageFileRef
from .gps import GeoCoordinate
from .hashes import HashTriple
from .metadata import RawMetadataSet

# Report columns, in output order
REPORT_COLUMNS = (
    "File Name",
    "Extension",
    "Directory",
    "Date Created",
    "Date Accessed",
    "Date Modified",
    "File Size",
    "Attributes",
    "Read Only",
    "MD5 Hash",
    "SHA1 Hash",
    "SHA256 Hash",
    "URL",
    "Owner",
    "Date Taken",
    "Tags",
    "Camera Model",
    "Dimensions",
    "Camera Make",
    "Location",
    "Subject",
    "Title",
    "File Description",
    "Keywords1",
    "Keywords2",
    "Orientation",
    "GPS Data",
    "Latitude",
    "Longitude",
    "Altitude",
    "Sea Level",
)


class RecordStatus(BaseModel):
    """Soft failures met while analyzing one file."""

    model_config = ConfigDict(frozen=True)

    metadata_unavailable: bool = False
    gps_decode_failed: bool = False
    read_failed: bool = False
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not (self.metadata_unavailable or self.gps_decode_failed or self.read_failed)


class ImageRecord(BaseModel):
    """Everything known about one image, plus its rendered report row."""

    model_config = ConfigDict(frozen=True)

    file: ImageFileRef
    metadata: RawMetadataSet = Field(default_factory=RawMetadataSet)
    hashes: HashTriple = Field(default_factory=HashTriple)
    location: GeoCoordinate = Field(default_factory=GeoCoordinate)
    status: RecordStatus = Field(default_factory=RecordStatus)
    row: tuple[str, ...] = ()

    @property
    def path(self) -> str:
        """Return file path."""
        return self.file.path

    @property
    def name(self) -> str:
        """Return file name."""
        return self.file.name

    @property
    def has_gps(self) -> bool:
        return self.location.has_gps
