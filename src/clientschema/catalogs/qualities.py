"""Quality ladder catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from clientschema.catalogs.base import RankedCatalog


@dataclass(frozen=True)
class Quality(RankedCatalog):
    """One rung of the release quality ladder."""

    id: int
    name: str

    UNKNOWN: ClassVar[Quality]
    SDTV: ClassVar[Quality]
    DVD: ClassVar[Quality]
    WEBDL_1080P: ClassVar[Quality]
    HDTV_720P: ClassVar[Quality]
    WEBDL_720P: ClassVar[Quality]
    BLURAY_720P: ClassVar[Quality]
    BLURAY_1080P: ClassVar[Quality]
    WEBDL_480P: ClassVar[Quality]
    HDTV_1080P: ClassVar[Quality]
    RAWHD: ClassVar[Quality]
    HDTV_2160P: ClassVar[Quality]
    WEBDL_2160P: ClassVar[Quality]
    BLURAY_2160P: ClassVar[Quality]

    def __str__(self) -> str:
        """Return the display name."""
        return self.name


Quality.UNKNOWN = Quality(0, "Unknown")
Quality.SDTV = Quality(1, "SDTV")
Quality.DVD = Quality(2, "DVD")
Quality.WEBDL_1080P = Quality(3, "WEBDL-1080p")
Quality.HDTV_720P = Quality(4, "HDTV-720p")
Quality.WEBDL_720P = Quality(5, "WEBDL-720p")
Quality.BLURAY_720P = Quality(6, "Bluray-720p")
Quality.BLURAY_1080P = Quality(7, "Bluray-1080p")
Quality.WEBDL_480P = Quality(8, "WEBDL-480p")
Quality.HDTV_1080P = Quality(9, "HDTV-1080p")
Quality.RAWHD = Quality(10, "Raw-HD")
Quality.HDTV_2160P = Quality(16, "HDTV-2160p")
Quality.WEBDL_2160P = Quality(18, "WEBDL-2160p")
Quality.BLURAY_2160P = Quality(19, "Bluray-2160p")
