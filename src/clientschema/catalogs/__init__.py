"""Select option catalogs."""

from clientschema.catalogs.base import RankedCatalog, UserDataCatalog
from clientschema.catalogs.profiles import Profile
from clientschema.catalogs.qualities import Quality

__all__ = ["Profile", "Quality", "RankedCatalog", "UserDataCatalog"]
