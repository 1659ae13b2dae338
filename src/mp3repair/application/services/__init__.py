"""Application services: one facade per command."""

from .library_service import LibraryService
from .list_service import ListService
from .post_repair_service import PostRepairService
from .repair_service import RepairService, RepairServiceRequest
from .scan_service import ScanReport, ScanRequest, ScanService

__all__ = [
    "LibraryService",
    "ListService",
    "PostRepairService",
    "RepairService",
    "RepairServiceRequest",
    "ScanReport",
    "ScanRequest",
    "ScanService",
]
