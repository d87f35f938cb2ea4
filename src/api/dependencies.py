from __future__ import annotations

from functools import lru_cache

from src.core.config import get_settings
from src.repositories.ops_repository import LocalOpsRepository, OpsRepository
from src.repositories.supabase_ops_repository import SupabaseOpsRepository
from src.services.bookings_service import BookingsService
from src.services.ops_overview_service import OpsOverviewService


@lru_cache
def get_ops_repository() -> OpsRepository:
    settings = get_settings()
    if settings.data_source == "supabase":
        return SupabaseOpsRepository()
    if settings.data_source == "local":
        return LocalOpsRepository(settings.local_data_path)
    raise ValueError(f"Unsupported OPS_DATA_SOURCE: {settings.data_source}")


def get_ops_overview_service() -> OpsOverviewService:
    return OpsOverviewService(repository=get_ops_repository(), settings=get_settings())


def get_bookings_service() -> BookingsService:
    return BookingsService(repository=get_ops_repository())
