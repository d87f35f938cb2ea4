from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from src.api.dependencies import get_ops_overview_service
from src.schemas.ops_overview import (
    OpsMetricListFilters,
    OpsOverviewFilters,
    OpsOverviewResponse,
    RevenueMetric,
    UtilizationMetric,
)
from src.services.ops_overview_service import OpsOverviewService
from src.shared.response import ResponseEnvelope, build_meta, paginate_list


router = APIRouter(prefix="/ops-overview", tags=["ops-overview"])


@router.get("")
def ops_overview(
    filters: OpsOverviewFilters = Depends(),
    service: OpsOverviewService = Depends(get_ops_overview_service),
) -> ResponseEnvelope[OpsOverviewResponse]:
    data = service.get_overview(filters.period)
    return ResponseEnvelope(data=data, meta=build_meta(service.source_name, filters.period))


@router.get("/revenue-by-tour")
def revenue_by_tour(
    filters: OpsMetricListFilters = Depends(),
    service: OpsOverviewService = Depends(get_ops_overview_service),
) -> ResponseEnvelope[List[RevenueMetric]]:
    data = service.get_revenue_by_tour(filters.period)
    paged_data, pagination = paginate_list(data, filters.page, filters.page_size)
    return ResponseEnvelope(
        data=paged_data,
        pagination=pagination,
        meta=build_meta(service.source_name, filters.period),
    )


@router.get("/guide-utilization")
def guide_utilization(
    filters: OpsMetricListFilters = Depends(),
    service: OpsOverviewService = Depends(get_ops_overview_service),
) -> ResponseEnvelope[List[UtilizationMetric]]:
    data = service.get_guide_utilization(filters.period)
    paged_data, pagination = paginate_list(data, filters.page, filters.page_size)
    return ResponseEnvelope(
        data=paged_data,
        pagination=pagination,
        meta=build_meta(service.source_name, filters.period),
    )


@router.get("/vehicle-utilization")
def vehicle_utilization(
    filters: OpsMetricListFilters = Depends(),
    service: OpsOverviewService = Depends(get_ops_overview_service),
) -> ResponseEnvelope[List[UtilizationMetric]]:
    data = service.get_vehicle_utilization(filters.period)
    paged_data, pagination = paginate_list(data, filters.page, filters.page_size)
    return ResponseEnvelope(
        data=paged_data,
        pagination=pagination,
        meta=build_meta(service.source_name, filters.period),
    )
