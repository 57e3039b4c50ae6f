"""Response models for admin reporting endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from reporting.application.services import Dashboard
from reporting.domain.value_objects import ProductSummary
from shared_kernel.api_models import APIModel


class MessageStatsResponse(APIModel):
    new: int
    read: int
    replied: int
    total: int


class DashboardStatsResponse(APIModel):
    total_products: int
    active_products: int
    total_categories: int
    total_users: int
    total_sales: str = Field(..., description='Formatted, e.g. "LKR 12,345"')
    total_orders: int
    active_orders: int
    pending_orders: int
    completed_orders: int
    total_coupons: int
    active_coupons: int
    message_stats: MessageStatsResponse


class TopProductResponse(APIModel):
    id: str
    name: str
    price: float
    stock: int
    images: list[dict[str, Any]]

    @classmethod
    def from_summary(cls, product: ProductSummary) -> TopProductResponse:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            images=product.images,
        )


class AnalyticsResponse(APIModel):
    stats: DashboardStatsResponse
    top_products: list[TopProductResponse]

    @classmethod
    def from_dashboard(cls, dashboard: Dashboard) -> AnalyticsResponse:
        counts = dashboard.counts
        return cls(
            stats=DashboardStatsResponse(
                total_products=counts.total_products,
                active_products=counts.active_products,
                total_categories=counts.total_categories,
                total_users=counts.total_customers,
                total_sales=dashboard.total_sales,
                total_orders=counts.total_orders,
                active_orders=counts.active_orders,
                pending_orders=counts.pending_orders,
                completed_orders=counts.completed_orders,
                total_coupons=counts.total_coupons,
                active_coupons=counts.active_coupons,
                message_stats=MessageStatsResponse(
                    new=counts.messages_new,
                    read=counts.messages_read,
                    replied=counts.messages_replied,
                    total=counts.messages_total,
                ),
            ),
            top_products=[
                TopProductResponse.from_summary(p) for p in dashboard.top_products
            ],
        )
