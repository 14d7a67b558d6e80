from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class DashboardStats(BaseModel):
    """Headline numbers for the dashboard overview, keyed in camelCase on the wire"""
    model_config = ConfigDict(populate_by_name=True)

    total_properties: int = Field(..., alias="totalProperties")
    occupancy_rate: int = Field(..., alias="occupancyRate")
    total_revenue: Union[int, float] = Field(..., alias="totalRevenue")
    open_maintenance: int = Field(..., alias="openMaintenance")
