"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    datasets: int
    cached: int
    data_dir: str


class DatasetInfo(BaseModel):
    code: str
    name: str


class DatasetsResponse(BaseModel):
    datasets: list[DatasetInfo]
    count: int


class GroupInfo(BaseModel):
    name: str
    description: str
    datasets: list[DatasetInfo]


class GroupsResponse(BaseModel):
    groups: list[GroupInfo]
    default: Optional[str] = None


class HighestCategory(BaseModel):
    name: str
    total: int
    pct: float


class SummaryResponse(BaseModel):
    group: Optional[str] = None
    description: Optional[str] = None
    dataset: str
    dataset_name: str
    units: list[str]
    total_count: int
    category_count: int
    unit_count: int
    highest_category: HighestCategory
    unit_totals: dict[str, int]
