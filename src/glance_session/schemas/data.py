"""Session state schemas: routes, history entries, panels and load requests."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Route(str, Enum):
    """Top-level UI mode."""

    LANDING = "landing"
    APP = "app"


class HistoryEntry(BaseModel):
    """Payload attached to a browser history stack entry."""

    app: bool = Field(False, description="True for the app view, False for landing")

    model_config = ConfigDict(frozen=True)


class RouteChange(BaseModel):
    """Event emitted by the store whenever the committed route changes."""

    previous: Route
    current: Route

    model_config = ConfigDict(frozen=True)


class PanelDescriptor(BaseModel):
    """A UI panel registered into the dataset panel area.

    `component` must be unique across all registered panels.
    """

    component: str = Field(..., min_length=1, description="Unique component id")
    title: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class LoadRequest(BaseModel):
    """A single remote dataset to load."""

    name: str
    url: str

    model_config = ConfigDict(frozen=True)


class LoadBatch(BaseModel):
    """An ordered group of remote loads dispatched together."""

    group: str
    requests: list[LoadRequest] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DatasetRecord(BaseModel):
    """Outcome of one remote load as seen by the store."""

    name: str
    url: str
    group: str
    status: str = Field("loaded", description="'loaded' or 'failed'")
    error: str | None = None
    source_id: int | None = Field(None, description="Proxy manager source id")

    model_config = ConfigDict(frozen=True)


class AppState(BaseModel):
    """Application view-state held by the store.

    Frozen: every commit produces a new instance via `model_copy`.
    """

    route: Route = Route.LANDING
    panels: list[PanelDescriptor] = Field(default_factory=list)
    collapse_dataset_panels: bool = False
    suppress_browser_warning: bool = False
    datasets: list[DatasetRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
