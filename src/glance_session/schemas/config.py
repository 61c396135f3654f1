"""Configuration schemas for the viewer session."""

from pydantic import BaseModel, ConfigDict, Field

from glance_session.schemas.defaults import (
    BUILTIN_PROXY_DEFINITIONS,
    BUILTIN_PROXY_REPRESENTATIONS,
)


class ProxyConfiguration(BaseModel):
    """Descriptor of the proxies/filters available to the rendering subsystem.

    Handed to the proxy manager once at session start and never mutated
    afterwards (the model is frozen).
    """

    name: str = Field("Generic", description="Human readable configuration name")
    definitions: dict = Field(
        default_factory=dict,
        description="Proxy definitions grouped by kind (Sources, Views, ...)",
    )
    representations: dict = Field(
        default_factory=dict,
        description="View type -> dataset type -> representation name",
    )
    views: list[str] = Field(
        default_factory=list, description="Views created when the app is shown"
    )

    model_config = ConfigDict(frozen=True)


BUILTIN_PROXY_CONFIGURATION = ProxyConfiguration(
    name="Generic",
    definitions=BUILTIN_PROXY_DEFINITIONS,
    representations=BUILTIN_PROXY_REPRESENTATIONS,
    views=["View3D"],
)
