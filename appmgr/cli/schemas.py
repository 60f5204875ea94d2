"""
Request Schemas.

Pydantic models for the JSON bodies sent to the xApp manager.
Field aliases carry the wire names; fields never set are omitted.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

EventType = Literal["created", "deleted", "all"]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class XappDescriptor(_WireModel):
    """Body of a deploy request."""

    xapp_name: str = Field(alias="xappName", min_length=1, description="xApp to deploy")
    helm_version: str | None = Field(default=None, alias="helmVersion", description="Chart version")
    release_name: str | None = Field(default=None, alias="releaseName")
    namespace: str | None = Field(default=None)
    overrides: dict[str, Any] | None = Field(default=None, description="Values-override content")
    target_host: str | None = Field(default=None, alias="targetHost")


class SubscriptionData(_WireModel):
    """Callback registration for xApp lifecycle events."""

    target_url: str = Field(alias="TargetUrl")
    event_type: EventType = Field(alias="EventType")
    max_retries: int = Field(alias="MaxRetries", ge=0)
    retry_timer: int = Field(alias="RetryTimer", ge=0)


class SubscriptionRequest(_WireModel):
    """Body of a subscription add or modify request."""

    data: SubscriptionData = Field(alias="Data")


class ConfigMetadata(_WireModel):
    """Identifies one xApp configuration object."""

    name: str
    config_name: str = Field(alias="configName")
    namespace: str


class XappConfig(_WireModel):
    """Body of a config add or modify request."""

    metadata: ConfigMetadata
    descriptor: Any = Field(description="Config schema document")
    config: Any = Field(description="Config data document")
