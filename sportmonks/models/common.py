"""
Common models shared by every Sportmonks API response.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

T = TypeVar("T")


class SportmonksResource(BaseModel):
    """Base class for Sportmonks API resources."""

    class Config:
        """Pydantic configuration."""

        extra = "ignore"
        populate_by_name = True


class Pagination(SportmonksResource):
    """Pagination block returned by list endpoints."""

    count: int = Field(0, description="Number of items on this page")
    per_page: int = Field(0, description="Page size")
    current_page: int = Field(0, description="Current page number")
    next_page: Optional[str] = Field(None, description="URL of the next page")
    has_more: bool = Field(False, description="Whether more pages exist")


class RateLimit(SportmonksResource):
    """Rate limit state for the entity that was requested."""

    resets_in_seconds: Optional[int] = Field(
        None, description="Seconds until the quota resets"
    )
    remaining: Optional[int] = Field(None, description="Remaining calls in window")
    requested_entity: Optional[str] = Field(
        None, description="Entity the quota applies to"
    )


class Plan(SportmonksResource):
    """A plan within the caller's subscription."""

    plan: Optional[str] = Field(None, description="Plan name")
    sport: Optional[str] = Field(None, description="Sport covered by the plan")
    category: Optional[str] = Field(None, description="Plan category")


class Subscription(SportmonksResource):
    """Subscription information attached to every response."""

    meta: dict[str, Any] = Field(default_factory=dict)
    plans: list[Plan] = Field(default_factory=list)
    add_ons: list[dict[str, Any]] = Field(default_factory=list)
    widgets: list[dict[str, Any]] = Field(default_factory=list)


class ResponseDetails(SportmonksResource):
    """Metadata returned next to the payload of every endpoint method."""

    pagination: Optional[Pagination] = None
    subscription: list[Subscription] = Field(default_factory=list)
    rate_limit: RateLimit = Field(default_factory=RateLimit)
    timezone: str = ""


class _Envelope(SportmonksResource):
    subscription: list[Subscription] = Field(default_factory=list)
    rate_limit: RateLimit = Field(default_factory=RateLimit)
    timezone: str = ""

    @field_validator("subscription", mode="before")
    @classmethod
    def _null_subscription(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("rate_limit", mode="before")
    @classmethod
    def _null_rate_limit(cls, value: Any) -> Any:
        return RateLimit() if value is None else value

    @field_validator("timezone", mode="before")
    @classmethod
    def _null_timezone(cls, value: Any) -> Any:
        return "" if value is None else value

    def details(self) -> ResponseDetails:
        return ResponseDetails(
            pagination=getattr(self, "pagination", None),
            subscription=self.subscription,
            rate_limit=self.rate_limit,
            timezone=self.timezone,
        )


class ResourceEnvelope(_Envelope, Generic[T]):
    """Envelope around a single resource."""

    data: Optional[T] = None


class CollectionEnvelope(_Envelope, Generic[T]):
    """Envelope around a list of resources."""

    data: list[T] = Field(default_factory=list)
    pagination: Optional[Pagination] = None

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        return [] if value is None else value


class ErrorBody(SportmonksResource):
    """Body of a non-200 response."""

    message: Optional[str] = Field(None, description="Error message")
    code: Optional[int] = Field(None, description="Sportmonks error code")
    link: Optional[str] = Field(None, description="Documentation link")


class RateLimitErrorBody(ErrorBody):
    """Body of a 429 response."""

    rate_limit: Optional[RateLimit] = Field(
        None, description="Quota state, when the API embeds it"
    )
