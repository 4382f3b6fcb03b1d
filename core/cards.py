"""
core/cards.py
-------------
Typed dashboard card configuration.

Each dashboard widget is described by a `CardConfig` record. Records are
immutable once validated; the merge engine (core.dedupe) only ever builds
new records from them.

Wire format
-----------
Config files and HTTP payloads use camelCase names (`analyticsTags`,
`lastUpdated`, `chartConfigs`, ...). Python code uses snake_case attributes.
Both spellings are accepted on input; `CardConfig.to_wire()` emits camelCase.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


AnalyticsTag = Literal["card_view", "open_click", "secondary_click", "error", "empty_state"]
ANALYTICS_TAGS = get_args(AnalyticsTag)


class CardConfigError(ValueError):
    """Raised when a card authoring source fails validation."""


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CTAConfig(_ConfigModel):
    """A call-to-action button. `href` identifies the CTA when merging."""
    label: str
    href: str
    variant: Optional[Literal["primary", "secondary", "outline", "ghost"]] = None
    size: Optional[Literal["sm", "default", "lg"]] = None
    icon: Optional[str] = None
    analytics: Optional[str] = None


class BadgeConfig(_ConfigModel):
    """A small status/category label. `label` (case-insensitive) identifies it."""
    label: str
    variant: Optional[Literal["default", "secondary", "destructive", "outline"]] = None
    icon: Optional[str] = None
    class_name: Optional[str] = None


class GridSpan(_ConfigModel):
    default: Optional[int] = None
    md: Optional[int] = None
    lg: Optional[int] = None
    xl: Optional[int] = None


class CardConfig(_ConfigModel):
    """Declarative configuration for one dashboard widget."""
    key: str = Field(description="Symbolic identifier (authors may create synonyms)")
    title: str = Field(description="Display name")
    subtitle: Optional[str] = None
    description: Optional[str] = None
    route: Optional[str] = Field(default=None, description="Strongest identity signal")
    position: int = Field(description="Sort weight, lower renders first")
    component: str = Field(description="Renderer name, opaque to the merge engine")
    props: Dict[str, Any] = Field(default_factory=dict)
    ctas: List[CTAConfig] = Field(default_factory=list)
    badges: List[BadgeConfig] = Field(default_factory=list)
    analytics_tags: List[AnalyticsTag] = Field(default_factory=list)
    grid_span: Optional[GridSpan] = None
    last_updated: str = Field(description="ISO-8601 timestamp, used for merge preference")
    aria_label: Optional[str] = None
    chart_configs: Optional[Dict[str, Any]] = None

    def to_wire(self) -> Dict[str, Any]:
        """Return the camelCase dict form, without unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
