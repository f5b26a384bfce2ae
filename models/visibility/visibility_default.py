from typing import Literal
from pydantic import BaseModel
from .visibility_types import (
    ContentType,
    EngagementStage,
    StageGroup,
    VisibilityState,
)


class VisibilityDefault(BaseModel):
    content_type: ContentType
    stage_group: StageGroup
    visibility_state: VisibilityState


class VisibilityMatrix(BaseModel):
    defaults: list[VisibilityDefault]


class VisibilitySaveResult(BaseModel):
    result: Literal["saved", "failure"]
    saved: int
    failed: int
    error: str | None = None


class ResolvedVisibility(BaseModel):
    content_type: ContentType
    engagement_stage: EngagementStage
    stage_group: StageGroup
    visibility_state: VisibilityState
