from models.visibility.visibility_types import (
    ALWAYS_VISIBLE_TYPES,
    BLURRABLE_TYPES,
    BROWSING_VISIBLE_TYPES,
    DEFAULT_VISIBLE_TYPES,
    ContentType,
    StageGroup,
    VisibilityState,
)


def get_default_visibility(
    content_type: ContentType,
    stage_group: StageGroup
) -> VisibilityState:
    """
    System default visibility of a piece of profile content at a stage group,
    before any admin override.

    Args:
        content_type: The profile content element
        stage_group: The engagement stage group of the viewing client

    Returns:
        hidden, blurred or visible
    """
    if content_type in ALWAYS_VISIBLE_TYPES:
        return VisibilityState.VISIBLE

    if content_type in DEFAULT_VISIBLE_TYPES:
        return VisibilityState.VISIBLE

    # Admin controllable from here on
    if stage_group in (StageGroup.COMMITTED, StageGroup.DISCOVERY_PROCESS):
        return VisibilityState.VISIBLE

    if content_type in BROWSING_VISIBLE_TYPES:
        return VisibilityState.VISIBLE

    if stage_group in (StageGroup.LIKED, StageGroup.SHORTLISTED):
        if content_type in BLURRABLE_TYPES:
            return VisibilityState.BLURRED

    return VisibilityState.HIDDEN
