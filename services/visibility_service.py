import logging
from models.visibility.visibility_default import (
    ResolvedVisibility,
    VisibilityDefault,
    VisibilityMatrix,
    VisibilitySaveResult,
)
from models.visibility.visibility_types import (
    ADMIN_CONTROLLABLE_TYPES,
    ContentType,
    EngagementStage,
    StageGroup,
    VisibilityState,
)
from services.backend_client import BackendClient
from utils.visibility import get_default_visibility, get_stage_group


logger = logging.getLogger(__name__)


class VisibilityService:

    @staticmethod
    def build_matrix(overrides: list[VisibilityDefault]) -> VisibilityMatrix:
        """
        Build the full content type x stage group matrix from the system
        defaults, with admin overrides applied on top. Overrides for content
        types that admins cannot control are ignored.
        """
        states = {
            (content_type, stage_group): get_default_visibility(
                content_type, stage_group)
            for content_type in ContentType
            for stage_group in StageGroup
        }

        for override in overrides:
            if override.content_type not in ADMIN_CONTROLLABLE_TYPES:
                logger.warning(
                    f"Ignoring override for non-controllable content type "
                    f"{override.content_type.value}")
                continue
            states[(override.content_type, override.stage_group)] = \
                override.visibility_state

        return VisibilityMatrix(defaults=[
            VisibilityDefault(
                content_type=content_type,
                stage_group=stage_group,
                visibility_state=visibility_state
            )
            for (content_type, stage_group), visibility_state in states.items()
        ])

    @staticmethod
    def load_defaults(client: BackendClient) -> VisibilityMatrix:
        stored = client.get_system_default_visibility()
        overrides = [VisibilityDefault.model_validate(item) for item in stored]
        return VisibilityService.build_matrix(overrides)

    @staticmethod
    def save_defaults(
        client: BackendClient,
        matrix: VisibilityMatrix
    ) -> VisibilitySaveResult:
        saved = 0
        errors = []

        # Only admin controllable settings are stored
        for item in matrix.defaults:
            if item.content_type not in ADMIN_CONTROLLABLE_TYPES:
                continue
            try:
                client.save_system_default_visibility(
                    item.content_type.value,
                    item.stage_group.value,
                    item.visibility_state.value
                )
                saved += 1
            except Exception as e:
                logger.error(
                    f"Failed to save visibility default "
                    f"{item.content_type.value}/{item.stage_group.value}: {e}")
                errors.append(str(e))

        if errors:
            return VisibilitySaveResult(
                result="failure",
                saved=saved,
                failed=len(errors),
                error=f"Failed to save {len(errors)} settings. Please try again."
            )

        return VisibilitySaveResult(result="saved", saved=saved, failed=0)

    @staticmethod
    def resolve(
        client: BackendClient,
        content_type: ContentType,
        engagement_stage: EngagementStage
    ) -> ResolvedVisibility:
        stage_group = get_stage_group(engagement_stage)
        matrix = VisibilityService.load_defaults(client)

        visibility_state = next(
            (
                item.visibility_state for item in matrix.defaults
                if item.content_type == content_type
                and item.stage_group == stage_group
            ),
            VisibilityState.HIDDEN
        )

        return ResolvedVisibility(
            content_type=content_type,
            engagement_stage=engagement_stage,
            stage_group=stage_group,
            visibility_state=visibility_state
        )
