from models.visibility.visibility_types import EngagementStage, StageGroup


STAGE_GROUP_BY_ENGAGEMENT_STAGE = {
    EngagementStage.GUEST: StageGroup.GUEST,
    EngagementStage.BROWSING: StageGroup.BROWSING,
    EngagementStage.LIKED: StageGroup.LIKED,
    EngagementStage.SHORTLISTED: StageGroup.SHORTLISTED,
    EngagementStage.GETTING_TO_KNOW_YOUR_COACH: StageGroup.DISCOVERY_PROCESS,
    EngagementStage.DISCOVERY_CALL_BOOKED: StageGroup.DISCOVERY_PROCESS,
    EngagementStage.DISCOVERY_IN_PROGRESS: StageGroup.DISCOVERY_PROCESS,
    EngagementStage.MATCHED: StageGroup.DISCOVERY_PROCESS,
    EngagementStage.DISCOVERY_COMPLETED: StageGroup.COMMITTED,
    EngagementStage.AGREED: StageGroup.COMMITTED,
    EngagementStage.PAYMENT_PENDING: StageGroup.COMMITTED,
    EngagementStage.ACTIVE_CLIENT: StageGroup.COMMITTED,
    EngagementStage.UNMATCHED: StageGroup.REJECTED,
    EngagementStage.DECLINED: StageGroup.REJECTED,
    EngagementStage.PREVIOUSLY_DECLINED: StageGroup.REJECTED,
}


def get_stage_group(engagement_stage: EngagementStage) -> StageGroup:
    return STAGE_GROUP_BY_ENGAGEMENT_STAGE[engagement_stage]
