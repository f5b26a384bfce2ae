from enum import Enum


class VisibilityState(str, Enum):
    HIDDEN = "hidden"
    BLURRED = "blurred"
    VISIBLE = "visible"


class ContentType(str, Enum):
    PROFILE_IMAGE = "profile_image"
    BASIC_INFORMATION = "basic_information"
    TESTIMONIAL_IMAGES = "testimonial_images"
    GALLERY_IMAGES = "gallery_images"
    SPECIALIZATIONS = "specializations"
    PRICING_DISCOVERY_CALL = "pricing_discovery_call"
    STATS_RATINGS = "stats_ratings"
    DESCRIPTION_BIO = "description_bio"
    CERTIFICATIONS_QUALIFICATIONS = "certifications_qualifications"
    PROFESSIONAL_JOURNEY = "professional_journey"
    PROFESSIONAL_MILESTONES = "professional_milestones"


class StageGroup(str, Enum):
    GUEST = "guest"
    BROWSING = "browsing"
    LIKED = "liked"
    SHORTLISTED = "shortlisted"
    DISCOVERY_PROCESS = "discovery_process"
    COMMITTED = "committed"
    REJECTED = "rejected"


class EngagementStage(str, Enum):
    GUEST = "guest"
    BROWSING = "browsing"
    LIKED = "liked"
    SHORTLISTED = "shortlisted"
    GETTING_TO_KNOW_YOUR_COACH = "getting_to_know_your_coach"
    DISCOVERY_CALL_BOOKED = "discovery_call_booked"
    DISCOVERY_IN_PROGRESS = "discovery_in_progress"
    MATCHED = "matched"
    DISCOVERY_COMPLETED = "discovery_completed"
    AGREED = "agreed"
    PAYMENT_PENDING = "payment_pending"
    ACTIVE_CLIENT = "active_client"
    UNMATCHED = "unmatched"
    DECLINED = "declined"
    PREVIOUSLY_DECLINED = "previously_declined"


# Admin controllable content types
ADMIN_CONTROLLABLE_TYPES = [
    ContentType.PROFILE_IMAGE,
    ContentType.BASIC_INFORMATION,
    ContentType.TESTIMONIAL_IMAGES,
    ContentType.GALLERY_IMAGES,
    ContentType.PRICING_DISCOVERY_CALL,
]

# Default visible (not editable by admin)
DEFAULT_VISIBLE_TYPES = [
    ContentType.SPECIALIZATIONS,
    ContentType.DESCRIPTION_BIO,
    ContentType.CERTIFICATIONS_QUALIFICATIONS,
    ContentType.PROFESSIONAL_JOURNEY,
    ContentType.PROFESSIONAL_MILESTONES,
]

# Always visible (not amendable)
ALWAYS_VISIBLE_TYPES = [
    ContentType.STATS_RATINGS,
]

# Shown from the first browse onwards
BROWSING_VISIBLE_TYPES = [
    ContentType.PROFILE_IMAGE,
    ContentType.BASIC_INFORMATION,
]

# Shown blurred once a client has shown interest
BLURRABLE_TYPES = [
    ContentType.TESTIMONIAL_IMAGES,
    ContentType.GALLERY_IMAGES,
]
