from utils.visibility.get_default_visibility import get_default_visibility
from utils.visibility.get_stage_group import get_stage_group

__all__ = [
    "get_default_visibility",
    "get_stage_group",
]
