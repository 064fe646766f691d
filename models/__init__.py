from .base import BaseGolfModel
from .hole_stats import HoleStats, normalize_round_id
from .hole_update import HoleForm, PartialHoleUpdate
from .round import DEFAULT_PARS, TEE_BOXES, Round

__all__ = [
    "BaseGolfModel",
    "DEFAULT_PARS",
    "HoleForm",
    "HoleStats",
    "PartialHoleUpdate",
    "Round",
    "TEE_BOXES",
    "normalize_round_id",
]
