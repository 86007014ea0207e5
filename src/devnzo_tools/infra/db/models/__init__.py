from devnzo_tools.infra.db.models.base import Base
from devnzo_tools.infra.db.models.fee_plan import FeePlanRow

__all__ = ["Base", "FeePlanRow"]
