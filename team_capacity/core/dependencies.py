# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dependency wiring — process-wide service instance built from settings.
"""

from team_capacity.core.policy import CapacityPolicy
from team_capacity.services.capacity_service import CapacityService

_capacity_service = CapacityService(policy=CapacityPolicy.from_settings())


def get_capacity_service() -> CapacityService:
    return _capacity_service
