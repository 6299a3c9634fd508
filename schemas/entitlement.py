# schemas/entitlement.py
from schemas.common import CamelModel
from services.entitlement_service import Entitlement


class EntitlementResponse(CamelModel):
     """What the caller's current grant allows and how much of it is used."""
     active_plan_id: int
     plan_id: int
     plan_name: str
     building_quota: int
     user_quota: int
     consumed_building_credits: int
     consumed_user_credits: int
     remaining_building_credits: int
     remaining_user_credits: int

     @classmethod
     def from_entitlement(cls, entitlement: Entitlement) -> "EntitlementResponse":
          return cls(
               active_plan_id=entitlement.active_plan.id,
               plan_id=entitlement.plan.id,
               plan_name=entitlement.plan.plan_name,
               building_quota=entitlement.building_quota,
               user_quota=entitlement.user_quota,
               consumed_building_credits=entitlement.consumed_building,
               consumed_user_credits=entitlement.consumed_user,
               remaining_building_credits=entitlement.remaining_building,
               remaining_user_credits=entitlement.remaining_user,
          )
