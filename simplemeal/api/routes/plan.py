import logging

from fastapi import APIRouter, Depends, HTTPException

from simplemeal.api.dependencies import (
    get_event_bus, get_policy, get_repository, get_subscription, local_time, paywall
)
from simplemeal.api.views import scheduled_view
from simplemeal.domain.Meal import Meal
from simplemeal.domain.PlanSettings import PlanSettings
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.logic.entitlement.policy import EntitlementPolicy
from simplemeal.logic.library.catalog import delete_entity
from simplemeal.logic.shopping.list_builder import scheduled_meals_for
from simplemeal.utilities.dates import start_of_day
from simplemeal.utilities.validators import ScheduleInput, SettingsInput

router = APIRouter()
logger = logging.getLogger(__name__)


def _settings_view(settings: PlanSettings) -> dict:
    data = settings.to_dict()
    data["date_range"] = [day.date().isoformat() for day in settings.date_range]
    return data


@router.get('/api/settings')
def get_settings(repo=Depends(get_repository)):
    return _settings_view(repo.settings())


@router.put('/api/settings')
def update_settings(payload: SettingsInput, repo=Depends(get_repository),
                    policy: EntitlementPolicy = Depends(get_policy)):
    decision = policy.check_planning_days(payload.number_of_days)
    if not decision.allowed:
        return paywall(decision.reason)
    with repo.transaction():
        settings = repo.update_settings(PlanSettings(local_time(payload.selected_date), payload.number_of_days))
    return _settings_view(settings)


# -------------------- Plan --------------------
@router.get('/api/plan')
def get_plan(repo=Depends(get_repository), bus=Depends(get_event_bus)):
    days = []
    for day in repo.settings().date_range:
        entries = []
        for scheduled in scheduled_meals_for(repo, day, bus=bus):
            entries.append(scheduled_view(scheduled, repo.resolve_meal(scheduled.meal_id)))
        days.append({"date": day.date().isoformat(), "meals": entries})
    return {"days": days}


@router.post('/api/plan', status_code=201)
def schedule_meal(payload: ScheduleInput, repo=Depends(get_repository), bus=Depends(get_event_bus),
                  policy: EntitlementPolicy = Depends(get_policy)):
    meal = repo.get(Meal, payload.meal_id)
    if meal is None:
        raise HTTPException(status_code=404, detail='Meal not found')
    date = local_time(payload.date)
    current_count = len(scheduled_meals_for(repo, date, bus=bus))
    decision = policy.check_can_schedule(date, current_count)
    if not decision.allowed:
        logger.info(f"Scheduling on {date:%Y-%m-%d} refused: {decision.reason}")
        return paywall(decision.reason)
    with repo.transaction():
        scheduled = repo.insert(ScheduledMeal(
            date=start_of_day(date),
            meal_id=meal.id,
            meal_time=local_time(payload.meal_time) or date,
        ))
    return scheduled_view(scheduled, meal)


@router.delete('/api/plan/{scheduled_id}')
def unschedule_meal(scheduled_id: str, repo=Depends(get_repository)):
    if not delete_entity(repo, ScheduledMeal, scheduled_id):
        raise HTTPException(status_code=404, detail='Scheduled meal not found')
    return {"deleted": scheduled_id}


# -------------------- Subscription --------------------
@router.get('/api/entitlements')
def get_entitlements(subscription=Depends(get_subscription),
                     policy: EntitlementPolicy = Depends(get_policy)):
    data = policy.to_dict()
    data["status"] = subscription.status
    return data


@router.post('/api/entitlements/refresh')
async def refresh_entitlements(subscription=Depends(get_subscription)):
    await subscription.refresh()
    data = EntitlementPolicy.from_subscription(subscription).to_dict()
    data["status"] = subscription.status
    return data
