"""
Personalized plan API routes.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...catalog import get_catalog
from ...config import SETTINGS
from ...models import (
    CatalogMeal,
    DailySchedule,
    MealSlot,
    PersonalizedFastingPlan,
    UserProfile,
)
from ...nutrition import calculate_calorie_target
from ...services import FastingService, ScheduleService
from ...services.meal_service import MEAL_SLOTS
from ...services.schedule_service import week_start_day

router = APIRouter()


class DayRequest(BaseModel):
    profile: UserProfile
    day_number: int = Field(1, ge=1, description="1-based plan day")
    now: datetime | None = Field(None, description="Reference time for age; defaults to now")


class WeekRequest(BaseModel):
    profile: UserProfile
    week_index: int = Field(1, ge=1, description="1-based plan week")
    now: datetime | None = None


class ProfileRequest(BaseModel):
    profile: UserProfile


class MealOptionsRequest(BaseModel):
    profile: UserProfile
    slot: MealSlot
    day_number: int = Field(1, ge=1)
    now: datetime | None = None


class DayResponse(BaseModel):
    ok: bool = True
    schedule: DailySchedule


class WeekResponse(BaseModel):
    ok: bool = True
    start_day: int
    days: list[DailySchedule]


class FastingResponse(BaseModel):
    ok: bool = True
    fasting: PersonalizedFastingPlan


class MealOptionsResponse(BaseModel):
    ok: bool = True
    slot: MealSlot
    target_calories: float
    items: list[CatalogMeal]


def _now(value: datetime | None) -> datetime:
    return value or datetime.now(UTC)


@router.post("/plan/day")
async def plan_day(req: DayRequest) -> DayResponse:
    """Generate the schedule for a single plan day."""
    schedule = ScheduleService(get_catalog()).daily_schedule(
        req.profile, req.day_number, _now(req.now)
    )
    logging.info(
        "Generated day %s (rest=%s, exercises=%s)",
        schedule.day_number,
        schedule.is_rest_day,
        len(schedule.exercises.exercises),
    )
    return DayResponse(schedule=schedule)


@router.post("/plan/week")
async def plan_week(req: WeekRequest) -> WeekResponse:
    """Generate seven consecutive days starting at the given week."""
    start = week_start_day(req.week_index)
    days = ScheduleService(get_catalog()).week_schedule(req.profile, start, _now(req.now))
    return WeekResponse(start_day=start, days=days)


@router.post("/plan/fasting")
async def plan_fasting(req: ProfileRequest) -> FastingResponse:
    """Fasting protocol only; it does not depend on the plan day."""
    return FastingResponse(fasting=FastingService().determine_fasting_plan(req.profile))


@router.post("/plan/meal-options")
async def plan_meal_options(req: MealOptionsRequest) -> MealOptionsResponse:
    """Up to three swap options for one meal slot."""
    if not SETTINGS.FF_MEAL_OPTIONS:
        raise HTTPException(status_code=503, detail="Meal options disabled")

    _, share = MEAL_SLOTS[req.slot]
    target = calculate_calorie_target(req.profile, _now(req.now)) * share
    items = ScheduleService(get_catalog()).meals.meal_options(req.slot, target, req.day_number)
    return MealOptionsResponse(slot=req.slot, target_calories=round(target, 1), items=items)
