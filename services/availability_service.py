import logging
from typing import Literal
from models.availability.day_schedule import (
    DAYS_OF_WEEK,
    DaySchedule,
    WeeklySchedule,
)
from models.availability.save_result import SaveResult
from models.availability.schedule_edit_result import (
    Notification,
    ScheduleEditResult,
)
from models.availability.time_slot import TimeSlot
from services.backend_client import BackendClient
from utils.time_slots import (
    find_available_default_slot,
    is_valid_time_range,
    slots_overlap,
    validate_day_slots,
)


logger = logging.getLogger(__name__)

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday"]
WEEKENDS = ["saturday", "sunday"]

QUICK_SCHEDULE_PRESETS = {
    "weekdays": (WEEKDAYS, TimeSlot(start="09:00", end="17:00")),
    "weekends": (WEEKENDS, TimeSlot(start="10:00", end="16:00")),
}


def _copy_schedule(schedule: WeeklySchedule) -> WeeklySchedule:
    return {
        day: day_schedule.model_copy(deep=True)
        for day, day_schedule in schedule.items()
    }


def _get_day(schedule: WeeklySchedule, day: str) -> DaySchedule:
    day_schedule = schedule.get(day)
    if day_schedule is None:
        return DaySchedule()
    return day_schedule.model_copy(deep=True)


def _reject(
    schedule: WeeklySchedule,
    title: str,
    description: str
) -> ScheduleEditResult:
    return ScheduleEditResult(
        result="rejected",
        schedule=schedule,
        notification=Notification(
            title=title,
            description=description,
            variant="destructive"
        )
    )


def _apply(
    schedule: WeeklySchedule,
    day: str,
    day_schedule: DaySchedule
) -> ScheduleEditResult:
    updated_schedule = _copy_schedule(schedule)
    updated_schedule[day] = day_schedule
    return ScheduleEditResult(result="applied", schedule=updated_schedule)


class AvailabilityService:
    """
    Edits of a trainer's weekly discovery-call availability.

    Every edit takes the current schedule and returns a new one; the input is
    never modified. A rejected edit hands the input back unchanged together
    with a notification for the trainer.
    """

    @staticmethod
    def validate_day(slots: list[TimeSlot]) -> bool:
        return validate_day_slots(slots)

    @staticmethod
    def find_default_slot(existing_slots: list[TimeSlot]) -> TimeSlot:
        return find_available_default_slot(existing_slots)

    @staticmethod
    def add_slot(schedule: WeeklySchedule, day: str) -> ScheduleEditResult:
        day_schedule = _get_day(schedule, day)

        if not day_schedule.enabled:
            return _reject(
                schedule,
                "Day Not Enabled",
                f"Enable {day.capitalize()} before adding time slots."
            )

        new_slot = find_available_default_slot(day_schedule.slots)
        has_overlap = any(
            slots_overlap(new_slot, existing_slot)
            for existing_slot in day_schedule.slots
        )
        if has_overlap:
            return _reject(
                schedule,
                "Time Slot Conflict",
                "This time slot overlaps with an existing slot. "
                "Please choose different times."
            )

        day_schedule.slots = [*day_schedule.slots, new_slot]
        return _apply(schedule, day, day_schedule)

    @staticmethod
    def update_slot(
        schedule: WeeklySchedule,
        day: str,
        slot_index: int,
        field: Literal["start", "end"],
        value: str
    ) -> ScheduleEditResult:
        day_schedule = _get_day(schedule, day)

        if not 0 <= slot_index < len(day_schedule.slots):
            return _reject(
                schedule,
                "Time Slot Not Found",
                f"{day.capitalize()} has no time slot number {slot_index + 1}."
            )

        updated_slot = day_schedule.slots[slot_index].model_copy(
            update={field: value})

        if not is_valid_time_range(updated_slot):
            return _reject(
                schedule,
                "Invalid Time Range",
                "Start time must be before end time."
            )

        other_slots = [
            slot for i, slot in enumerate(day_schedule.slots)
            if i != slot_index
        ]
        has_overlap = any(
            slots_overlap(updated_slot, other_slot)
            for other_slot in other_slots
        )
        if has_overlap:
            return _reject(
                schedule,
                "Time Slot Overlap",
                "This time slot would overlap with another slot. "
                "Please choose a different time."
            )

        day_schedule.slots[slot_index] = updated_slot
        return _apply(schedule, day, day_schedule)

    @staticmethod
    def remove_slot(
        schedule: WeeklySchedule,
        day: str,
        slot_index: int
    ) -> ScheduleEditResult:
        day_schedule = _get_day(schedule, day)

        if not 0 <= slot_index < len(day_schedule.slots):
            return _reject(
                schedule,
                "Time Slot Not Found",
                f"{day.capitalize()} has no time slot number {slot_index + 1}."
            )

        day_schedule.slots = [
            slot for i, slot in enumerate(day_schedule.slots)
            if i != slot_index
        ]
        return _apply(schedule, day, day_schedule)

    @staticmethod
    def set_day_enabled(
        schedule: WeeklySchedule,
        day: str,
        enabled: bool
    ) -> ScheduleEditResult:
        day_schedule = _get_day(schedule, day)
        day_schedule.enabled = enabled
        return _apply(schedule, day, day_schedule)

    @staticmethod
    def apply_quick_schedule(
        schedule: WeeklySchedule,
        preset: Literal["weekdays", "weekends", "clear"]
    ) -> ScheduleEditResult:
        updated_schedule = _copy_schedule(schedule)

        if preset == "clear":
            for day in DAYS_OF_WEEK:
                updated_schedule[day] = DaySchedule(enabled=False, slots=[])
        else:
            days, slot = QUICK_SCHEDULE_PRESETS[preset]
            for day in days:
                updated_schedule[day] = DaySchedule(
                    enabled=True,
                    slots=[slot.model_copy()]
                )

        return ScheduleEditResult(result="applied", schedule=updated_schedule)

    @staticmethod
    def load_schedule(client: BackendClient, trainer_id: str) -> WeeklySchedule:
        stored_schedule = client.get_availability_schedule(trainer_id) or {}

        return {
            day: DaySchedule.model_validate(stored_schedule.get(day) or {})
            for day in DAYS_OF_WEEK
        }

    @staticmethod
    def save_schedule(
        client: BackendClient,
        trainer_id: str,
        schedule: WeeklySchedule
    ) -> SaveResult:
        for day, day_schedule in schedule.items():
            if not all(is_valid_time_range(slot) for slot in day_schedule.slots):
                return SaveResult(
                    result="rejected",
                    error=f"{day.capitalize()} has a time slot that does not "
                    "start before it ends."
                )
            if not validate_day_slots(day_schedule.slots):
                return SaveResult(
                    result="rejected",
                    error=f"{day.capitalize()} has overlapping time slots."
                )

        availability_schedule = {
            day: day_schedule.model_dump()
            for day, day_schedule in schedule.items()
        }

        try:
            client.update_availability_schedule(
                trainer_id, availability_schedule)
        except Exception as e:
            logger.error(
                f"Failed to save availability for trainer {trainer_id}: {e}")
            return SaveResult(result="failure", error=str(e))

        logger.info(f"Saved availability for trainer {trainer_id}")
        return SaveResult(result="saved")
