import logging
from dotenv import load_dotenv
from fastapi import Body, Depends, FastAPI
from auth import verify_admin_token
from config.settings import get_app_config
from models.availability.day_schedule import WeeklySchedule
from models.availability.schedule_payloads import (
    AddSlotPayload,
    DefaultSlotPayload,
    QuickSchedulePayload,
    RemoveSlotPayload,
    SetDayEnabledPayload,
    UpdateSlotPayload,
    ValidateDayPayload,
)
from models.visibility.visibility_default import VisibilityMatrix
from models.visibility.visibility_types import ContentType, EngagementStage
from services.availability_service import AvailabilityService
from services.backend_client import BackendClient, get_backend_client
from services.visibility_service import VisibilityService
from utils.time_slots import generate_time_options


# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=get_app_config()["log_level"],
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Initialize FastAPI app
app = FastAPI(debug=get_app_config()["debug"])


@app.get("/")
async def root():
    return {
        "message": (
            "Welcome to the trainer availability service! "
            "Swagger UI documentation is available at /docs"
        )
    }


@app.get("/availability/time-options")
async def time_options():
    return {"time_options": generate_time_options()}


@app.post("/availability/validate-day")
async def validate_day(payload: ValidateDayPayload):
    return {"valid": AvailabilityService.validate_day(payload.slots)}


@app.post("/availability/default-slot")
async def default_slot(payload: DefaultSlotPayload):
    return AvailabilityService.find_default_slot(payload.existing_slots)


@app.post("/availability/add-slot")
async def add_slot(payload: AddSlotPayload):
    return AvailabilityService.add_slot(payload.schedule, payload.day)


@app.post("/availability/update-slot")
async def update_slot(payload: UpdateSlotPayload):
    return AvailabilityService.update_slot(
        payload.schedule,
        payload.day,
        payload.slot_index,
        payload.field,
        payload.value
    )


@app.post("/availability/remove-slot")
async def remove_slot(payload: RemoveSlotPayload):
    return AvailabilityService.remove_slot(
        payload.schedule, payload.day, payload.slot_index)


@app.post("/availability/set-day-enabled")
async def set_day_enabled(payload: SetDayEnabledPayload):
    return AvailabilityService.set_day_enabled(
        payload.schedule, payload.day, payload.enabled)


@app.post("/availability/quick-schedule")
async def quick_schedule(payload: QuickSchedulePayload):
    return AvailabilityService.apply_quick_schedule(
        payload.schedule, payload.preset)


@app.get("/trainers/{trainer_id}/availability")
async def get_availability(
    trainer_id: str,
    client: BackendClient = Depends(get_backend_client)
):
    return AvailabilityService.load_schedule(client, trainer_id)


@app.put("/trainers/{trainer_id}/availability")
async def save_availability(
    trainer_id: str,
    schedule: WeeklySchedule = Body(),
    client: BackendClient = Depends(get_backend_client)
):
    return AvailabilityService.save_schedule(client, trainer_id, schedule)


@app.get("/visibility/{content_type}/{engagement_stage}")
async def resolve_visibility(
    content_type: ContentType,
    engagement_stage: EngagementStage,
    client: BackendClient = Depends(get_backend_client)
):
    return VisibilityService.resolve(client, content_type, engagement_stage)


@app.get("/admin/visibility-defaults")
async def get_visibility_defaults(
    client: BackendClient = Depends(get_backend_client),
    _: str = Depends(verify_admin_token)
):
    return VisibilityService.load_defaults(client)


@app.put("/admin/visibility-defaults")
async def save_visibility_defaults(
    matrix: VisibilityMatrix,
    client: BackendClient = Depends(get_backend_client),
    _: str = Depends(verify_admin_token)
):
    return VisibilityService.save_defaults(client, matrix)
