from fastapi import APIRouter
import logging

from app.exceptions import ValidationError
from app.schemas.contact_schemas import ContactRequest, ContactResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/contact", response_model=ContactResponse)
async def contact_form(data: ContactRequest):
    if not data.name or not data.email or not data.message:
        raise ValidationError("All fields are required")

    logger.info(
        f"Contact Form Submission: name={data.name} email={data.email} message={data.message}"
    )

    return {"success": "Message received"}
