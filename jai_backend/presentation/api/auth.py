"""
Auth API Router - account helpers for signed-in users.

POST /auth/resend-verification does not send anything itself: it tells the
client whether the address is already verified, and otherwise to trigger
the verification email through its own auth SDK.
"""

from logging import getLogger

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from jai_backend.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

ALREADY_VERIFIED = "Email already verified."
SEND_FROM_CLIENT = "Proceed to send verification email from client SDK."


class ResendVerificationResponse(BaseModel):
    message: str


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/resend-verification",
    response_model=ResendVerificationResponse,
    status_code=status.HTTP_200_OK,
)
async def resend_verification(current_user: AuthUser = Depends(get_current_user)):
    if current_user.email_verified:
        logger.info(f"User {current_user.user_id} already verified email.")
        return ResendVerificationResponse(message=ALREADY_VERIFIED)

    logger.info(f"User {current_user.user_id} requested resend of verification email.")
    return ResendVerificationResponse(message=SEND_FROM_CLIENT)
