"""
AI Routes - endpoints backed by the LLM provider.

Endpoints:
- POST /chat: One answer in the requested language
- POST /roadmap-generator: Career suggestions for a stored user
- POST /analyze-image: Identify the math problem in an image
"""
from fastapi import APIRouter, Depends

from edupilot.api.dependencies import get_ai_gateway, get_user_service
from edupilot.core.exceptions import InvalidInput
from edupilot.core.logging_config import get_logger
from edupilot.models.ai import (
    AnalyzeImageRequest,
    AnalyzeImageResponse,
    ChatRequest,
    ChatResponse,
    RoadmapRequest,
    RoadmapResponse,
)
from edupilot.models.user import ErrorResponse
from edupilot.services.ai_gateway import AIGateway
from edupilot.services.user_service import UserDirectoryService

logger = get_logger(__name__)

router = APIRouter(
    tags=["AI"],
    responses={500: {"model": ErrorResponse, "description": "LLM provider failure"}},
)


@router.post("/chat", response_model=ChatResponse, summary="Ask a question")
def chat(
    request: ChatRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
) -> ChatResponse:
    reply = gateway.converse(request.message, request.language)
    return ChatResponse(response=reply)


@router.post(
    "/roadmap-generator",
    response_model=RoadmapResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Suggest career roles",
)
def roadmap_generator(
    request: RoadmapRequest,
    users: UserDirectoryService = Depends(get_user_service),
    gateway: AIGateway = Depends(get_ai_gateway),
) -> RoadmapResponse:
    """
    Suggest up to three career roles related to input_text, based on
    the stored profile of the user with this email.

    The model output is parsed best-effort: the list can be shorter
    than three, or empty, when the model ignores the format.
    """
    if not request.email or not request.input_text:
        raise InvalidInput("Email and input text are required")

    user = users.get_profile(request.email)
    profile = {key: value for key, value in user.items() if key not in ("_id", "password")}
    logger.debug(f"User details: {profile}")

    roles = gateway.generate_career_roadmap(user, request.input_text)
    return RoadmapResponse(career_roles=roles)


@router.post(
    "/analyze-image",
    response_model=AnalyzeImageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Identify a math problem in an image",
)
def analyze_image(
    request: AnalyzeImageRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
) -> AnalyzeImageResponse:
    analysis = gateway.analyze_image(request.imageData)
    return AnalyzeImageResponse(analysis=analysis)
