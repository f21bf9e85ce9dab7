"""Job description generation for the wizard's description step.

Two generators share one interface (`async generate(request) -> str`):
  - TemplateDescriptionGenerator  builds the text in-process
  - HttpDescriptionGenerator      posts to an external generator service

`fallback_description()` is the short sentence used when a generator
fails; it never raises.
"""

import logging

import httpx

from shoreagents.config import settings
from shoreagents.schemas.pricing import JobDescriptionRequest
from shoreagents.wizard.steps import EXPERIENCE_LABELS

logger = logging.getLogger(__name__)

_STANDARD_SECTIONS = """

Requirements:
• Strong communication skills in English
• Relevant experience in the field
• Ability to work in a remote/offshore environment
• Commitment to quality and deadlines
• Collaborative team player

Benefits:
• Competitive salary package
• Flexible working hours
• Professional development opportunities
• International team exposure
• Career growth potential

This is an excellent opportunity to work with a dynamic international team and gain valuable experience in a professional offshore environment."""

_SHORT_EXPERIENCE = {
    "entry": "entry level",
    "mid": "mid level",
    "senior": "senior level",
    "mixed": "mixed experience levels",
}


def _headcount(request: JobDescriptionRequest) -> str:
    noun = "team members" if request.role_type == "same" else "professionals"
    return f"{request.team_size} {noun}"


def build_job_description(request: JobDescriptionRequest) -> str:
    """Full job description with standard requirements and benefits."""
    text = f"We are seeking {_headcount(request)} to join our offshore team."

    if request.roles:
        if request.role_type == "same":
            text += f" All positions are for {request.roles}."
        else:
            text += f" The roles include: {request.roles}."

    if request.experience:
        label = EXPERIENCE_LABELS.get(request.experience, request.experience)
        text += f" We are looking for {label} candidates."

    if request.industry:
        text += f" This position is in the {request.industry} industry."

    if request.budget:
        text += f" We offer competitive compensation within the {request.budget} range."

    return (text + _STANDARD_SECTIONS).strip()


def fallback_description(request: JobDescriptionRequest) -> str:
    experience = (
        _SHORT_EXPERIENCE.get(request.experience or "")
        or request.experience
        or "various experience levels"
    )
    return (
        f"We are looking for {_headcount(request)} in {request.roles or 'various roles'} "
        f"with {experience} experience. This is a great opportunity to work with an "
        "international team."
    )


class TemplateDescriptionGenerator:
    async def generate(self, request: JobDescriptionRequest) -> str:
        return build_job_description(request)


class HttpDescriptionGenerator:
    """Calls a remote `POST /generate-job-description` endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def generate(self, request: JobDescriptionRequest) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.post(
                self.url, json=request.model_dump(by_alias=True, exclude_none=True)
            )
            resp.raise_for_status()
            data = resp.json()
        if not isinstance(data, dict) or not data.get("success") or not data.get("description"):
            raise ValueError(f"Job description service returned no description: {data!r}")
        return data["description"]


def get_description_generator() -> TemplateDescriptionGenerator | HttpDescriptionGenerator:
    if settings.job_description_url:
        logger.debug("Using remote job description generator at %s", settings.job_description_url)
        return HttpDescriptionGenerator(
            settings.job_description_url, timeout=settings.job_description_timeout
        )
    return TemplateDescriptionGenerator()
