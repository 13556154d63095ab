import secrets
from datetime import date
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.config import settings
from app.core.constants import (
    CERTIFICATE_ID_ALPHABET,
    CERTIFICATE_ID_LENGTH,
    CERTIFICATE_ID_PREFIX,
    DEFAULT_CERTIFICATE_NAME,
)
from app.models.signals import Profile
from app.services.profile import get_profile_description

# app/services/certificate.py -> app/services -> app
templates_dir = Path(__file__).resolve().parent.parent / "templates"

LINKEDIN_SHARE_URL = "https://www.linkedin.com/feed/?shareActive=true&text={text}"


def new_certificate_id() -> str:
    suffix = "".join(secrets.choice(CERTIFICATE_ID_ALPHABET) for _ in range(CERTIFICATE_ID_LENGTH))
    return f"{CERTIFICATE_ID_PREFIX}{suffix}"


def personalized_description(name: str, profile: Profile) -> str:
    """'Ada understands how AI ...' from the profile's 'Understands how AI ...'."""
    description = get_profile_description(profile)
    return f"{name} {description[:1].lower()}{description[1:]}"


def download_filename(name: str | None) -> str:
    return f"AI-Certificate-{name or 'certificate'}.svg"


def linkedin_share_text(profile: Profile, site_url: str = settings.HOST_NAME) -> str:
    return (
        "I just completed an AI Sense Check — a quick reflection on how I interpret AI decisions "
        "in real work situations.\n\n"
        f"My result: {profile.value}\n\n"
        "It's a good reminder that AI success depends on people and context, not just features.\n\n"
        f"Curious about yours? Try it here: {site_url}\n\n"
        "Drop your profile below."
    )


def linkedin_share_url(profile: Profile, site_url: str = settings.HOST_NAME) -> str:
    return LINKEDIN_SHARE_URL.format(text=quote(linkedin_share_text(profile, site_url), safe=""))


class CertificateRenderer:
    """Renders the shareable certificate as a standalone SVG image."""

    width = 1000
    height = 640

    def __init__(self, template_dir: Path = templates_dir):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["svg"]),
        )

    def render(
        self, name: str | None, profile: Profile, certificate_id: str, issued_on: date | None = None
    ) -> str:
        display_name = (name or "").strip() or DEFAULT_CERTIFICATE_NAME
        template = self.env.get_template("certificate.svg")
        return template.render(
            width=self.width,
            height=self.height,
            name=display_name,
            profile=profile.value,
            description=personalized_description(display_name, profile),
            certificate_id=certificate_id,
            issued_on=(issued_on or date.today()).strftime("%B %d, %Y"),
        )


certificate_renderer = CertificateRenderer()
