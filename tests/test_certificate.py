from __future__ import annotations

import re
from datetime import date
from urllib.parse import unquote

from app.models.signals import Profile
from app.services.certificate import (
    CertificateRenderer,
    download_filename,
    linkedin_share_text,
    linkedin_share_url,
    new_certificate_id,
    personalized_description,
)

CERTIFICATE_ID_RE = re.compile(r"^ASC-[A-Z0-9]{8}$")


def test_certificate_ids_are_well_formed_and_unique():
    ids = {new_certificate_id() for _ in range(200)}
    assert all(CERTIFICATE_ID_RE.match(cid) for cid in ids)
    assert len(ids) == 200


def test_personalized_description_lowercases_first_letter():
    assert personalized_description("Ada", Profile.SYSTEMS_THINKER) == (
        "Ada understands how AI interacts with workflows, incentives, and context."
    )


def test_render_contains_name_profile_and_id():
    svg = CertificateRenderer().render("Ada Lovelace", Profile.STRATEGIC_OBSERVER, "ASC-ABCD1234", date(2026, 3, 1))
    assert svg.lstrip().startswith("<svg")
    assert "Ada Lovelace" in svg
    assert "AI Thinking Profile: Strategic Observer" in svg
    assert "Ada Lovelace considers long-term organizational and decision impact of AI." in svg
    assert "Certificate ID: ASC-ABCD1234" in svg
    assert "March 01, 2026" in svg


def test_render_escapes_user_text():
    svg = CertificateRenderer().render("<script>alert(1)</script>", Profile.WORKFLOW_OPTIMIZER, "ASC-X&Y")
    assert "<script>" not in svg
    assert "&lt;script&gt;" in svg
    assert "ASC-X&amp;Y" in svg


def test_render_defaults_blank_name():
    svg = CertificateRenderer().render("   ", Profile.ADOPTION_REALIST, "ASC-00000000")
    assert "Certificate User" in svg


def test_download_filename():
    assert download_filename("Ada") == "AI-Certificate-Ada.svg"
    assert download_filename(None) == "AI-Certificate-certificate.svg"


def test_linkedin_share_url_embeds_profile_and_site():
    url = linkedin_share_url(Profile.HUMAN_CENTERED_TECHNOLOGIST, site_url="https://quiz.example.com")
    assert url.startswith("https://www.linkedin.com/feed/?shareActive=true&text=")
    text = unquote(url.split("text=", 1)[1])
    assert text == linkedin_share_text(Profile.HUMAN_CENTERED_TECHNOLOGIST, site_url="https://quiz.example.com")
    assert "My result: Human-Centered Technologist" in text
    assert "Try it here: https://quiz.example.com" in text
