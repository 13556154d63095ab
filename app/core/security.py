def redact_session_id(session_id: str | None) -> str:
    """
    Redact a session id for logging purposes.
    Shows the first 6 characters followed by ***.
    """
    if not session_id:
        return "None"
    if len(session_id) <= 6:
        return session_id
    return f"{session_id[:6]}***"


def redact_email(email: str | None) -> str:
    """Keep the first character of the local part and the domain: j***@example.com."""
    if not email:
        return "None"
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
