from dataclasses import dataclass
from html import escape
from zoneinfo import ZoneInfo

from src.rsvp.dtos import StoredRSVP


@dataclass
class EmailTemplates:
    RSVP_SUBJECT_ATTENDING = "New RSVP: {guest_name} will attend"
    RSVP_SUBJECT_DECLINING = "New RSVP: {guest_name} cannot attend"

    RSVP_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #d4a373;">New RSVP</h1>
        </div>

        <p>Dear {couple_names},</p>

        <p>A guest has just responded to your invitation.</p>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #bc6c25; margin-top: 0;">Response</h2>
            <p><strong>Name:</strong> {guest_name}</p>
            <p><strong>Email:</strong> {guest_email}</p>
            <p><strong>Attending:</strong> {attending}</p>
            {details}
        </div>

        <p style="font-size: 12px; color: #888; text-align: center;">
            Submitted on {submitted_at}
        </p>
    </body>
    </html>
    """

    RSVP_HTML_DETAIL = "<p><strong>{label}:</strong> {value}</p>"

    RSVP_TEXT = """
    Dear {couple_names},

    A guest has just responded to your invitation.

    Response:
    - Name: {guest_name}
    - Email: {guest_email}
    - Attending: {attending}
{details}
    Submitted on {submitted_at}
    """

    RSVP_TEXT_DETAIL = "    - {label}: {value}\n"

    SUBMITTED_AT_FORMAT = "%B %d, %Y at %I:%M %p %Z"

    @classmethod
    def render_rsvp_notification(
        cls,
        rsvp: StoredRSVP,
        couple_names: str,
        timezone: str = "UTC",
    ) -> tuple[str, str, str]:
        """Return subject, html body and text body for an organizer notification."""
        details: list[tuple[str, str]] = []
        if rsvp.attending and rsvp.diet:
            details.append(("Diet", rsvp.diet))
        if rsvp.allergies:
            details.append(("Allergies", rsvp.allergies))
        if rsvp.message:
            details.append(("Message", rsvp.message))

        submitted_at = rsvp.submitted_at.astimezone(ZoneInfo(timezone)).strftime(
            cls.SUBMITTED_AT_FORMAT
        )
        attending = "Yes" if rsvp.attending else "No"
        subject_template = (
            cls.RSVP_SUBJECT_ATTENDING if rsvp.attending else cls.RSVP_SUBJECT_DECLINING
        )

        html_body = cls.RSVP_HTML.format(
            couple_names=escape(couple_names),
            guest_name=escape(rsvp.name),
            guest_email=escape(rsvp.email),
            attending=attending,
            details="".join(
                cls.RSVP_HTML_DETAIL.format(label=label, value=escape(value))
                for label, value in details
            ),
            submitted_at=submitted_at,
        )
        text_body = cls.RSVP_TEXT.format(
            couple_names=couple_names,
            guest_name=rsvp.name,
            guest_email=rsvp.email,
            attending=attending,
            details="".join(
                cls.RSVP_TEXT_DETAIL.format(label=label, value=value) for label, value in details
            ),
            submitted_at=submitted_at,
        )
        return subject_template.format(guest_name=rsvp.name), html_body, text_body
