"""
FlowBoard Backend: Email Templates
==================================

What:  The four emails the marketing site sends, as pure functions.
How:   Each function takes a stored record and returns EmailContent
       (subject + HTML body). Visitor-supplied text is HTML-escaped before it
       is placed in the body.
Who:   Called by ContactService and LeadService right before dispatch.

Templates:
    contact_notification   → operator inbox, one per contact submission
    contact_confirmation   → visitor, echoes their message
    trial_welcome          → visitor, onboarding steps and trial end date
    demo_confirmation      → visitor, echoes the preferred demo date
"""

from datetime import datetime, timezone
from html import escape
from typing import NamedTuple

from dateutil import parser as dateparse

from flowboard.models.contact import ContactMessage
from flowboard.models.lead import DemoLead, TrialLead

BRAND = "FlowBoard"
LOGIN_URL = "https://app.flowboard.example.com/login"
TRIAL_URL = "https://app.flowboard.example.com/trial"
HELP_URL = "https://help.flowboard.example.com"
DEMO_BOOKING_URL = "https://calendly.com/flowboard-demo"
VIDEOS_URL = "https://youtube.com/flowboard"

SIGNATURE = f"<p>Best regards,<br>The {BRAND} Team</p>"

# Two fill-in values that differ in year, month and day but share a midnight time.
PARTIAL_DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 2, 2))


class EmailContent(NamedTuple):
    subject: str
    html: str


def format_date(value: datetime) -> str:
    """Short date as shown in emails, e.g. 1/29/2025."""
    return f"{value.month}/{value.day}/{value.year}"


def format_datetime(value: datetime) -> str:
    """Date and time as shown in emails, e.g. 1/29/2025, 3:00:00 PM."""
    return f"{format_date(value)}, {value.strftime('%I:%M:%S %p').lstrip('0')}"


def single_line(text: str) -> str:
    """Collapse runs of whitespace, newlines included, into single spaces."""
    return " ".join(text.split())


def humanize_preferred_date(raw: str) -> str:
    """
    Render a visitor-entered date for display.

    Only complete dates are rendered. dateutil fills missing fields from its
    default, so the input is parsed against two different defaults; if the
    results disagree the visitor left the year, month or day open and the
    raw text is shown exactly as typed, as is anything dateutil cannot read.
    Times carrying an offset are shown in UTC.
    """
    try:
        first, second = (dateparse.parse(raw, default=d) for d in PARTIAL_DATE_DEFAULTS)
    except (ValueError, OverflowError):
        return raw
    if first != second:
        return raw
    if first.tzinfo is not None:
        first = first.astimezone(timezone.utc)
    return format_datetime(first)


def contact_notification(msg: ContactMessage) -> EmailContent:
    """Internal heads-up that someone used the contact form."""
    html = f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>Name:</strong> {escape(msg.name)}</p>
        <p><strong>Email:</strong> {escape(msg.email)}</p>
        <p><strong>Company:</strong> {escape(msg.company)}</p>
        <p><strong>Message:</strong></p>
        <p>{escape(msg.message)}</p>
        <hr>
        <p>This message was sent from the {BRAND} contact form.</p>
    """
    return EmailContent(
        subject=f"New Contact Form Submission from {single_line(msg.name)}",
        html=html,
    )


def contact_confirmation(msg: ContactMessage) -> EmailContent:
    html = f"""
        <h2>Thank you for reaching out!</h2>
        <p>Dear {escape(msg.name)},</p>
        <p>We've received your message and our team will get back to you within 24 hours.</p>
        <p>Here's a copy of your message:</p>
        <blockquote>{escape(msg.message)}</blockquote>
        {SIGNATURE}
    """
    return EmailContent(subject=f"Thank you for contacting {BRAND}", html=html)


def trial_welcome(lead: TrialLead) -> EmailContent:
    """Welcome mail for a new trial; the end date comes from the stored lead."""
    html = f"""
        <h2>Welcome to {BRAND}, {escape(lead.name)}!</h2>
        <p>Your 14-day free trial has been activated. Here's what you can do next:</p>
        <ol>
            <li><strong>Set up your workspace:</strong> Log in and create your first project</li>
            <li><strong>Invite team members:</strong> Add your team to collaborate</li>
            <li><strong>Explore features:</strong> Try out our task management and analytics tools</li>
        </ol>
        <p><strong>Login URL:</strong> <a href="{LOGIN_URL}">{LOGIN_URL}</a></p>
        <p><strong>Trial End Date:</strong> {format_date(lead.end_date)}</p>
        <p>Need help getting started? Check out our <a href="{HELP_URL}">documentation</a> or schedule a <a href="{DEMO_BOOKING_URL}">demo call</a>.</p>
        {SIGNATURE}
    """
    return EmailContent(subject=f"Welcome to {BRAND} - Your 14-Day Trial", html=html)


def demo_confirmation(lead: DemoLead) -> EmailContent:
    html = f"""
        <h2>Demo Request Received</h2>
        <p>Hi {escape(lead.name)},</p>
        <p>We've received your request for a {BRAND} demo on {escape(humanize_preferred_date(lead.preferred_date))}.</p>
        <p>Our sales team will contact you within 24 hours to confirm the schedule.</p>
        <p>In the meantime, you can:</p>
        <ul>
            <li>Watch our <a href="{VIDEOS_URL}">introductory videos</a></li>
            <li>Explore our <a href="{HELP_URL}">feature guides</a></li>
            <li>Start a <a href="{TRIAL_URL}">free trial</a></li>
        </ul>
        {SIGNATURE}
    """
    return EmailContent(subject=f"{BRAND} Demo Request Confirmation", html=html)
