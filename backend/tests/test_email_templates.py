"""
FlowBoard Backend: Email Template Tests
=======================================

What we test:
    ✅ Subjects match what the sales and support inboxes filter on
    ✅ Visitor input is HTML-escaped
    ✅ Trial end date and preferred demo date rendering
    ✅ Partial dates are echoed, never completed with made-up fields
"""

from datetime import datetime, timezone

import pytest

from flowboard.models.contact import ContactMessage
from flowboard.models.lead import DemoLead, TrialLead
from flowboard.services import email_templates


def _contact(**overrides):
    fields = {"name": "Ana", "email": "a@x.com", "message": "Hi there"}
    fields.update(overrides)
    return ContactMessage(**fields)


class TestContactTemplates:

    def test_notification_subject_and_body(self):
        content = email_templates.contact_notification(_contact(company="Acme"))
        assert content.subject == "New Contact Form Submission from Ana"
        assert "a@x.com" in content.html
        assert "Acme" in content.html
        assert "Hi there" in content.html

    def test_notification_shows_default_company(self):
        content = email_templates.contact_notification(_contact())
        assert "Not specified" in content.html

    def test_confirmation_echoes_message(self):
        content = email_templates.contact_confirmation(_contact())
        assert content.subject == "Thank you for contacting FlowBoard"
        assert "<blockquote>Hi there</blockquote>" in content.html
        assert "Dear Ana" in content.html

    def test_notification_subject_is_single_line(self):
        content = email_templates.contact_notification(_contact(name="Ana\r\n  Lima\n"))
        assert content.subject == "New Contact Form Submission from Ana Lima"
        assert "Ana\r\n  Lima" in content.html

    def test_visitor_input_is_escaped(self):
        content = email_templates.contact_confirmation(
            _contact(name="<b>Eve</b>", message="<script>alert(1)</script>")
        )
        assert "<script>" not in content.html
        assert "&lt;script&gt;" in content.html
        assert "&lt;b&gt;Eve&lt;/b&gt;" in content.html


class TestTrialWelcome:

    def test_uses_stored_end_date(self):
        start = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)
        lead = TrialLead.starting(name="Bo", email="bo@x.com", start=start)
        content = email_templates.trial_welcome(lead)
        assert content.subject == "Welcome to FlowBoard - Your 14-Day Trial"
        assert "Welcome to FlowBoard, Bo!" in content.html
        assert "<strong>Trial End Date:</strong> 1/29/2025" in content.html
        assert email_templates.LOGIN_URL in content.html


class TestDemoConfirmation:

    def test_parsed_date_is_humanized(self):
        lead = DemoLead(name="Cy", email="cy@x.com", preferred_date="2025-03-04T15:30:00")
        content = email_templates.demo_confirmation(lead)
        assert content.subject == "FlowBoard Demo Request Confirmation"
        assert "demo on 3/4/2025, 3:30:00 PM." in content.html

    def test_unparseable_date_is_echoed(self):
        lead = DemoLead(name="Cy", email="cy@x.com", preferred_date="whenever works")
        content = email_templates.demo_confirmation(lead)
        assert "demo on whenever works." in content.html


class TestDateFormatting:

    def test_format_date(self):
        assert email_templates.format_date(datetime(2025, 12, 5)) == "12/5/2025"

    def test_format_datetime_morning_and_noon(self):
        assert email_templates.format_datetime(datetime(2025, 1, 2, 9, 5, 7)) == "1/2/2025, 9:05:07 AM"
        assert email_templates.format_datetime(datetime(2025, 1, 2, 12, 0, 0)) == "1/2/2025, 12:00:00 PM"

    def test_humanize_falls_back_to_raw(self):
        assert email_templates.humanize_preferred_date("whenever works") == "whenever works"

    @pytest.mark.parametrize("raw", ["March", "5", "2025", "March 4", "next Tuesday 3pm"])
    def test_partial_dates_are_echoed(self, raw):
        assert email_templates.humanize_preferred_date(raw) == raw

    def test_date_only_renders_midnight(self):
        assert email_templates.humanize_preferred_date("2025-03-04") == "3/4/2025, 12:00:00 AM"

    def test_offset_is_converted_to_utc(self):
        rendered = email_templates.humanize_preferred_date("2025-03-04T15:30:00+05:00")
        assert rendered == "3/4/2025, 10:30:00 AM"

    def test_utc_marker_is_kept(self):
        rendered = email_templates.humanize_preferred_date("2025-03-04T15:30:00Z")
        assert rendered == "3/4/2025, 3:30:00 PM"
