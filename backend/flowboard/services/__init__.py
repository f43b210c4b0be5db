# Services package init
"""
FlowBoard Backend: Services Layer
=================================

What:  Business logic between the routes (HTTP) and the stores / mail relay.
How:   Services receive their store and MailDispatcher in the constructor;
       create_app() wires one instance of each onto app.state.

Service Inventory:
    - RecordStore (abstract) / InMemoryRecordStore: append-only record lists
    - MailDispatcher (abstract): send one HTML email
    - SMTPMailDispatcher: MailDispatcher over an SMTP relay (smtplib)
    - email_templates: subjects and HTML bodies for every email
    - ContactService: contact form → store → notification + confirmation
    - LeadService: trial signup, demo request, admin lead summary
"""
