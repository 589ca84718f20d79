"""
Tests for Brevo payload → record mapping.
"""

import pytest

from common.exceptions import BrevoAPIException
from common.mappers import (
    CAMPAIGN_TO_FIELD,
    brevo_contact_to_row,
    brevo_folder_to_row,
    brevo_list_to_row,
    brevo_template_to_row,
    build_email_campaign_payload,
    upsert_outcome_to_add_result,
)
from common.models import UpsertOutcome


@pytest.fixture
def sample_contact():
    return {
        "email": "jane@example.com",
        "id": 12,
        "emailBlacklisted": False,
        "smsBlacklisted": True,
        "createdAt": "2024-01-10T10:00:00.000+01:00",
        "modifiedAt": "2024-02-01T09:30:00.000+01:00",
        "listIds": [3],
        "attributes": {"FIRSTNAME": "Jane", "LASTNAME": "Doe"},
    }


# ---------------------------------------------------------------------------
# Tests: contacts
# ---------------------------------------------------------------------------

def test_contact_english_attributes(sample_contact):
    row = brevo_contact_to_row(sample_contact).to_record()

    assert row == {
        "id": 12,
        "email": "jane@example.com",
        "emailBlacklisted": False,
        "smsBlacklisted": True,
        "createdAt": "2024-01-10T10:00:00.000+01:00",
        "modifiedAt": "2024-02-01T09:30:00.000+01:00",
        "firstName": "Jane",
        "lastName": "Doe",
    }


def test_contact_french_attributes(sample_contact):
    sample_contact["attributes"] = {"PRENOM": "Jean", "NOM": "Dupont"}

    row = brevo_contact_to_row(sample_contact)

    assert row.first_name == "Jean"
    assert row.last_name == "Dupont"


def test_contact_english_alias_wins(sample_contact):
    sample_contact["attributes"] = {"FIRSTNAME": "Jane", "PRENOM": "Jeanne"}

    assert brevo_contact_to_row(sample_contact).first_name == "Jane"


def test_contact_empty_alias_falls_through(sample_contact):
    sample_contact["attributes"] = {"FIRSTNAME": "", "PRENOM": "Jeanne"}

    assert brevo_contact_to_row(sample_contact).first_name == "Jeanne"


@pytest.mark.parametrize("attributes", [{}, None])
def test_contact_names_default_to_empty(sample_contact, attributes):
    sample_contact["attributes"] = attributes

    row = brevo_contact_to_row(sample_contact)

    assert row.first_name == ""
    assert row.last_name == ""


def test_contact_without_id_is_rejected(sample_contact):
    del sample_contact["id"]

    with pytest.raises(BrevoAPIException, match="Unexpected contact payload"):
        brevo_contact_to_row(sample_contact)


# ---------------------------------------------------------------------------
# Tests: lists, folders, templates
# ---------------------------------------------------------------------------

def test_list_row():
    raw = {
        "id": 5,
        "name": "Newsletter",
        "totalBlacklisted": 1,
        "totalSubscribers": 120,
        "uniqueSubscribers": 118,
        "folderId": 2,
    }

    assert brevo_list_to_row(raw).to_record() == raw


def test_list_row_ignores_unknown_fields():
    row = brevo_list_to_row({"id": 5, "name": "Newsletter", "campaignStats": []})

    assert row.to_record()["folderId"] is None
    assert "campaignStats" not in row.to_record()


def test_folder_row():
    raw = {"id": 2, "name": "Clients", "totalBlacklisted": 0, "totalSubscribers": 10, "uniqueSubscribers": 9}

    assert brevo_folder_to_row(raw).to_record() == raw


def test_folder_without_name_is_rejected():
    with pytest.raises(BrevoAPIException) as exc_info:
        brevo_folder_to_row({"id": 2})

    assert exc_info.value.details["resource"] == "folder"
    assert exc_info.value.details["id"] == 2


def test_template_row_flattens_sender():
    raw = {
        "id": 8,
        "name": "Welcome",
        "subject": "Hello {{contact.FIRSTNAME}}",
        "isActive": True,
        "testSent": False,
        "sender": {"name": "Acme", "email": "news@acme.test", "id": 1},
        "replyTo": "support@acme.test",
        "toField": "",
        "tag": "onboarding",
        "htmlContent": "<p>Hi</p>",
        "createdAt": "2024-01-01T00:00:00.000Z",
        "modifiedAt": "2024-01-02T00:00:00.000Z",
        "doiTemplate": False,
    }

    row = brevo_template_to_row(raw).to_record()

    assert row["senderName"] == "Acme"
    assert row["senderEmail"] == "news@acme.test"
    assert row["isActive"] is True
    assert row["doiTemplate"] is False
    assert row["htmlContent"] == "<p>Hi</p>"
    assert "sender" not in row


def test_template_row_without_sender():
    row = brevo_template_to_row({"id": 8, "name": "Welcome"}).to_record()

    assert row["senderName"] is None
    assert row["senderEmail"] is None


# ---------------------------------------------------------------------------
# Tests: AddContactToList result
# ---------------------------------------------------------------------------

def test_add_result_success():
    outcome = UpsertOutcome.created_with("new@x.com", 77)

    result = upsert_outcome_to_add_result(outcome, added=True).to_record()

    assert result == {
        "success": True,
        "email": "new@x.com",
        "contactId": 77,
        "contactCreated": True,
        "addedToList": True,
        "error": None,
    }


def test_add_result_add_failed_keeps_contact():
    outcome = UpsertOutcome.found("jane@example.com", 12)

    result = upsert_outcome_to_add_result(outcome, added=False, error="Failed to add contact to list: 400")

    assert result.success is False
    assert result.contact_id == 12
    assert result.contact_created is False
    assert result.added_to_list is False
    assert result.error == "Failed to add contact to list: 400"


def test_add_result_upsert_failed():
    outcome = UpsertOutcome.failed("jane@example.com", "Failed to create contact: 400")

    result = upsert_outcome_to_add_result(outcome)

    assert result.success is False
    assert result.contact_id is None
    assert result.contact_created is False
    assert result.error == "Failed to create contact: 400"


def test_add_result_missing_id():
    result = upsert_outcome_to_add_result(UpsertOutcome.missing_id("jane@example.com"))

    assert result.success is False
    assert result.contact_created is True
    assert result.contact_id is None
    assert result.error == "Contact was created but no ID was returned"


# ---------------------------------------------------------------------------
# Tests: campaign payload
# ---------------------------------------------------------------------------

def test_build_email_campaign_payload():
    payload = build_email_campaign_payload(
        sender_name="Acme",
        sender_email="news@acme.test",
        campaign_name="Spring sale",
        template_id=8,
        scheduled_at="2024-05-01T06:30:00.000Z",
        subject="Spring is here",
        list_ids=(3, 4),
    )

    assert payload == {
        "sender": {"name": "Acme", "email": "news@acme.test"},
        "name": "Spring sale",
        "templateId": 8,
        "scheduledAt": "2024-05-01T06:30:00.000Z",
        "subject": "Spring is here",
        "toField": CAMPAIGN_TO_FIELD,
        "recipients": {"listIds": [3, 4]},
    }
    assert CAMPAIGN_TO_FIELD == "{{contact.FIRSTNAME}} {{contact.LASTNAME}}"
