"""
Action: CreateEmailCampaign

Creates a Brevo email campaign from the mandatory fields only.
The scheduled date is converted to UTC before submission; an unreadable
date is rejected before any request is made.

Event:
    {"api_key", "senderName", "senderEmail", "campaignName", "templateId",
     "scheduledAt", "subject", "listReceiverIds", "timezone"?}
"""

from common.base_handler import BaseActionHandler
from common.mappers import build_email_campaign_payload
from common.models import CampaignRecord
from common.validators import (
    parse_datetime,
    require_string,
    resolve_timezone,
    to_brevo_datetime,
    validate_email,
    validate_id,
    validate_id_list,
)


class CreateEmailCampaignHandler(BaseActionHandler):
    """Creates one email campaign. Submission failures are not retried."""

    def _execute(self, params: dict, context) -> dict:
        tz = resolve_timezone(params.get("timezone"))
        scheduled_at = parse_datetime(params.get("scheduledAt"), tz)
        formatted_date = to_brevo_datetime(scheduled_at)

        self.logger.info("Original date in document timezone: %s", scheduled_at.astimezone(tz).isoformat())
        self.logger.info("Formatted for API (UTC): %s", formatted_date)

        payload = build_email_campaign_payload(
            sender_name=require_string(params.get("senderName"), "senderName"),
            sender_email=validate_email(params.get("senderEmail"), "senderEmail"),
            campaign_name=require_string(params.get("campaignName"), "campaignName"),
            template_id=validate_id(params.get("templateId"), "templateId"),
            scheduled_at=formatted_date,
            subject=require_string(params.get("subject"), "subject", max_length=None),
            list_ids=validate_id_list(params.get("listReceiverIds"), "listReceiverIds"),
        )

        self.logger.info("Creating email campaign %r", payload["name"])
        response = self.brevo_client.create_email_campaign(payload)

        record = CampaignRecord(id=response.get("id") or 0)
        return self._success_response(record.to_record())


def lambda_handler(event: dict, context) -> dict:
    """Entry point for CreateEmailCampaign."""
    return CreateEmailCampaignHandler().handle(event, context)
