"""
Tests for the CreateList action.
"""

import json

from create_list.handler import lambda_handler
from common.exceptions import BrevoAPIException


def test_creates_list_in_folder(mock_brevo_client, api_key):
    mock_brevo_client.create_list.return_value = {"id": 5}

    response = lambda_handler({"api_key": api_key, "name": "Newsletter", "folderId": 2.0}, None)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {"id": 5, "name": "Newsletter"}
    mock_brevo_client.create_list.assert_called_once_with("Newsletter", 2)


def test_api_gateway_style_body(mock_brevo_client, api_key):
    mock_brevo_client.create_list.return_value = {"id": 6}
    event = {"body": json.dumps({"api_key": api_key, "name": "VIP", "folderId": 1})}

    response = lambda_handler(event, None)

    assert json.loads(response["body"]) == {"id": 6, "name": "VIP"}
    mock_brevo_client.mock_cls.assert_called_once_with(api_key=api_key)


def test_missing_folder_rejected(mock_brevo_client, api_key):
    response = lambda_handler({"api_key": api_key, "name": "Newsletter"}, None)

    assert response["statusCode"] == 400
    assert json.loads(response["body"])["error"] == "folderId is required"
    mock_brevo_client.create_list.assert_not_called()


def test_api_failure(mock_brevo_client, api_key):
    mock_brevo_client.create_list.side_effect = BrevoAPIException("Folder not found")

    response = lambda_handler({"api_key": api_key, "name": "Newsletter", "folderId": 99}, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"])["error"] == "Folder not found"
