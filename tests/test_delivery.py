"""Resend client and Slack alert, with requests.post mocked."""

from unittest.mock import Mock, patch

import requests

from conftest import make_settings

from payrelay.integrations.resend.client import EmailSendResult, send_email
from payrelay.services.notifications.slack import send_slack_message


def _response(status: int, text: str) -> Mock:
    return Mock(status_code=status, ok=200 <= status < 400, text=text)


class TestSendEmail:
    def _send(self, **overrides):
        kwargs = {
            "api_key": "re_test_key",
            "from_email": "Shop <hello@example.com>",
            "to_email": "buyer@example.com",
            "subject": "Your access links",
            "html": "<p>hi</p>",
        }
        kwargs.update(overrides)
        return send_email(**kwargs)

    def test_posts_bearer_authenticated_json(self):
        with patch("payrelay.integrations.resend.client.requests.post") as mock_post:
            mock_post.return_value = _response(200, '{"id":"email_1"}')
            result = self._send()

        assert result == EmailSendResult(ok=True, status=200, text='{"id":"email_1"}')
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.resend.com/emails"
        assert kwargs["headers"]["Authorization"] == "Bearer re_test_key"
        assert kwargs["json"] == {
            "from": "Shop <hello@example.com>",
            "to": ["buyer@example.com"],
            "subject": "Your access links",
            "html": "<p>hi</p>",
        }
        assert kwargs["timeout"] == 10

    def test_custom_url_and_timeout(self):
        with patch("payrelay.integrations.resend.client.requests.post") as mock_post:
            mock_post.return_value = _response(200, "{}")
            self._send(api_url="http://resend.local/emails", timeout=2)

        args, kwargs = mock_post.call_args
        assert args[0] == "http://resend.local/emails"
        assert kwargs["timeout"] == 2

    def test_non_success_returned_not_raised(self):
        with patch("payrelay.integrations.resend.client.requests.post") as mock_post:
            mock_post.return_value = _response(422, '{"message":"Invalid `from` field"}')
            result = self._send()

        assert result.ok is False
        assert result.status == 422
        assert "Invalid `from` field" in result.text

    def test_transport_error_returned_as_status_zero(self):
        with patch("payrelay.integrations.resend.client.requests.post") as mock_post:
            mock_post.side_effect = requests.ConnectionError("connection refused")
            result = self._send()

        assert result.ok is False
        assert result.status == 0
        assert "connection refused" in result.text


class TestSendSlackMessage:
    def test_skipped_without_webhook_url(self):
        with patch("payrelay.services.notifications.slack.requests.post") as mock_post:
            assert send_slack_message("hello", settings=make_settings()) is False
        mock_post.assert_not_called()

    def test_posts_text(self):
        config = make_settings(slack_webhook_url="https://hooks.slack.test/T000/B000")
        with patch("payrelay.services.notifications.slack.requests.post") as mock_post:
            mock_post.return_value = _response(200, "ok")
            assert send_slack_message("hello", settings=config) is True

        args, kwargs = mock_post.call_args
        assert args[0] == "https://hooks.slack.test/T000/B000"
        assert kwargs["json"] == {"text": "hello"}

    def test_transport_error_does_not_raise(self):
        config = make_settings(slack_webhook_url="https://hooks.slack.test/T000/B000")
        with patch("payrelay.services.notifications.slack.requests.post") as mock_post:
            mock_post.side_effect = requests.Timeout("slow")
            assert send_slack_message("hello", settings=config) is False

    def test_rejected_response(self):
        config = make_settings(slack_webhook_url="https://hooks.slack.test/T000/B000")
        with patch("payrelay.services.notifications.slack.requests.post") as mock_post:
            mock_post.return_value = _response(404, "no_service")
            assert send_slack_message("hello", settings=config) is False
