import unittest
from unittest.mock import patch

from models.extraction import ExtractionResult
from tools.notifier import build_status_message, send_email_notification, _build_html_email


class TestStatusMessage(unittest.TestCase):
    def test_full_extraction(self):
        status, message = build_status_message(
            ExtractionResult(organization="Acme", role_title="Engineer", location="Remote")
        )

        self.assertEqual(status, "success")
        self.assertEqual(
            message,
            "Successfully extracted job details! Company: Acme, Role: Engineer, Location: Remote",
        )

    def test_full_extraction_without_location(self):
        _, message = build_status_message(ExtractionResult(organization="Acme", role_title="Engineer"))

        self.assertNotIn("Location", message)

    def test_role_only(self):
        status, message = build_status_message(
            ExtractionResult(role_title="Software Engineer Ii", needs_manual_completion=True)
        )

        self.assertEqual(status, "success")
        self.assertIn("Software Engineer Ii", message)
        self.assertIn("company", message)

    def test_placeholder_role_is_info(self):
        status, _ = build_status_message(
            ExtractionResult(role_title="Job from LinkedIn", needs_manual_completion=True)
        )

        self.assertEqual(status, "info")


class TestEmailNotification(unittest.TestCase):
    def setUp(self):
        self.results = [
            ExtractionResult(
                organization="Acme <Labs>",
                role_title="Engineer",
                posting_url="https://www.linkedin.com/jobs/view/1",
                source="fetch",
            )
        ]

    def test_html_escapes_values(self):
        html = _build_html_email(self.results)

        self.assertIn("Acme &lt;Labs&gt;", html)
        self.assertNotIn("Acme <Labs>", html)

    @patch("tools.notifier.smtplib.SMTP")
    def test_sends_over_starttls(self, mock_smtp):
        sent = send_email_notification(
            self.results,
            recipient="me@example.com",
            smtp_host="smtp.example.com",
            smtp_port=587,
            smtp_user="bot@example.com",
            smtp_password="secret",
        )

        self.assertTrue(sent)
        server = mock_smtp.return_value.__enter__.return_value
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("bot@example.com", "secret")
        sender, recipients, _ = server.sendmail.call_args.args
        self.assertEqual(sender, "bot@example.com")
        self.assertEqual(recipients, ["me@example.com"])

    @patch("tools.notifier.smtplib.SMTP")
    def test_smtp_failure_returns_false(self, mock_smtp):
        mock_smtp.side_effect = OSError("connection refused")

        sent = send_email_notification(
            self.results, "me@example.com", "smtp.example.com", 587, "bot@example.com", "secret"
        )

        self.assertFalse(sent)

    def test_nothing_to_send(self):
        self.assertFalse(send_email_notification([], "me@example.com", "h", 587, "u", "p"))


if __name__ == "__main__":
    unittest.main()
