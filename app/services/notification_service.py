"""
Notification Service - contact-form emails over SMTP.

Mail only goes out when the app runs in production with SMTP
credentials configured; otherwise the message is logged and skipped.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Optional

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def send_contact_confirmation(self, contact: dict) -> bool:
        """Tell the sender their inquiry was received."""
        subject = f"JobHub: We've received your message - {contact['subject']}"
        html = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
          <h2 style="color: #3b82f6;">Thank You for Contacting JobHub!</h2>
          <p>Hello {escape(contact['name'])},</p>
          <p>We've received your message and our team will get back to you within 24-48 hours.</p>
          <div style="background-color: #f8fafc; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #475569;">Your Message Details:</h3>
            <p><strong>Subject:</strong> {escape(contact['subject'])}</p>
            <p><strong>Category:</strong> {escape(contact['category'])}</p>
            <p><strong>Message:</strong></p>
            <p style="background-color: white; padding: 15px; border-radius: 5px;">{escape(contact['message'])}</p>
          </div>
          <p>If you need immediate assistance, please check our <a href="{self.settings.support_site_url}">FAQ page</a>.</p>
          <p>Best regards,<br>The JobHub Team</p>
        </div>
        """
        return self._send(contact["email"], subject, html)

    def send_contact_response(self, contact: dict, response_message: str) -> bool:
        """Deliver a support reply to the sender."""
        subject = f"JobHub: Response to your inquiry - {contact['subject']}"
        html = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
          <h2 style="color: #3b82f6;">Response from JobHub Support Team</h2>
          <p>Hello {escape(contact['name'])},</p>
          <p>Thank you for contacting JobHub. Here's our response to your inquiry:</p>
          <div style="background-color: #f0f9ff; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #0369a1;">Our Response:</h3>
            <p style="background-color: white; padding: 15px; border-radius: 5px;">{escape(response_message)}</p>
          </div>
          <p>If you have any further questions, please don't hesitate to contact us again.</p>
          <p>Best regards,<br>The JobHub Support Team</p>
        </div>
        """
        return self._send(contact["email"], subject, html)

    def _send(self, to_email: str, subject: str, html_body: str) -> bool:
        if not self.settings.email_enabled:
            logger.info("Email disabled, skipping '%s' to %s", subject, to_email)
            return False

        msg = MIMEMultipart("alternative")
        msg["From"] = self.settings.email_from or self.settings.smtp_user
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.attach(MIMEText(html_body, "html", "utf-8"))

        with smtplib.SMTP(self.settings.smtp_server, self.settings.smtp_port, timeout=10) as server:
            server.starttls()
            server.login(self.settings.smtp_user, self.settings.smtp_password)
            server.sendmail(msg["From"], [to_email], msg.as_string())

        logger.info("Email '%s' sent to %s", subject, to_email)
        return True
