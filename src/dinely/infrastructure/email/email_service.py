import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from dinely_config.settings import Settings

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Reset your Dinely password"

PASSWORD_RESET_TEXT = """Hello,

Someone asked to reset the password of your Dinely account.

Open the link below to choose a new password (valid for {valid_hours} hour(s)):
{reset_link}

If this wasn't you, ignore this email and your password stays the same.

-- Dinely
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #faf7f2; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #1f2937; margin-top: 0;">Reset your password</h2>
        <p style="color: #374151; line-height: 1.6;">Someone asked to reset the password of your Dinely account.</p>
        <p style="color: #374151; line-height: 1.6;">The link below is valid for {valid_hours} hour(s).</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{reset_link}" style="display: inline-block; padding: 14px 28px; background-color: #b45309; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Choose a new password</a>
        </p>
        <p style="word-break: break-all; color: #b45309; font-size: 14px;">{reset_link}</p>
        <p style="color: #9ca3af; font-size: 13px; margin-top: 40px;">If this wasn't you, ignore this email and your password stays the same.</p>
    </div>
</body>
</html>
"""


class EmailService:
    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        server.starttls(context=ssl.create_default_context())
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise

    def send_password_reset_email(self, to_email: str, reset_link: str) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping password reset email to %s (link: %s)",
                to_email,
                reset_link,
            )
            return

        valid_hours = self._settings.jwt_password_reset_expire_hours
        message = self._create_message(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(
                reset_link=reset_link,
                valid_hours=valid_hours,
            ),
            html_body=PASSWORD_RESET_HTML.format(
                reset_link=reset_link,
                valid_hours=valid_hours,
            ),
        )

        self._send_email(to_email, message)
