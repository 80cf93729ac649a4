"""Outbound e-mail over SMTP."""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from qaforum.config import EmailConfig
from qaforum.errors import EmailDeliveryError

logger = logging.getLogger(__name__)


class EmailSender:
    """Sends HTML e-mails through the configured SMTP server.
    
    With delivery disabled (the development default) messages are only
    logged.
    """
    
    def __init__(self, config: EmailConfig):
        self.config = config
    
    def send_email(self, to_email: str, subject: str, html_content: str) -> None:
        """Send one HTML e-mail.
        
        Raises:
            EmailDeliveryError: If credentials are missing or SMTP fails
        """
        if not self.config.enabled:
            logger.info(f"Email delivery disabled; would send '{subject}' to {to_email}")
            return
        
        if not self.config.username or not self.config.password:
            logger.error("SMTP credentials not configured")
            raise EmailDeliveryError("Email couldn't be sent")
        
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.config.from_address or self.config.username
        msg["To"] = to_email
        msg.attach(MIMEText(html_content, "html"))
        
        try:
            with smtplib.SMTP(self.config.host, self.config.port) as server:
                if self.config.use_tls:
                    server.starttls()
                server.login(self.config.username, self.config.password)
                server.sendmail(msg["From"], [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to_email}: {type(e).__name__}: {str(e)}")
            raise EmailDeliveryError("Email couldn't be sent") from e
        
        logger.info(f"Email sent to {to_email}: {subject}")
