"""Mail transports."""

from .abstract_mailer import AbstractMailer, MailDeliveryError
from .smtp_mailer import SmtpMailer

__all__ = ["AbstractMailer", "MailDeliveryError", "SmtpMailer"]
