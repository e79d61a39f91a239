"""Transporte de email."""

from app.infra.email.sendgrid_sender import SendGridEmailSender

__all__ = ["SendGridEmailSender"]
