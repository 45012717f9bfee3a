"""Notification formatting and delivery."""

from ipoalert.core.notify.message import format_ipo, format_message
from ipoalert.core.notify.whatsapp import DeliveryResult, WhatsAppNotifier

__all__ = ["DeliveryResult", "WhatsAppNotifier", "format_ipo", "format_message"]
