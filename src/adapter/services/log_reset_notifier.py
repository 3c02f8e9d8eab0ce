import logging

from src.app.services.reset_notifier import IResetNotifier

logger = logging.getLogger(__name__)


class LoggingResetNotifier(IResetNotifier):
    """
    Stand-in for a mail sender.

    Records that a PIN was issued without writing the PIN itself to the log.
    """

    async def send_reset_pin(self, email: str, pin: str) -> None:
        logger.info(f"Password reset PIN issued for {email}")
