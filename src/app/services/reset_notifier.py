from abc import ABC, abstractmethod


class IResetNotifier(ABC):
    """Out-of-band delivery of password reset PINs"""

    @abstractmethod
    async def send_reset_pin(self, email: str, pin: str) -> None:
        pass
