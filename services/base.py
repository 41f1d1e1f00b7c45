"""
Base service class providing common functionality for all services.
"""

from abc import ABC, abstractmethod

from config.config_loader import Settings
from utils.logging import get_logger


class BaseService(ABC):
    """
    Abstract base class for the hook-side services.

    Each service receives the resolved Settings at construction time; there is
    no shared global. Initialization runs once, synchronously, at startup.
    """

    def __init__(self, name: str, settings: Settings) -> None:
        self.name = name
        self.settings = settings
        self.logger = get_logger(f"services.{name}")
        self._initialized = False

    def initialize(self) -> None:
        """Initialize the service. Ensures single initialization."""
        if self._initialized:
            return

        self.logger.debug(f"Initializing {self.name} service")
        try:
            self._initialize_impl()
            self._initialized = True
        except Exception as e:
            self.logger.exception(
                "Failed to initialize %s service", self.name, exc_info=e
            )
            raise

    @abstractmethod
    def _initialize_impl(self) -> None:
        """Subclass-specific initialization logic."""
        pass
