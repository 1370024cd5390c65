"""Generic async polling service abstraction.

Provides a reusable base class for services that follow the
poll → process pattern on a fixed interval.
"""

import asyncio
import signal
from abc import ABC, abstractmethod
from types import FrameType

from glof.logging import get_logger

logger = get_logger("lib.polling")


class PollingService[T](ABC):
    """Abstract base class for async polling services.

    Implements the common polling loop pattern with:
    - Configurable polling frequency
    - Graceful shutdown handling
    - Error recovery
    """

    def __init__(self, name: str, frequency_sec: float) -> None:
        """Initialize the polling service.

        Args:
            name: Service name for logging.
            frequency_sec: Polling frequency in seconds.
        """
        self.name = name
        self.frequency_sec = frequency_sec
        self._shutdown_requested = False
        self._logger = get_logger(f"polling.{name}")

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize any resources needed before polling starts."""

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up resources before exit."""

    @abstractmethod
    async def poll(self) -> T | None:
        """Poll for new data.

        Returns:
            The polled data, or None if there is nothing to process.
        """

    @abstractmethod
    async def process(self, data: T) -> None:
        """Process polled data."""

    def on_poll_error(self, error: Exception) -> None:
        """Handle an error that occurred during polling.

        Override to customize error handling. Default logs the error.
        """
        self._logger.error("%s poll error: %s", self.name, error)

    def request_shutdown(self) -> None:
        """Ask the loop to stop after the current cycle."""
        self._shutdown_requested = True

    def _handle_shutdown(self, signum: int, frame: FrameType | None) -> None:
        """Handle shutdown signals gracefully."""
        signal_name = signal.Signals(signum).name
        self._logger.info("Received %s, initiating graceful shutdown...", signal_name)
        self.request_shutdown()

    def _setup_signal_handlers(self) -> None:
        """Register signal handlers for graceful shutdown."""
        signal.signal(signal.SIGTERM, self._handle_shutdown)
        signal.signal(signal.SIGINT, self._handle_shutdown)

    async def poll_cycle(self) -> None:
        """Execute a single poll → process cycle."""
        data = await self.poll()
        if data is not None:
            await self.process(data)

    async def run_loop(self) -> None:
        """Run the async polling loop with precise timing."""
        await self.initialize()
        self._logger.info("%s polling service started", self.name)

        loop = asyncio.get_running_loop()

        try:
            while not self._shutdown_requested:
                cycle_start = loop.time()

                try:
                    await self.poll_cycle()
                except Exception as e:
                    self.on_poll_error(e)

                # Sleep only the remaining time to maintain consistent intervals
                elapsed = loop.time() - cycle_start
                sleep_time = max(0, self.frequency_sec - elapsed)
                if sleep_time > 0 and not self._shutdown_requested:
                    await asyncio.sleep(sleep_time)
        finally:
            self._logger.info("Cleaning up resources...")
            await self.cleanup()
            self._logger.info("%s shutdown complete", self.name)

    def run(self) -> None:
        """Run the polling loop.

        This is the main entry point. It:
        1. Sets up signal handlers for graceful shutdown
        2. Calls initialize()
        3. Enters the polling loop (poll → process)
        4. Calls cleanup() on exit
        """
        self._setup_signal_handlers()
        asyncio.run(self.run_loop())
