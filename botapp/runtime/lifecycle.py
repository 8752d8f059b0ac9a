"""Lifecycle orchestration for the Telegram bot runtime."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from botapp.bootstrap import BotDependencies
from botapp.handlers.state import session_from_user_data
from botapp.i18n import get_user_language
from botapp.notifications import deliver_invitation_notices
from monitoring.invitation_poller import PollSnapshot


class LifecycleManager:
    """Manage startup, shutdown, and the invitation polling task for the bot runtime."""

    def __init__(
        self,
        dependencies: BotDependencies,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.dependencies = dependencies
        self.logger = logger or logging.getLogger('LifecycleManager')
        self.application = None
        self.poll_task: Optional[asyncio.Task] = None

    async def post_init(self, application) -> None:
        """Start background work once the Telegram application is ready."""

        self.application = application
        interval = self.dependencies.config.notifications.invitation_poll_interval
        if interval > 0:
            self.poll_task = asyncio.create_task(self._invitation_loop(interval))
            self.logger.info("Invitation polling started (%s-second intervals)", interval)
        else:
            self.logger.info("Invitation polling disabled")

        self.logger.info("Bot started successfully - awaiting messages...")

    async def post_stop(self, application) -> None:
        """Tear down background tasks, pending toasts and the HTTP client."""

        self.logger.info("🔴 Starting bot shutdown sequence...")

        if self.poll_task:
            self.poll_task.cancel()
            try:
                await self.poll_task
            except asyncio.CancelledError:
                pass
            self.logger.info("✅ Invitation polling stopped")
            self.poll_task = None

        await self.dependencies.toast.shutdown()

        try:
            await self.dependencies.api_client.aclose()
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("❌ Error closing API client: %s", exc)

        self.logger.info("✅ Bot shutdown sequence completed")
        self.application = None

    async def graceful_shutdown(self) -> None:
        """Request a graceful shutdown of the Telegram application."""

        await asyncio.sleep(1)

        if not self.application:
            self.logger.warning("No application instance available for shutdown request")
            return

        try:
            self.logger.info("Initiating graceful shutdown...")
            self.application.stop_running()
            self.logger.info("Application stop requested")
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("Error during graceful shutdown: %s", exc)

    async def poll_invitations_once(self) -> int:
        """Run one poll and push notices for new invitations. Returns the number sent."""

        snapshot = await self.dependencies.invitation_poller.poll()
        return await self._deliver(snapshot)

    async def _deliver(self, snapshot: PollSnapshot) -> int:
        application = self.application
        if application is None:
            return 0

        sent = 0
        for user_id, results in snapshot.results.items():
            user_data = application.user_data.get(user_id)
            if user_data is None or not isinstance(results, dict) or 'error' in results:
                continue
            # Keep the main-menu badge in step with the server
            session_from_user_data(user_data).social.invitations = list(results.values())

        for user_id, change in snapshot.changes.items():
            if change.error:
                self.logger.warning("Invitation poll failed for user %s: %s", user_id, change.error)
                continue
            if not change.added:
                continue
            language = get_user_language(application.user_data.get(user_id))
            try:
                sent += await deliver_invitation_notices(
                    application.bot,
                    user_id,
                    change.added,
                    logger=self.logger,
                    language=language,
                )
            except Exception as exc:  # pragma: no cover - defensive guard
                self.logger.error("Failed to deliver invitation notice to %s: %s", user_id, exc)
        return sent

    async def _invitation_loop(self, interval: int) -> None:
        """Periodic invitation polling loop."""

        try:
            while True:
                try:
                    await self.poll_invitations_once()
                except asyncio.CancelledError:
                    raise
                except Exception as exc:  # pragma: no cover - defensive guard
                    self.logger.error("Error in invitation poll: %s", exc, exc_info=True)
                await asyncio.sleep(interval)
        except asyncio.CancelledError:
            self.logger.info("Invitation polling task cancelled")
            raise


__all__ = ['LifecycleManager']
