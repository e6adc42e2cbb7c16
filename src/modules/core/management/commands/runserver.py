"""``runserver`` bound to the configured ``PORT`` with a startup banner."""

from __future__ import annotations

import structlog
from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

logger = structlog.get_logger(__name__)


class Command(RunserverCommand):
    default_port = str(settings.PORT)

    def inner_run(self, *args, **options):
        host = f"[{self.addr}]" if self._raw_ipv6 else self.addr
        server_url = f"{self.protocol}://{host}:{self.port}"
        logger.info(
            "server.starting",
            port=self.port,
            server_url=server_url,
            api_base_url=f"{server_url}/api/products",
            environment=settings.APP_ENV,
        )
        super().inner_run(*args, **options)
