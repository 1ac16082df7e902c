# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_aem_client

from typing import Dict, Optional

from rich.console import Console
from rich.live import Live
from rich.table import Table

from coreason_aem_client.events import ClientEvent, EventType


class RichConsoleEmitter:
    """
    Renders convergence checks to a rich terminal UI.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self.checks: Dict[str, Dict[str, str]] = {}  # check label -> {status, attempt, message}
        self.live: Optional[Live] = None

    def start(self) -> None:
        self.live = Live(self.generate_table(), console=self.console, refresh_per_second=4)
        self.live.start()

    def stop(self) -> None:
        if self.live:
            self.live.stop()

    def generate_table(self) -> Table:
        table = Table(title="AEM Convergence Status", expand=True)
        table.add_column("Check", style="cyan")
        table.add_column("Attempt", justify="right")
        table.add_column("Status", justify="center")
        table.add_column("Details", style="dim")

        for name, data in self.checks.items():
            status = data.get("status", "waiting")

            icon = "⏳"
            style = "yellow"
            if status == "converged":
                icon = "✅"
                style = "green"
            elif status == "exhausted":
                icon = "❌"
                style = "red"

            table.add_row(name, data.get("attempt", ""), icon, data.get("message", ""), style=style)

        return table

    def emit(self, event: ClientEvent) -> None:
        if not self.live:
            return

        check_key = event.check
        if not check_key:
            return

        if event.type == EventType.CHECK_ATTEMPT:
            self.checks[check_key] = {
                "status": "waiting",
                "attempt": str(event.payload.get("attempt", "")),
                "message": event.message,
            }
        elif event.type == EventType.CONVERGED:
            self.checks[check_key] = {
                "status": "converged",
                "attempt": str(event.payload.get("attempts", "")),
                "message": event.message,
            }
        elif event.type == EventType.EXHAUSTED:
            self.checks[check_key] = {
                "status": "exhausted",
                "attempt": str(event.payload.get("attempts", "")),
                "message": event.message,
            }
        else:
            return

        self.live.update(self.generate_table())
