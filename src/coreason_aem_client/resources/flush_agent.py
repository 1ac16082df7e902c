from typing import Any, Dict

from coreason_aem_client.client import Client
from coreason_aem_client.domain.response import Result
from coreason_aem_client.operations import OperationKind


class FlushAgent:
    """
    API calls related to a dispatcher flush agent.
    """

    def __init__(self, client: Client, run_mode: str, name: str) -> None:
        self.client = client
        self.run_mode = run_mode
        self.name = name

    def _params(self, **extra: Any) -> Dict[str, Any]:
        return {"run_mode": self.run_mode, "name": self.name, **extra}

    def create_update(
        self,
        title: str,
        description: str,
        dest_base_url: str,
        log_level: str = "info",
        retry_delay: int = 60000,
    ) -> Result:
        """
        Creates the flush agent, or updates it if it already exists.

        Args:
            title: Agent title.
            description: Agent description.
            dest_base_url: Base URL of the dispatcher, e.g. http://somehost:8080
            log_level: Agent log level.
            retry_delay: Delay between replication retries, in milliseconds.
        """
        return self.client.call(
            OperationKind.FLUSH_AGENT_CREATE_UPDATE,
            self._params(
                title=title,
                description=description,
                dest_base_url=dest_base_url,
                log_level=log_level,
                retry_delay=retry_delay,
            ),
        )

    def delete(self) -> Result:
        """Deleting an agent that does not exist also succeeds."""
        return self.client.call(OperationKind.FLUSH_AGENT_DELETE, self._params())

    def exists(self) -> Result:
        """Result data is True if the agent exists."""
        return self.client.call(OperationKind.FLUSH_AGENT_EXISTS, self._params())
