from coreason_aem_client.client import Client
from coreason_aem_client.domain.response import Result
from coreason_aem_client.operations import OperationKind


class Repository:
    """API calls related to the AEM repository."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def block_writes(self) -> Result:
        return self.client.call(OperationKind.REPOSITORY_BLOCK_WRITES)

    def unblock_writes(self) -> Result:
        return self.client.call(OperationKind.REPOSITORY_UNBLOCK_WRITES)
