from coreason_aem_client.client import Client
from coreason_aem_client.domain.response import Result
from coreason_aem_client.operations import OperationKind


class Path:
    """
    API calls related to a repository path.
    """

    def __init__(self, client: Client, name: str) -> None:
        self.client = client
        self.name = name

    def activate(self, ignore_deactivated: bool, modified_only: bool) -> Result:
        """
        Activates the path and everything beneath it.

        Args:
            ignore_deactivated: Skip deactivated items under the path.
            modified_only: Only activate modified items under the path.
        """
        return self.client.call(
            OperationKind.PATH_ACTIVATE,
            {"name": self.name, "ignore_deactivated": ignore_deactivated, "modified_only": modified_only},
        )
