from coreason_aem_client.client import Client
from coreason_aem_client.domain.response import Result
from coreason_aem_client.operations import OperationKind


class User:
    """
    API calls related to an AEM user.
    """

    def __init__(self, client: Client, path: str, name: str) -> None:
        self.client = client
        self.path = path
        self.name = name

    def create(self, password: str) -> Result:
        """
        Creates the user.
        Result data is the authorizable ID AEM assigned to it.
        """
        return self.client.call(
            OperationKind.USER_CREATE,
            {"path": self.path, "name": self.name, "password": password},
        )

    def change_password(self, old_password: str, new_password: str) -> Result:
        """
        Raises:
            ResponseParseError: If the user does not exist.
            OperationError: If AEM rejected the change.
        """
        return self.client.call(
            OperationKind.USER_CHANGE_PASSWORD,
            {"path": self.path, "name": self.name, "old_password": old_password, "new_password": new_password},
        )
