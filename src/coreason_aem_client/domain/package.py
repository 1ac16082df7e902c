from typing import Any, Dict

from pydantic import BaseModel, Field


class PackageIdentity(BaseModel):
    """
    Group, name and version of one package artifact on AEM.
    E.g. name 'somepackage' with version '1.2.3' maps to somepackage-1.2.3.zip.
    """

    group_name: str = Field(..., description="Package group, e.g. somepackagegroup")
    package_name: str = Field(..., description="Package name, e.g. somepackage")
    package_version: str = Field(..., description="Package version, e.g. 1.2.3")

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"{self.group_name}/{self.package_name}-{self.package_version}"

    def call_params(self) -> Dict[str, Any]:
        return self.model_dump()
