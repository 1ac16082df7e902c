# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_aem_client

import re
from dataclasses import replace
from typing import Any, Callable, List, Optional
from xml.etree.ElementTree import Element

from coreason_aem_client.client import Client
from coreason_aem_client.convergence import converge
from coreason_aem_client.domain.package import PackageIdentity
from coreason_aem_client.domain.response import Result, ResultData
from coreason_aem_client.domain.retry import RetryOptions, RetryPolicy
from coreason_aem_client.exceptions import UnexpectedResponseError
from coreason_aem_client.operations import OperationKind
from coreason_aem_client.resources.path import Path
from coreason_aem_client.utils.logger import logger

# Forms of <lastUnpackedBy> meaning the package was never installed
_NOT_UNPACKED = ("", "null")


def _to_int(text: str) -> int:
    """Leading integer of text, 0 when there is none."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class Package:
    """
    API calls related to managing an AEM package.
    """

    def __init__(
        self,
        client: Client,
        group_name: str,
        package_name: str,
        package_version: str,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.client = client
        self.identity = PackageIdentity(
            group_name=group_name,
            package_name=package_name,
            package_version=package_version,
        )
        self.sleep = sleep

    def _call(self, kind: OperationKind, **extra: Any) -> Result:
        return self.client.call(kind, {**self.identity.call_params(), **extra})

    # ----------------------------
    # Lifecycle calls
    # ----------------------------
    def create(self) -> Result:
        return self._call(OperationKind.PACKAGE_CREATE)

    def update(self, filter: str) -> Result:
        """
        Updates the package filter.

        Args:
            filter: Filter JSON string, e.g. [{"root": "/apps/geometrixx", "rules": []}]
        """
        return self._call(OperationKind.PACKAGE_UPDATE, filter=filter)

    def delete(self) -> Result:
        return self._call(OperationKind.PACKAGE_DELETE)

    def build(self) -> Result:
        return self._call(OperationKind.PACKAGE_BUILD)

    def install(self, recursive: bool = True) -> Result:
        """Installs the package without waiting for AEM to report it installed."""
        return self._call(OperationKind.PACKAGE_INSTALL, recursive=recursive)

    def uninstall(self) -> Result:
        return self._call(OperationKind.PACKAGE_UNINSTALL)

    def replicate(self) -> Result:
        return self._call(OperationKind.PACKAGE_REPLICATE)

    def download(self, file_path: str) -> Result:
        return self._call(OperationKind.PACKAGE_DOWNLOAD, file_path=file_path)

    def upload(self, file_path: str, force: bool = True) -> Result:
        """
        Uploads the package without waiting for AEM to report it uploaded.

        Args:
            file_path: Directory containing the package file.
            force: Overwrite an existing package with the same group, name and version.
        """
        return self._call(OperationKind.PACKAGE_UPLOAD, file_path=file_path, force=force)

    def get_filter(self) -> Result:
        """Result data is the list of filter root paths."""
        return self._call(OperationKind.PACKAGE_GET_FILTER)

    def activate_filter(self, ignore_deactivated: bool, modified_only: bool) -> Result:
        """
        Activates every path of the package filter.

        Every path is attempted even if an earlier activation failed.
        Result data is [filter result, activation result per path...].
        """
        filter_result = self.get_filter()
        results: List[Result] = [filter_result]

        for filter_path in filter_result.data or []:
            path = Path(self.client, filter_path)
            try:
                results.append(path.activate(ignore_deactivated, modified_only))
            except UnexpectedResponseError as e:
                logger.warning(f"Activation of {filter_path} failed: {e.message}")
                results.append(e.result or Result(message=e.message, success=False))

        activated = sum(1 for r in results[1:] if r.is_success())
        return Result(
            message=f"Activated {activated} of {len(results) - 1} filter path(s) of package {self.identity.label}",
            data=results,
            success=all(r.is_success() for r in results),
        )

    def list_all(self) -> Result:
        """Result data is the <packages> element of the package manager listing."""
        return self._call(OperationKind.PACKAGE_LIST_ALL)

    # ----------------------------
    # Status queries
    # ----------------------------
    def _matching_packages(self, packages: Optional[Element], with_version: bool) -> List[Element]:
        if packages is None:
            return []
        matches = []
        for package in packages.findall("package"):
            if (package.findtext("group") or "") != self.identity.group_name:
                continue
            if (package.findtext("name") or "") != self.identity.package_name:
                continue
            if with_version and (package.findtext("version") or "") != self.identity.package_version:
                continue
            matches.append(package)
        return matches

    def _listing_failed(self, listing: Result, data: ResultData) -> Result:
        """A failed listing says nothing about the package, so the query fails too."""
        logger.warning(f"Package {self.identity.label} state unknown: {listing.message}")
        return Result(message=listing.message, response=listing.response, data=data, success=False)

    def get_versions(self) -> Result:
        """Result data is the list of versions in listing order, empty if there is none."""
        listing = self.list_all()
        if not listing.is_success():
            return self._listing_failed(listing, [])

        versions = []
        for package in self._matching_packages(listing.data, with_version=False):
            version = package.findtext("version") or ""
            if version:
                versions.append(version)

        return Result(message=f"Package {self.identity.label} has {len(versions)} version(s)", data=versions)

    def exists(self) -> Result:
        listing = self.list_all()
        if not listing.is_success():
            return self._listing_failed(listing, False)

        if self._matching_packages(listing.data, with_version=True):
            return Result(message=f"Package {self.identity.label} exists", data=True)
        return Result(message=f"Package {self.identity.label} does not exist", data=False)

    def is_uploaded(self) -> Result:
        result = self.exists()
        if not result.is_success():
            return result
        if result.data is True:
            return replace(result, message=f"Package {self.identity.label} is uploaded")
        return replace(result, message=f"Package {self.identity.label} is not uploaded")

    def is_installed(self) -> Result:
        listing = self.list_all()
        if not listing.is_success():
            return self._listing_failed(listing, False)

        matches = self._matching_packages(listing.data, with_version=True)
        last_unpacked_by = matches[0].find("lastUnpackedBy") if matches else None

        if last_unpacked_by is not None and (last_unpacked_by.text or "") not in _NOT_UNPACKED:
            return Result(message=f"Package {self.identity.label} is installed", data=True)
        return Result(message=f"Package {self.identity.label} is not installed", data=False)

    def is_empty(self) -> Result:
        listing = self.list_all()
        if not listing.is_success():
            return self._listing_failed(listing, False)

        matches = self._matching_packages(listing.data, with_version=True)
        size = _to_int(matches[0].findtext("size") or "") if matches else 0

        if size == 0:
            return Result(message=f"Package {self.identity.label} is empty", data=True)
        return Result(message=f"Package {self.identity.label} is not empty", data=False)

    def is_built(self) -> Result:
        """A package is built when it exists and is not empty."""
        exists = self.exists()
        if not exists.is_success():
            return exists
        if exists.data is not True:
            return Result(message=f"Package {self.identity.label} is not built because it does not exist", data=False)

        empty = self.is_empty()
        if not empty.is_success():
            return empty
        if empty.data is not False:
            return Result(message=f"Package {self.identity.label} is not built because it is empty", data=False)
        return Result(message=f"Package {self.identity.label} is built", data=True)

    # ----------------------------
    # Convergent lifecycle calls
    # ----------------------------
    def _retry_policy(self, retries: RetryOptions) -> RetryPolicy:
        return RetryPolicy.from_options(retries, defaults=self.client.settings.default_retry_policy())

    def _wait_until(self, label: str, result: Result, retries: RetryOptions, check: Callable[[], Result]) -> Result:
        policy = self._retry_policy(retries)
        logger.info(f"Waiting for package {self.identity.label}: {label} (max {policy.max_tries} checks)")
        converge(policy, check, label=label, event_emitter=self.client.event_emitter, sleep=self.sleep)
        return result

    def upload_wait_until_ready(self, file_path: str, force: bool = True, retries: RetryOptions = None) -> Result:
        """
        Uploads the package and waits until AEM reports it uploaded.

        Args:
            file_path: Directory containing the package file.
            force: Overwrite an existing package with the same group, name and version.
            retries: RetryPolicy or mapping of max_tries, base_sleep_seconds, max_sleep_seconds.

        Returns:
            The upload Result.

        Raises:
            ConvergenceError: If the package never appears.
        """
        result = self.upload(file_path, force=force)
        return self._wait_until("Upload", result, retries, self.is_uploaded)

    def install_wait_until_ready(self, recursive: bool = True, retries: RetryOptions = None) -> Result:
        """Installs the package and waits until AEM reports it installed."""
        result = self.install(recursive=recursive)
        return self._wait_until("Install", result, retries, self.is_installed)

    def delete_wait_until_ready(self, retries: RetryOptions = None) -> Result:
        """Deletes the package and waits until AEM no longer lists it."""
        result = self.delete()
        return self._wait_until("Delete", result, retries, self._is_not_uploaded)

    def build_wait_until_ready(self, retries: RetryOptions = None) -> Result:
        """Builds the package and waits until it exists and is not empty."""
        result = self.build()
        return self._wait_until("Build", result, retries, self.is_built)

    def _is_not_uploaded(self) -> Result:
        result = self.is_uploaded()
        if not result.is_success():
            return result
        return replace(result, data=result.data is not True)

    def __repr__(self) -> str:
        return f"Package({self.identity.label!r})"
