from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from token_quantity.platform.ao.ao_config import AoConfig, load_ao_config
from token_quantity.utils.ao_tools import Tag

logger = logging.getLogger(__name__)

# Dry runs are not signed, so placeholder message id and owner are sent
DRY_RUN_ID = "0000000000000000000000000000000000000000001"
DRY_RUN_OWNER = "0000000000000000000000000000000000000000002"


class DryRunError(Exception):
    """Raised when a dry run cannot be evaluated by the compute unit."""

    def __init__(self, process_id: str, reason: str):
        self.process_id = process_id
        self.reason = reason
        super().__init__(f"Dry run on process '{process_id}' failed - {reason}")


class DryRunClient:
    """Sends read-only messages to ao processes through a compute unit.

    A dry run evaluates a message against the current process state without
    persisting anything, which is how token info and balances are read.
    """

    def __init__(self, config: AoConfig | None = None, session: requests.Session | None = None):
        """Initialize the client.

        Args:
            config: Compute unit settings. Loaded from the environment if None.
            session: HTTP session to use; a new `requests.Session` if None.
        """
        self._config = config if config is not None else load_ao_config()
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> AoConfig:
        return self._config

    def dry_run(self, process_id: str, tags: list[Tag], data: str = "") -> list[dict[str, Any]]:
        """Evaluate a message on $process_id and return the resulting messages.

        Args:
            process_id: Target process id.
            tags: Message tags, e.g. `[{"name": "Action", "value": "Info"}]`.
            data: Message data.

        Returns:
            list[dict]: The `Messages` of the evaluation result (may be empty).

        Raises:
            DryRunError: On transport errors, non-2xx responses, invalid JSON or
                an evaluation error reported by the process.
        """
        url = f"{self._config.cu_url}/dry-run"
        body = {
            "Id": DRY_RUN_ID,
            "Owner": DRY_RUN_OWNER,
            "Target": process_id,
            "Tags": [dict(tag) for tag in tags],
            "Data": data,
        }

        logger.debug(f"Dry run on process '{process_id}' with tags {body['Tags']}")
        try:
            response = self._session.post(
                url,
                params={"process-id": process_id},
                json=body,
                timeout=(self._config.connect_timeout, self._config.read_timeout),
            )
        except requests.RequestException as e:
            logger.error(f"Dry run request to {url} for process '{process_id}' failed: {e}")
            raise DryRunError(process_id, f"request failed: {e}") from e

        # Raise: compute unit must accept the request
        if not 200 <= response.status_code < 300:
            logger.error(f"Dry run on process '{process_id}' returned HTTP {response.status_code}")
            raise DryRunError(process_id, f"HTTP {response.status_code}")

        try:
            result = response.json()
        except ValueError as e:
            raise DryRunError(process_id, "response is not valid JSON") from e

        # Raise: response must be a JSON object
        if not isinstance(result, Mapping):
            raise DryRunError(process_id, f"unexpected response type '{type(result).__name__}'")

        # Raise: evaluation errors are reported inside a successful response
        if result.get("Error"):
            raise DryRunError(process_id, f"process error: {result['Error']}")

        messages = result.get("Messages") or []
        logger.debug(f"Dry run on process '{process_id}' returned {len(messages)} message(s)")
        return list(messages)
