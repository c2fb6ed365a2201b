"""Client for the Wrike REST API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable

from wrike.config import Config
from wrike.params.common import encode
from wrike.transport import HTTPClient, Request, new_request


@dataclass
class Envelope:
    """A decoded API response: the kind of objects and their list."""

    kind: str = ""
    data: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: bytes | str) -> "Envelope":
        """Decode a response body; raise ``ValueError`` if it is not an envelope."""
        document = json.loads(data)
        if not isinstance(document, dict):
            raise ValueError("response is not a JSON object")
        kind = document.get("kind") or ""
        items = document.get("data") or []
        if not isinstance(kind, str):
            raise ValueError("response kind is not a string")
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise ValueError("response data is not a list of objects")
        return cls(kind=kind, data=items)


def _join_ids(ids: Iterable[Any]) -> str:
    return ",".join(str(item) for item in ids)


class API:
    """Calls the API methods with the given configuration and HTTP client."""

    def __init__(self, config: Config, http_client: Any = None) -> None:
        self.config = config
        self.http_client = http_client if http_client is not None else HTTPClient()

    def _perform(self, request: Request) -> Envelope:
        return Envelope.from_json(self.http_client.do(request))

    def _get(self, path: str, params: Any) -> Envelope:
        query = encode(params)
        return self._perform(new_request(self.config, "GET", f"{path}?{query}"))

    def _put(self, path: str, params: Any) -> Envelope:
        return self._perform(new_request(self.config, "PUT", path, encode(params)))

    def _post(self, path: str, params: Any) -> Envelope:
        return self._perform(new_request(self.config, "POST", path, encode(params)))

    def _delete(self, path: str) -> Envelope:
        return self._perform(new_request(self.config, "DELETE", path))

    def copy_folder(self, folder_id: str, params: Any) -> Envelope:
        """Copy a folder."""
        return self._post(f"/copy_folder/{folder_id}", params)

    def create_custom_field(self, params: Any) -> Envelope:
        """Create a custom field."""
        return self._post("/customFields", params)

    def create_folder(self, folder_id: str, params: Any) -> Envelope:
        """Create a folder inside ``folder_id``."""
        return self._post(f"/folders/{folder_id}/folders", params)

    def create_group(self, params: Any) -> Envelope:
        """Create a group."""
        return self._post("/groups", params)

    def create_task(self, folder_id: str, params: Any) -> Envelope:
        """Create a task in ``folder_id``."""
        return self._post(f"/folders/{folder_id}/tasks", params)

    def create_workflow(self, params: Any) -> Envelope:
        """Create a workflow."""
        return self._post("/workflows", params)

    def delete_folder(self, folder_id: str) -> Envelope:
        """Delete a folder."""
        return self._delete(f"/folders/{folder_id}")

    def delete_group(self, group_id: str) -> Envelope:
        """Delete a group."""
        return self._delete(f"/groups/{group_id}")

    def delete_task(self, task_id: str) -> Envelope:
        """Delete a task."""
        return self._delete(f"/tasks/{task_id}")

    def get_folder_tree(self, params: Any) -> Envelope:
        """Fetch the entries of the account's folder tree."""
        return self._get("/folders", params)

    def get_folder_subtree(self, folder_id: str, params: Any) -> Envelope:
        """Fetch the entries of the subtree below ``folder_id``."""
        return self._get(f"/folders/{folder_id}/folders", params)

    def get_folders(self, folder_ids: Iterable[str], params: Any) -> Envelope:
        """Fetch complete information about the given folders."""
        return self._get(f"/folders/{_join_ids(folder_ids)}", params)

    def modify_account(self, params: Any) -> Envelope:
        """Update the current account."""
        return self._put("/account", params)

    def modify_contact(self, contact_id: str, params: Any) -> Envelope:
        """Update a contact."""
        return self._put(f"/contacts/{contact_id}", params)

    def modify_custom_field(self, field_id: str, params: Any) -> Envelope:
        """Update a custom field."""
        return self._put(f"/customfields/{field_id}", params)

    def modify_folder(self, folder_id: str, params: Any) -> Envelope:
        """Update a folder."""
        return self._put(f"/folders/{folder_id}", params)

    def modify_folders(self, folder_ids: Iterable[str], params: Any) -> Envelope:
        """Update several folders at once."""
        return self._put(f"/folders/{_join_ids(folder_ids)}", params)

    def modify_group(self, group_id: str, params: Any) -> Envelope:
        """Update a group."""
        return self._put(f"/groups/{group_id}", params)

    def modify_task(self, task_id: str, params: Any) -> Envelope:
        """Update a task."""
        return self._put(f"/tasks/{task_id}", params)

    def modify_tasks(self, task_ids: Iterable[str], params: Any) -> Envelope:
        """Update several tasks at once."""
        return self._put(f"/tasks/{_join_ids(task_ids)}", params)

    def modify_user(self, user_id: str, params: Any) -> Envelope:
        """Update a user."""
        return self._put(f"/users/{user_id}", params)

    def modify_workflow(self, workflow_id: str, params: Any) -> Envelope:
        """Update a workflow."""
        return self._put(f"/workflows/{workflow_id}", params)

    def query_accounts(self, params: Any) -> Envelope:
        """Fetch the current account."""
        return self._get("/account", params)

    def query_task_attachments(self, task_id: str, params: Any) -> Envelope:
        """Fetch the attachments of a task."""
        return self._get(f"/tasks/{task_id}/attachments", params)