# wrike

A small Python client for version 4 of the Wrike REST API. It uses only the
standard library.

It creates, changes, copies and deletes folders, projects, tasks, groups,
workflows and custom fields, and reads or updates the account, contacts and
users. Request parameters are plain dataclasses; they are encoded as form
data, with structured values (lists of IDs, metadata, project settings and
so on) sent as JSON text.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Getting started

Create a `Config` with your access token, then an `API` object:

```python
from wrike.api import API
from wrike.config import Config
from wrike.transport import HTTPClient

config = Config(api_access_token="token", api_host="")  # empty host selects the default
api = API(config, HTTPClient(timeout=10))
```

The default host is `app-eu.wrike.com` (`wrike.config.DEFAULT_API_HOST`).
If no HTTP client is given, `API` makes an `HTTPClient` with a timeout of
10 seconds.

Requests go to `https://<host>/api/v4` and carry the headers
`Authorization: bearer <token>` and
`Content-Type: application/x-www-form-urlencoded`. GET parameters go in
the query string; PUT and POST parameters go in the body.

## Calling the API

Each method builds the request, sends it and returns an `Envelope`: its
`kind` is the kind of objects returned and its `data` is their list, as
decoded JSON dictionaries.

```python
from wrike.params.accounts import ModifyAccount
from wrike.params.common import Metadata
from wrike.params.workflows import CreateWorkflow

workflows = api.create_workflow(CreateWorkflow(name="Test workflow"))
print(workflows.data[0]["id"])

accounts = api.modify_account(
    ModifyAccount(metadata=[Metadata(key="testMetaKey", value="testMetaValue")])
)
```

| Area          | Methods |
|---------------|---------|
| Accounts      | `query_accounts`, `modify_account` |
| Contacts      | `modify_contact`, `modify_user` |
| Custom fields | `create_custom_field`, `modify_custom_field` |
| Folders       | `get_folder_tree`, `get_folder_subtree`, `get_folders`, `create_folder`, `copy_folder`, `modify_folder`, `modify_folders`, `delete_folder` |
| Groups        | `create_group`, `modify_group`, `delete_group` |
| Tasks         | `create_task`, `modify_task`, `modify_tasks`, `delete_task`, `query_task_attachments` |
| Workflows     | `create_workflow`, `modify_workflow` |

Methods that take several IDs (`get_folders`, `modify_folders`,
`modify_tasks`) join them with commas in the path.

## Parameter classes

They live in `wrike.params`:

- `accounts`: `QueryAccounts`, `ModifyAccount`, `QueryContacts`,
  `ModifyContact`, `Profile`, `ModifyUser`
- `attachments`: `Date`, `QueryTaskAttachments`
- `custom_fields`: `Settings`, `CreateCustomField`, `ModifyCustomField`
- `folders`: `Comparator`, `DateRange`, `CustomFieldFilter`,
  `GetFolderTree`, `GetFolderSubtree`, `CustomField`, `Project`,
  `ProjectModify`, `CreateFolder`, `GetFolders`, `CopyFolder`,
  `ModifyFolder`, `ModifyFolders`
- `groups`: `CreateGroup`, `ModifyGroup`, `QueryGroup`, `QueryGroups`
- `tasks`: `TaskField`, `TaskSortField`, `TaskSortOrder`, `TaskDates`,
  `DateOrRange`, `TaskEffort`, `QueryTasksByIDs`, `QueryTasks`,
  `CreateTask`, `ModifyTask`, `ModifyTasks`
- `workflows`: `CreateWorkflow`, `CustomStatus`, `ModifyWorkflow`

All are keyword-only dataclasses. Optional values left at `None` (or empty
lists and strings, where the field is optional) are not sent.

## Encoding parameters yourself

`wrike.params.common` holds the shared pieces: `Metadata`, `Avatar`, the
`JSONStruct` base class (with `to_dict` and `to_json`), the field helpers
`json_field` and `url_field`, and the encoders:

- `encode_values(params)` returns the form values as a dictionary of lists;
- `encode(params)` returns the URL-encoded string the client sends, with
  keys in sorted order.

```python
from wrike.params.common import encode
from wrike.params.workflows import CreateWorkflow

encode(CreateWorkflow(name="Test workflow"))  # 'name=Test+workflow'
```

`JSONStruct` values and lists are sent as compact JSON text; other nested
dataclasses, such as `Settings`, are flattened into `outer[inner]` keys.
Passing anything other than a dataclass instance (or `None`) raises
`TypeError`.

## Errors

`HTTPClient.do` returns the response body whatever the HTTP status;
network failures raise the `urllib.error` exception. A body that is not a
JSON object with a `kind` string and a `data` list of objects makes the
call raise `ValueError`.

## Testing against a stub

`API` accepts any object with a `do(request)` method that takes a
`wrike.transport.Request` (`method`, `url`, `headers`, `body`) and returns
the response body as bytes, so a stub can record the request and replay a
fixed JSON document instead of using the network.

## What it does not do

- There is no command-line tool; this is a library only.
- `QueryContacts`, `QueryGroup`, `QueryGroups`, `QueryTasks` and
  `QueryTasksByIDs` can be built and encoded, but `API` has no method that
  sends them.
- Responses are not turned into typed objects; `Envelope.data` holds plain
  dictionaries.
- There is no paging helper, retrying or rate limiting.