"""Parameters of the task methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from wrike.params.common import JSONStruct, Metadata, json_field, url_field
from wrike.params.folders import CustomField


class TaskField(str, Enum):
    """Optional task field that can be requested."""

    RECURRENT = "recurrent"
    ATTACHMENT_COUNT = "attachmentCount"
    EFFORT_ALLOCATION = "effortAllocation"
    AUTHOR_IDS = "authorIds"
    HAS_ATTACHMENTS = "hasAttachments"
    PARENT_IDS = "parentIds"
    SUPER_PARENT_IDS = "superParentIds"
    SHARED_IDS = "sharedIds"
    RESPONSIBLE_IDS = "responsibleIds"
    DESCRIPTION = "description"
    BRIEF_DESCRIPTION = "briefDescription"
    SUPER_TASK_IDS = "superTaskIds"
    SUB_TASK_IDS = "subTaskIds"
    DEPENDENCY_IDS = "dependencyIds"
    METADATA = "metadata"
    CUSTOM_FIELDS = "customFields"


class TaskSortField(str, Enum):
    """Field a task query is sorted by."""

    CREATED_DATE = "CreatedDate"
    UPDATED_DATE = "UpdatedDate"
    COMPLETED_DATE = "CompletedDate"
    DUE_DATE = "DueDate"
    STATUS = "Status"
    IMPORTANCE = "Importance"
    TITLE = "Title"
    LAST_ACCESS_DATE = "LastAccessDate"


class TaskSortOrder(str, Enum):
    """Direction of a task query sort."""

    ASC = "Asc"
    DESC = "Desc"


@dataclass(kw_only=True)
class TaskDates(JSONStruct):
    """Scheduling of a task; zero values are left out."""

    type: str = field(default="", metadata=json_field("type", True))
    duration: int = field(default=0, metadata=json_field("duration", True))
    start: str = field(default="", metadata=json_field("start", True))
    due: str = field(default="", metadata=json_field("due", True))
    work_on_weekends: bool = field(
        default=False, metadata=json_field("workOnWeekends", True)
    )


@dataclass(kw_only=True)
class DateOrRange(JSONStruct):
    """An exact date or a date range used as a query filter."""

    start: str = field(default="", metadata=json_field("start", True))
    end: str = field(default="", metadata=json_field("end", True))
    equal: str = field(default="", metadata=json_field("equal", True))


@dataclass(kw_only=True)
class TaskEffort(JSONStruct):
    """Effort allocation of a task; ``mode`` is always sent."""

    mode: str = field(default="", metadata=json_field("mode"))
    total_effort: int = field(default=0, metadata=json_field("totalEffort", True))
    allocated_effort: int = field(
        default=0, metadata=json_field("allocatedEffort", True)
    )


@dataclass(kw_only=True)
class QueryTasksByIDs:
    """Parameters of the query of tasks by identifier."""

    fields: list[TaskField | str] = field(
        default_factory=list, metadata=url_field("fields", True)
    )


@dataclass(kw_only=True)
class QueryTasks:
    """Parameters of the tasks query."""

    descendants: bool | None = field(
        default=None, metadata=url_field("descendants", True)
    )
    title: str | None = field(default=None, metadata=url_field("title", True))
    status: list[str] = field(default_factory=list, metadata=url_field("status", True))
    importance: str = field(default="", metadata=url_field("importance", True))
    start_date: DateOrRange | None = field(
        default=None, metadata=url_field("startDate", True)
    )
    due_date: DateOrRange | None = field(
        default=None, metadata=url_field("dueDate", True)
    )
    scheduled_date: DateOrRange | None = field(
        default=None, metadata=url_field("scheduledDate", True)
    )
    created_date: DateOrRange | None = field(
        default=None, metadata=url_field("createdDate", True)
    )
    updated_date: DateOrRange | None = field(
        default=None, metadata=url_field("updatedDate", True)
    )
    completed_date: DateOrRange | None = field(
        default=None, metadata=url_field("completedDate", True)
    )
    authors: list[str] = field(default_factory=list, metadata=url_field("authors", True))
    responsibles: list[str] = field(
        default_factory=list, metadata=url_field("responsibles", True)
    )
    permalink: str | None = field(default=None, metadata=url_field("permalink", True))
    type: str = field(default="", metadata=url_field("type", True))
    limit: int | None = field(default=None, metadata=url_field("limit", True))
    sort_field: TaskSortField | str = field(
        default="", metadata=url_field("sortField", True)
    )
    sort_order: TaskSortOrder | str = field(
        default="", metadata=url_field("sortOrder", True)
    )
    sub_tasks: bool | None = field(default=None, metadata=url_field("subTasks", True))
    page_size: int | None = field(default=None, metadata=url_field("pageSize", True))
    next_page_token: str | None = field(
        default=None, metadata=url_field("nextPageToken", True)
    )
    metadata: Metadata | None = field(default=None, metadata=url_field("metadata", True))
    custom_field: CustomField | None = field(
        default=None, metadata=url_field("customField", True)
    )
    custom_statuses: list[str] = field(
        default_factory=list, metadata=url_field("customStatuses", True)
    )
    fields: list[TaskField | str] = field(
        default_factory=list, metadata=url_field("fields", True)
    )


@dataclass(kw_only=True)
class CreateTask:
    """Parameters of the task creation."""

    title: str = field(default="", metadata=url_field("title", True))
    description: str | None = field(
        default=None, metadata=url_field("description", True)
    )
    status: list[str] = field(default_factory=list, metadata=url_field("status", True))
    importance: str = field(default="", metadata=url_field("importance", True))
    dates: TaskDates | None = field(default=None, metadata=url_field("dates", True))
    shareds: list[str] = field(default_factory=list, metadata=url_field("shareds", True))
    parents: list[str] = field(default_factory=list, metadata=url_field("parents", True))
    responsibles: list[str] = field(
        default_factory=list, metadata=url_field("responsibles", True)
    )
    followers: list[str] = field(
        default_factory=list, metadata=url_field("followers", True)
    )
    follow: bool | None = field(default=None, metadata=url_field("follow", True))
    priority_before: str = field(
        default="", metadata=url_field("priorityBefore", True)
    )
    priority_after: str = field(default="", metadata=url_field("priorityAfter", True))
    super_tasks: list[str] = field(
        default_factory=list, metadata=url_field("superTasks", True)
    )
    metadata: list[Metadata] | None = field(
        default=None, metadata=url_field("metadata", True)
    )
    custom_fields: list[CustomField] = field(
        default_factory=list, metadata=url_field("customFields", True)
    )
    custom_status: str = field(default="", metadata=url_field("customStatus", True))
    effort_allocation: TaskEffort | None = field(
        default=None, metadata=url_field("effortAllocation", True)
    )
    fields: list[TaskField | str] = field(
        default_factory=list, metadata=url_field("fields", True)
    )


@dataclass(kw_only=True)
class ModifyTask:
    """Parameters of the task update."""

    title: str | None = field(default=None, metadata=url_field("title", True))
    description: str | None = field(
        default=None, metadata=url_field("description", True)
    )
    status: list[str] = field(default_factory=list, metadata=url_field("status", True))
    importance: str = field(default="", metadata=url_field("importance", True))
    dates: TaskDates | None = field(default=None, metadata=url_field("dates", True))
    add_parents: list[str] = field(
        default_factory=list, metadata=url_field("addParents", True)
    )
    remove_parents: list[str] = field(
        default_factory=list, metadata=url_field("removeParents", True)
    )
    add_shareds: list[str] = field(
        default_factory=list, metadata=url_field("addShareds", True)
    )
    remove_shareds: list[str] = field(
        default_factory=list, metadata=url_field("removeShareds", True)
    )
    add_responsibles: list[str] = field(
        default_factory=list, metadata=url_field("addResponsibles", True)
    )
    remove_responsibles: list[str] = field(
        default_factory=list, metadata=url_field("removeResponsibles", True)
    )
    add_followers: list[str] = field(
        default_factory=list, metadata=url_field("addFollowers", True)
    )
    follow: bool | None = field(default=None, metadata=url_field("follow", True))
    priority_before: str = field(
        default="", metadata=url_field("priorityBefore", True)
    )
    priority_after: str = field(default="", metadata=url_field("priorityAfter", True))
    add_super_tasks: list[str] = field(
        default_factory=list, metadata=url_field("addSuperTasks", True)
    )
    remove_super_tasks: list[str] = field(
        default_factory=list, metadata=url_field("removeSuperTasks", True)
    )
    metadata: list[Metadata] | None = field(
        default=None, metadata=url_field("metadata", True)
    )
    custom_fields: list[CustomField] = field(
        default_factory=list, metadata=url_field("customFields", True)
    )
    custom_status: str = field(default="", metadata=url_field("customStatus", True))
    restore: bool | None = field(default=None, metadata=url_field("restore", True))
    effort_allocation: TaskEffort | None = field(
        default=None, metadata=url_field("effortAllocation", True)
    )
    fields: list[TaskField | str] = field(
        default_factory=list, metadata=url_field("fields", True)
    )


@dataclass(kw_only=True)
class ModifyTasks:
    """Parameters of the update of several tasks."""

    custom_fields: list[CustomField] = field(
        default_factory=list, metadata=url_field("customFields", True)
    )
    effort_allocation: TaskEffort | None = field(
        default=None, metadata=url_field("effortAllocation", True)
    )