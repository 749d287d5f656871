"""Shared identifiers for video lifecycle phases, editing aspects and field types."""

from types import MappingProxyType

PHASE_PUBLISHED = 0
PHASE_PUBLISH_PENDING = 1
PHASE_EDIT_REQUESTED = 2
PHASE_MATERIAL_DONE = 3
PHASE_STARTED = 4
PHASE_DELAYED = 5
PHASE_SPONSORED_BLOCKED = 6
PHASE_IDEAS = 7

PHASE_NAMES = MappingProxyType(
    {
        PHASE_PUBLISHED: "Published",
        PHASE_PUBLISH_PENDING: "Publish Pending",
        PHASE_EDIT_REQUESTED: "Edit Requested",
        PHASE_MATERIAL_DONE: "Material Done",
        PHASE_STARTED: "Started",
        PHASE_DELAYED: "Delayed",
        PHASE_SPONSORED_BLOCKED: "Sponsored Blocked",
        PHASE_IDEAS: "Ideas",
    }
)

# Aspect keys match the phase identifiers used by the video service
ASPECT_KEY_INITIAL_DETAILS = "initial-details"
ASPECT_KEY_WORK_PROGRESS = "work-progress"
ASPECT_KEY_DEFINITION = "definition"
ASPECT_KEY_POST_PRODUCTION = "post-production"
ASPECT_KEY_PUBLISHING = "publishing"
ASPECT_KEY_POST_PUBLISH = "post-publish"

ASPECT_KEYS = (
    ASPECT_KEY_INITIAL_DETAILS,
    ASPECT_KEY_WORK_PROGRESS,
    ASPECT_KEY_DEFINITION,
    ASPECT_KEY_POST_PRODUCTION,
    ASPECT_KEY_PUBLISHING,
    ASPECT_KEY_POST_PUBLISH,
)

FIELD_TYPE_STRING = "string"  # short text input
FIELD_TYPE_TEXT = "text"  # multi-line text area
FIELD_TYPE_BOOLEAN = "boolean"
FIELD_TYPE_DATE = "date"
FIELD_TYPE_NUMBER = "number"
FIELD_TYPE_SELECT = "select"

FIELD_TYPES = (
    FIELD_TYPE_STRING,
    FIELD_TYPE_TEXT,
    FIELD_TYPE_BOOLEAN,
    FIELD_TYPE_DATE,
    FIELD_TYPE_NUMBER,
    FIELD_TYPE_SELECT,
)

__all__ = [
    "PHASE_PUBLISHED",
    "PHASE_PUBLISH_PENDING",
    "PHASE_EDIT_REQUESTED",
    "PHASE_MATERIAL_DONE",
    "PHASE_STARTED",
    "PHASE_DELAYED",
    "PHASE_SPONSORED_BLOCKED",
    "PHASE_IDEAS",
    "PHASE_NAMES",
    "ASPECT_KEY_INITIAL_DETAILS",
    "ASPECT_KEY_WORK_PROGRESS",
    "ASPECT_KEY_DEFINITION",
    "ASPECT_KEY_POST_PRODUCTION",
    "ASPECT_KEY_PUBLISHING",
    "ASPECT_KEY_POST_PUBLISH",
    "ASPECT_KEYS",
    "FIELD_TYPE_STRING",
    "FIELD_TYPE_TEXT",
    "FIELD_TYPE_BOOLEAN",
    "FIELD_TYPE_DATE",
    "FIELD_TYPE_NUMBER",
    "FIELD_TYPE_SELECT",
    "FIELD_TYPES",
]
