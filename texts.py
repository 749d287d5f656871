"""Labels, messages and form field titles for the video production menus.

Field titles double as metadata labels (see ``aspects``), so any label that
appears in both places is declared here exactly once.
"""

from __future__ import annotations

# Phase titles
PHASE_TITLE_INITIAL_DETAILS = "Initial Details"
PHASE_TITLE_WORK_PROGRESS = "Work In Progress"
PHASE_TITLE_DEFINITION = "Definition"
PHASE_TITLE_POST_PRODUCTION = "Post-Production"
PHASE_TITLE_PUBLISHING_DETAILS = "Publishing Details"
PHASE_TITLE_POST_PUBLISH = "Post-Publish Details"

MENU_TITLE_ANALYSIS = "Analysis"

PHASE_TITLES = (
    PHASE_TITLE_INITIAL_DETAILS,
    PHASE_TITLE_WORK_PROGRESS,
    PHASE_TITLE_DEFINITION,
    PHASE_TITLE_POST_PRODUCTION,
    PHASE_TITLE_PUBLISHING_DETAILS,
    PHASE_TITLE_POST_PUBLISH,
)

# Edit cancelled
MESSAGE_INITIAL_DETAILS_EDIT_CANCELLED = "Initial details edit cancelled."
MESSAGE_WORK_PROGRESS_EDIT_CANCELLED = "Work progress edit cancelled."
MESSAGE_POST_PRODUCTION_EDIT_CANCELLED = "Post-production edit cancelled."
MESSAGE_DEFINITION_PHASE_ABORTED = "Definition phase aborted."

# Errors
ERROR_RUN_INITIAL_DETAILS_FORM = "failed to run initial details edit form"
ERROR_RUN_WORK_PROGRESS_FORM = "failed to run work progress edit form"
ERROR_RUN_POST_PRODUCTION_FORM = "failed to run post-production edit form"
ERROR_SAVE_INITIAL_DETAILS = "failed to save initial details"
ERROR_SAVE_WORK_PROGRESS = "failed to save work progress"
ERROR_SAVE_POST_PRODUCTION_DETAILS = "failed to save post-production details"
ERROR_DEFINITION_PHASE = "error during definition phase"

# Success
MESSAGE_INITIAL_DETAILS_UPDATED = "initial details updated"
MESSAGE_WORK_PROGRESS_UPDATED = "work progress updated"
MESSAGE_POST_PRODUCTION_UPDATED = "post-production details updated"

# Changes not saved
MESSAGE_CHANGES_NOT_SAVED_INITIAL_DETAILS = "Changes not saved for initial details."
MESSAGE_CHANGES_NOT_SAVED_WORK_PROGRESS = "Changes not saved for work progress."
MESSAGE_CHANGES_NOT_SAVED_POST_PRODUCTION = "Changes not saved for post-production."

MESSAGE_DEFINITION_PHASE_COMPLETE = "--- Definition Phase Complete ---"

EDIT_CANCELLED_MESSAGES = (
    MESSAGE_INITIAL_DETAILS_EDIT_CANCELLED,
    MESSAGE_WORK_PROGRESS_EDIT_CANCELLED,
    MESSAGE_POST_PRODUCTION_EDIT_CANCELLED,
    MESSAGE_DEFINITION_PHASE_ABORTED,
)

ERROR_MESSAGES = (
    ERROR_RUN_INITIAL_DETAILS_FORM,
    ERROR_RUN_WORK_PROGRESS_FORM,
    ERROR_RUN_POST_PRODUCTION_FORM,
    ERROR_SAVE_INITIAL_DETAILS,
    ERROR_SAVE_WORK_PROGRESS,
    ERROR_SAVE_POST_PRODUCTION_DETAILS,
    ERROR_DEFINITION_PHASE,
)

SUCCESS_MESSAGES = (
    MESSAGE_INITIAL_DETAILS_UPDATED,
    MESSAGE_WORK_PROGRESS_UPDATED,
    MESSAGE_POST_PRODUCTION_UPDATED,
)

CHANGES_NOT_SAVED_MESSAGES = (
    MESSAGE_CHANGES_NOT_SAVED_INITIAL_DETAILS,
    MESSAGE_CHANGES_NOT_SAVED_WORK_PROGRESS,
    MESSAGE_CHANGES_NOT_SAVED_POST_PRODUCTION,
)

MESSAGES = (
    *EDIT_CANCELLED_MESSAGES,
    *SUCCESS_MESSAGES,
    *CHANGES_NOT_SAVED_MESSAGES,
    MESSAGE_DEFINITION_PHASE_COMPLETE,
)

# Initial Details fields
FIELD_TITLE_PROJECT_NAME = "Project Name"
FIELD_TITLE_PROJECT_URL = "Project URL"
FIELD_TITLE_SPONSORSHIP_AMOUNT = "Sponsorship Amount"
FIELD_TITLE_SPONSORSHIP_EMAILS = "Sponsorship Emails (comma separated)"
FIELD_TITLE_SPONSORSHIP_BLOCKED = "Sponsorship Blocked Reason"
FIELD_TITLE_SPONSORSHIP_NAME = "Sponsorship Name"
FIELD_TITLE_SPONSORSHIP_URL = "Sponsorship URL"
FIELD_TITLE_PUBLISH_DATE = "Publish Date (YYYY-MM-DDTHH:MM)"
FIELD_TITLE_DELAYED = "Delayed"
FIELD_TITLE_GIST_PATH = "Gist Path (.md file)"

# Work Progress fields
FIELD_TITLE_CODE_DONE = "Code Done"
FIELD_TITLE_TALKING_HEAD_DONE = "Talking Head Done"
FIELD_TITLE_SCREEN_RECORDING_DONE = "Screen Recording Done"
FIELD_TITLE_RELATED_VIDEOS = "Related Videos (comma separated)"
FIELD_TITLE_THUMBNAILS_DONE = "Thumbnails Done"
FIELD_TITLE_DIAGRAMS_DONE = "Diagrams Done"
FIELD_TITLE_SCREENSHOTS_DONE = "Screenshots Done"
FIELD_TITLE_FILES_LOCATION = "Files Location (e.g., Google Drive link)"
FIELD_TITLE_TAGLINE = "Tagline"
FIELD_TITLE_TAGLINE_IDEAS = "Tagline Ideas"
FIELD_TITLE_OTHER_LOGOS = "Other Logos/Assets"

# Definition fields
FIELD_TITLE_TITLE = "Title"
FIELD_TITLE_DESCRIPTION = "Description"
FIELD_TITLE_HIGHLIGHT = "Highlight"
FIELD_TITLE_TAGS = "Tags"
FIELD_TITLE_DESCRIPTION_TAGS = "Description Tags"
FIELD_TITLE_TWEET = "Tweet"
FIELD_TITLE_ANIMATIONS_SCRIPT = "Animations Script"

# Post-Production fields
FIELD_TITLE_THUMBNAIL_PATH = "Thumbnail Path"
FIELD_TITLE_MEMBERS = "Members (comma separated)"
FIELD_TITLE_REQUEST_EDIT = "Edit Request"
FIELD_TITLE_TIMECODES = "Timecodes"
FIELD_TITLE_MOVIE_DONE = "Movie Done"
FIELD_TITLE_SLIDES_DONE = "Slides Done"

# Publishing fields
FIELD_TITLE_VIDEO_FILE_PATH = "Video File Path"
FIELD_TITLE_UPLOAD_TO_YOUTUBE = "Upload Video to YouTube?"
FIELD_TITLE_CURRENT_VIDEO_ID = "Current YouTube Video ID"
FIELD_TITLE_CREATE_HUGO = "Create/Update Hugo Post"

# Post-Publish fields
FIELD_TITLE_DOT_POSTED = "DevOpsToolkit Post Sent (manual)"
FIELD_TITLE_BLUESKY_POSTED = "BlueSky Post Sent"
FIELD_TITLE_LINKEDIN_POSTED = "LinkedIn Post Sent (manual)"
FIELD_TITLE_SLACK_POSTED = "Slack Post Sent"
FIELD_TITLE_YOUTUBE_HIGHLIGHT = "YouTube Highlight Created (manual)"
FIELD_TITLE_YOUTUBE_COMMENT = "YouTube Pinned Comment Added (manual)"
FIELD_TITLE_YOUTUBE_COMMENT_REPLY = "Replied to YouTube Comments (manual)"
FIELD_TITLE_GDE_POSTED = "GDE Advocu Post Sent (manual)"
FIELD_TITLE_CODE_REPOSITORY = "Code Repository URL"
FIELD_TITLE_NOTIFY_SPONSORS = "Notify Sponsors"

INITIAL_DETAILS_FIELD_TITLES = (
    FIELD_TITLE_PROJECT_NAME,
    FIELD_TITLE_PROJECT_URL,
    FIELD_TITLE_SPONSORSHIP_AMOUNT,
    FIELD_TITLE_SPONSORSHIP_EMAILS,
    FIELD_TITLE_SPONSORSHIP_BLOCKED,
    FIELD_TITLE_SPONSORSHIP_NAME,
    FIELD_TITLE_SPONSORSHIP_URL,
    FIELD_TITLE_PUBLISH_DATE,
    FIELD_TITLE_DELAYED,
    FIELD_TITLE_GIST_PATH,
)

WORK_PROGRESS_FIELD_TITLES = (
    FIELD_TITLE_CODE_DONE,
    FIELD_TITLE_TALKING_HEAD_DONE,
    FIELD_TITLE_SCREEN_RECORDING_DONE,
    FIELD_TITLE_RELATED_VIDEOS,
    FIELD_TITLE_THUMBNAILS_DONE,
    FIELD_TITLE_DIAGRAMS_DONE,
    FIELD_TITLE_SCREENSHOTS_DONE,
    FIELD_TITLE_FILES_LOCATION,
    FIELD_TITLE_TAGLINE,
    FIELD_TITLE_TAGLINE_IDEAS,
    FIELD_TITLE_OTHER_LOGOS,
)

DEFINITION_FIELD_TITLES = (
    FIELD_TITLE_TITLE,
    FIELD_TITLE_DESCRIPTION,
    FIELD_TITLE_HIGHLIGHT,
    FIELD_TITLE_TAGS,
    FIELD_TITLE_DESCRIPTION_TAGS,
    FIELD_TITLE_TWEET,
    FIELD_TITLE_ANIMATIONS_SCRIPT,
)

POST_PRODUCTION_FIELD_TITLES = (
    FIELD_TITLE_THUMBNAIL_PATH,
    FIELD_TITLE_MEMBERS,
    FIELD_TITLE_REQUEST_EDIT,
    FIELD_TITLE_TIMECODES,
    FIELD_TITLE_MOVIE_DONE,
    FIELD_TITLE_SLIDES_DONE,
)

PUBLISHING_FIELD_TITLES = (
    FIELD_TITLE_VIDEO_FILE_PATH,
    FIELD_TITLE_UPLOAD_TO_YOUTUBE,
    FIELD_TITLE_CURRENT_VIDEO_ID,
    FIELD_TITLE_CREATE_HUGO,
)

POST_PUBLISH_FIELD_TITLES = (
    FIELD_TITLE_DOT_POSTED,
    FIELD_TITLE_BLUESKY_POSTED,
    FIELD_TITLE_LINKEDIN_POSTED,
    FIELD_TITLE_SLACK_POSTED,
    FIELD_TITLE_YOUTUBE_HIGHLIGHT,
    FIELD_TITLE_YOUTUBE_COMMENT,
    FIELD_TITLE_YOUTUBE_COMMENT_REPLY,
    FIELD_TITLE_GDE_POSTED,
    FIELD_TITLE_CODE_REPOSITORY,
    FIELD_TITLE_NOTIFY_SPONSORS,
)

FIELD_TITLES = (
    *INITIAL_DETAILS_FIELD_TITLES,
    *WORK_PROGRESS_FIELD_TITLES,
    *DEFINITION_FIELD_TITLES,
    *POST_PRODUCTION_FIELD_TITLES,
    *PUBLISHING_FIELD_TITLES,
    *POST_PUBLISH_FIELD_TITLES,
)

__all__ = sorted(name for name in list(globals()) if name.isupper())
