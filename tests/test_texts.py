import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

import texts
from texts import (
    ERROR_DEFINITION_PHASE,
    ERROR_RUN_INITIAL_DETAILS_FORM,
    ERROR_RUN_POST_PRODUCTION_FORM,
    ERROR_RUN_WORK_PROGRESS_FORM,
    ERROR_SAVE_INITIAL_DETAILS,
    ERROR_SAVE_POST_PRODUCTION_DETAILS,
    ERROR_SAVE_WORK_PROGRESS,
    FIELD_TITLE_BLUESKY_POSTED,
    FIELD_TITLE_CODE_DONE,
    FIELD_TITLE_DELAYED,
    FIELD_TITLE_DESCRIPTION,
    FIELD_TITLE_MOVIE_DONE,
    FIELD_TITLE_PROJECT_NAME,
    MESSAGE_DEFINITION_PHASE_ABORTED,
    MESSAGE_DEFINITION_PHASE_COMPLETE,
    MESSAGE_INITIAL_DETAILS_EDIT_CANCELLED,
    MESSAGE_POST_PRODUCTION_EDIT_CANCELLED,
    MESSAGE_WORK_PROGRESS_EDIT_CANCELLED,
    PHASE_TITLE_DEFINITION,
    PHASE_TITLE_INITIAL_DETAILS,
    PHASE_TITLE_POST_PRODUCTION,
    PHASE_TITLE_POST_PUBLISH,
    PHASE_TITLE_PUBLISHING_DETAILS,
    PHASE_TITLE_WORK_PROGRESS,
)


def test_phase_title_constants() -> None:
    phase_titles = [
        PHASE_TITLE_INITIAL_DETAILS,
        PHASE_TITLE_WORK_PROGRESS,
        PHASE_TITLE_DEFINITION,
        PHASE_TITLE_POST_PRODUCTION,
        PHASE_TITLE_PUBLISHING_DETAILS,
        PHASE_TITLE_POST_PUBLISH,
    ]
    expected = [
        "Initial Details",
        "Work In Progress",
        "Definition",
        "Post-Production",
        "Publishing Details",
        "Post-Publish Details",
    ]

    assert len(phase_titles) == len(expected)
    for title, value in zip(phase_titles, expected):
        assert title == value
    assert list(texts.PHASE_TITLES) == expected


@pytest.mark.parametrize(
    "constant, expected",
    [
        (FIELD_TITLE_PROJECT_NAME, "Project Name"),
        (FIELD_TITLE_DESCRIPTION, "Description"),
        (FIELD_TITLE_CODE_DONE, "Code Done"),
        (FIELD_TITLE_MOVIE_DONE, "Movie Done"),
        (FIELD_TITLE_BLUESKY_POSTED, "BlueSky Post Sent"),
        (FIELD_TITLE_DELAYED, "Delayed"),
    ],
)
def test_field_title_constants(constant: str, expected: str) -> None:
    assert constant == expected


def test_field_titles_with_hints_keep_their_suffix() -> None:
    assert texts.FIELD_TITLE_PUBLISH_DATE == "Publish Date (YYYY-MM-DDTHH:MM)"
    assert texts.FIELD_TITLE_SPONSORSHIP_EMAILS == "Sponsorship Emails (comma separated)"
    assert texts.FIELD_TITLE_FILES_LOCATION == "Files Location (e.g., Google Drive link)"
    assert texts.FIELD_TITLE_UPLOAD_TO_YOUTUBE == "Upload Video to YouTube?"
    assert texts.FIELD_TITLE_GDE_POSTED == "GDE Advocu Post Sent (manual)"


@pytest.mark.parametrize(
    "constant, fragment",
    [
        (MESSAGE_INITIAL_DETAILS_EDIT_CANCELLED, "Initial details"),
        (MESSAGE_WORK_PROGRESS_EDIT_CANCELLED, "Work progress"),
        (MESSAGE_POST_PRODUCTION_EDIT_CANCELLED, "Post-production"),
        (MESSAGE_DEFINITION_PHASE_ABORTED, "Definition phase"),
        (MESSAGE_DEFINITION_PHASE_COMPLETE, "Definition Phase Complete"),
    ],
)
def test_message_constants(constant: str, fragment: str) -> None:
    assert constant
    assert fragment in constant


def test_error_constants() -> None:
    errors = [
        ERROR_RUN_INITIAL_DETAILS_FORM,
        ERROR_RUN_WORK_PROGRESS_FORM,
        ERROR_RUN_POST_PRODUCTION_FORM,
        ERROR_SAVE_INITIAL_DETAILS,
        ERROR_SAVE_WORK_PROGRESS,
        ERROR_SAVE_POST_PRODUCTION_DETAILS,
        ERROR_DEFINITION_PHASE,
    ]
    assert list(texts.ERROR_MESSAGES) == errors
    for value in errors:
        assert value
        assert len(value) >= 10, value


def test_success_and_not_saved_messages() -> None:
    assert texts.SUCCESS_MESSAGES == (
        "initial details updated",
        "work progress updated",
        "post-production details updated",
    )
    assert texts.CHANGES_NOT_SAVED_MESSAGES == (
        "Changes not saved for initial details.",
        "Changes not saved for work progress.",
        "Changes not saved for post-production.",
    )


def test_phase_titles_are_unique() -> None:
    assert len(set(texts.PHASE_TITLES)) == 6
    assert texts.MENU_TITLE_ANALYSIS not in texts.PHASE_TITLES


def test_field_titles_declared_once() -> None:
    assert len(set(texts.FIELD_TITLES)) == len(texts.FIELD_TITLES)
    grouped = (
        texts.INITIAL_DETAILS_FIELD_TITLES
        + texts.WORK_PROGRESS_FIELD_TITLES
        + texts.DEFINITION_FIELD_TITLES
        + texts.POST_PRODUCTION_FIELD_TITLES
        + texts.PUBLISHING_FIELD_TITLES
        + texts.POST_PUBLISH_FIELD_TITLES
    )
    assert grouped == texts.FIELD_TITLES
    assert all(title for title in texts.FIELD_TITLES)


def test_rereading_constants_returns_same_value() -> None:
    first = texts.FIELD_TITLE_MOVIE_DONE
    second = getattr(texts, "FIELD_TITLE_MOVIE_DONE")
    assert first == second == "Movie Done"
    assert texts.PHASE_TITLES == texts.PHASE_TITLES


def test_groups_are_tuples() -> None:
    for group in (
        texts.PHASE_TITLES,
        texts.MESSAGES,
        texts.ERROR_MESSAGES,
        texts.FIELD_TITLES,
    ):
        assert isinstance(group, tuple)


def test_all_exports_only_constants() -> None:
    assert "PHASE_TITLE_INITIAL_DETAILS" in texts.__all__
    assert "FIELD_TITLES" in texts.__all__
    assert all(name.isupper() for name in texts.__all__)
    assert all(isinstance(getattr(texts, name), (str, tuple)) for name in texts.__all__)


FIELD_TITLE_LITERALS = [
    ("FIELD_TITLE_PROJECT_NAME", "Project Name"),
    ("FIELD_TITLE_PROJECT_URL", "Project URL"),
    ("FIELD_TITLE_SPONSORSHIP_AMOUNT", "Sponsorship Amount"),
    ("FIELD_TITLE_SPONSORSHIP_EMAILS", "Sponsorship Emails (comma separated)"),
    ("FIELD_TITLE_SPONSORSHIP_BLOCKED", "Sponsorship Blocked Reason"),
    ("FIELD_TITLE_SPONSORSHIP_NAME", "Sponsorship Name"),
    ("FIELD_TITLE_SPONSORSHIP_URL", "Sponsorship URL"),
    ("FIELD_TITLE_PUBLISH_DATE", "Publish Date (YYYY-MM-DDTHH:MM)"),
    ("FIELD_TITLE_DELAYED", "Delayed"),
    ("FIELD_TITLE_GIST_PATH", "Gist Path (.md file)"),
    ("FIELD_TITLE_CODE_DONE", "Code Done"),
    ("FIELD_TITLE_TALKING_HEAD_DONE", "Talking Head Done"),
    ("FIELD_TITLE_SCREEN_RECORDING_DONE", "Screen Recording Done"),
    ("FIELD_TITLE_RELATED_VIDEOS", "Related Videos (comma separated)"),
    ("FIELD_TITLE_THUMBNAILS_DONE", "Thumbnails Done"),
    ("FIELD_TITLE_DIAGRAMS_DONE", "Diagrams Done"),
    ("FIELD_TITLE_SCREENSHOTS_DONE", "Screenshots Done"),
    ("FIELD_TITLE_FILES_LOCATION", "Files Location (e.g., Google Drive link)"),
    ("FIELD_TITLE_TAGLINE", "Tagline"),
    ("FIELD_TITLE_TAGLINE_IDEAS", "Tagline Ideas"),
    ("FIELD_TITLE_OTHER_LOGOS", "Other Logos/Assets"),
    ("FIELD_TITLE_TITLE", "Title"),
    ("FIELD_TITLE_DESCRIPTION", "Description"),
    ("FIELD_TITLE_HIGHLIGHT", "Highlight"),
    ("FIELD_TITLE_TAGS", "Tags"),
    ("FIELD_TITLE_DESCRIPTION_TAGS", "Description Tags"),
    ("FIELD_TITLE_TWEET", "Tweet"),
    ("FIELD_TITLE_ANIMATIONS_SCRIPT", "Animations Script"),
    ("FIELD_TITLE_THUMBNAIL_PATH", "Thumbnail Path"),
    ("FIELD_TITLE_MEMBERS", "Members (comma separated)"),
    ("FIELD_TITLE_REQUEST_EDIT", "Edit Request"),
    ("FIELD_TITLE_TIMECODES", "Timecodes"),
    ("FIELD_TITLE_MOVIE_DONE", "Movie Done"),
    ("FIELD_TITLE_SLIDES_DONE", "Slides Done"),
    ("FIELD_TITLE_VIDEO_FILE_PATH", "Video File Path"),
    ("FIELD_TITLE_UPLOAD_TO_YOUTUBE", "Upload Video to YouTube?"),
    ("FIELD_TITLE_CURRENT_VIDEO_ID", "Current YouTube Video ID"),
    ("FIELD_TITLE_CREATE_HUGO", "Create/Update Hugo Post"),
    ("FIELD_TITLE_DOT_POSTED", "DevOpsToolkit Post Sent (manual)"),
    ("FIELD_TITLE_BLUESKY_POSTED", "BlueSky Post Sent"),
    ("FIELD_TITLE_LINKEDIN_POSTED", "LinkedIn Post Sent (manual)"),
    ("FIELD_TITLE_SLACK_POSTED", "Slack Post Sent"),
    ("FIELD_TITLE_YOUTUBE_HIGHLIGHT", "YouTube Highlight Created (manual)"),
    ("FIELD_TITLE_YOUTUBE_COMMENT", "YouTube Pinned Comment Added (manual)"),
    ("FIELD_TITLE_YOUTUBE_COMMENT_REPLY", "Replied to YouTube Comments (manual)"),
    ("FIELD_TITLE_GDE_POSTED", "GDE Advocu Post Sent (manual)"),
    ("FIELD_TITLE_CODE_REPOSITORY", "Code Repository URL"),
    ("FIELD_TITLE_NOTIFY_SPONSORS", "Notify Sponsors"),
    ("MENU_TITLE_ANALYSIS", "Analysis"),
]


@pytest.mark.parametrize("name, expected", FIELD_TITLE_LITERALS)
def test_every_title_constant_literal(name: str, expected: str) -> None:
    assert getattr(texts, name) == expected


def test_literal_table_covers_every_field_title() -> None:
    declared = {name for name in texts.__all__ if name.startswith("FIELD_TITLE_")}
    listed = {name for name, _ in FIELD_TITLE_LITERALS if name.startswith("FIELD_TITLE_")}
    assert listed == declared
    assert len(declared) == len(texts.FIELD_TITLES)


def test_edit_cancelled_messages_literals() -> None:
    assert texts.EDIT_CANCELLED_MESSAGES == (
        "Initial details edit cancelled.",
        "Work progress edit cancelled.",
        "Post-production edit cancelled.",
        "Definition phase aborted.",
    )


def test_messages_literals() -> None:
    assert texts.MESSAGES == (
        "Initial details edit cancelled.",
        "Work progress edit cancelled.",
        "Post-production edit cancelled.",
        "Definition phase aborted.",
        "initial details updated",
        "work progress updated",
        "post-production details updated",
        "Changes not saved for initial details.",
        "Changes not saved for work progress.",
        "Changes not saved for post-production.",
        "--- Definition Phase Complete ---",
    )
