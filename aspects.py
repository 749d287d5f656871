"""Editing-aspect metadata built from the shared label registry.

Each aspect describes one workflow phase for metadata consumers. Titles come
straight from :mod:`texts` so the menus and the metadata always show the same
label for the same field.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

import texts
from core.constants import (
    ASPECT_KEY_DEFINITION,
    ASPECT_KEY_INITIAL_DETAILS,
    ASPECT_KEY_POST_PRODUCTION,
    ASPECT_KEY_POST_PUBLISH,
    ASPECT_KEY_PUBLISHING,
    ASPECT_KEY_WORK_PROGRESS,
    FIELD_TYPE_BOOLEAN,
    FIELD_TYPE_DATE,
    FIELD_TYPE_NUMBER,
    FIELD_TYPE_SELECT,
    FIELD_TYPE_STRING,
    FIELD_TYPE_TEXT,
    FIELD_TYPES,
)
from helpers.errors import AspectNotFoundError


class FieldMapping(BaseModel):
    """How a video property maps to a field of an aspect."""

    model_config = ConfigDict(frozen=True)

    video_property: str
    field_key: str
    field_type: str
    title: str
    required: bool = False
    order: int
    options: Optional[List[str]] = None
    default_value: Any = None


class AspectMapping(BaseModel):
    model_config = ConfigDict(frozen=True)

    aspect_key: str
    title: str
    description: str
    fields: List[FieldMapping] = Field(default_factory=list)


class AspectSummary(BaseModel):
    """Aspect overview without its fields."""

    key: str
    title: str
    description: str
    endpoint: str
    icon: str
    order: int
    field_count: int


class AspectField(BaseModel):
    """A single editable field as presented to metadata consumers."""

    name: str
    field_key: str
    field_type: str
    required: bool = False
    order: int
    description: str
    options: Optional[List[str]] = None
    default_value: Any = None


class AspectFields(BaseModel):
    aspect_key: str
    aspect_title: str
    fields: List[AspectField] = Field(default_factory=list)


_ICONS = {
    ASPECT_KEY_INITIAL_DETAILS: "info",
    ASPECT_KEY_WORK_PROGRESS: "video",
    ASPECT_KEY_DEFINITION: "edit",
    ASPECT_KEY_POST_PRODUCTION: "scissors",
    ASPECT_KEY_PUBLISHING: "upload",
    ASPECT_KEY_POST_PUBLISH: "share",
}

_FIELD_DESCRIPTIONS = {
    # Initial Details
    "projectName": "Name of the related project",
    "projectURL": "URL to the project repository or documentation",
    "sponsorshipAmount": "Sponsorship amount if applicable",
    "sponsorshipEmails": "Sponsor contact emails",
    "sponsorshipBlocked": "Reason the sponsorship is blocked",
    "publishDate": "Scheduled publication date and time",
    "delayed": "Whether the video is delayed",
    "gistPath": "Path to the manuscript/gist file",
    # Work Progress
    "codeDone": "Code/demonstration completed",
    "talkingHeadDone": "Talking head video recorded",
    "screenRecordingDone": "Screen recording completed",
    "relatedVideos": "List of related videos for reference",
    "thumbnailsDone": "Thumbnail images prepared",
    "diagramsDone": "Diagrams and visual aids created",
    "screenshotsDone": "Screenshots captured",
    "filesLocation": "File storage location or Google Drive link",
    "tagline": "Video tagline or subtitle",
    "taglineIdeas": "Alternative tagline options",
    "otherLogos": "Additional logos or assets needed",
    # Definition
    "title": "Video title",
    "description": "Video description text",
    "highlight": "Key highlight or main point",
    "tags": "Video tags for categorization",
    "descriptionTags": "Tags for video description",
    "tweet": "Social media tweet text",
    "animationsScript": "Animation instructions or script",
    # Post-Production
    "thumbnailPath": "Path to thumbnail image file",
    "members": "Team members involved",
    "requestEdit": "Special editing requests or notes",
    "timecodes": "Important timestamp markers",
    "movieDone": "Video editing completed",
    "slidesDone": "Presentation slides finalized",
    # Publishing
    "videoFilePath": "Path to final video file",
    "youTubeVideoId": "Identifier of the uploaded YouTube video",
    "hugoPostPath": "Create blog post with Hugo",
    # Post-Publish
    "dotPosted": "Posted to DevOpsToolkit",
    "blueSkyPosted": "Posted to BlueSky social media",
    "linkedInPosted": "Posted to LinkedIn",
    "slackPosted": "Posted to Slack channels",
    "youTubeHighlight": "YouTube highlight reel created",
    "youTubeComment": "Pinned comment added to YouTube",
    "youTubeCommentReply": "Replied to YouTube comments",
    "gdePosted": "Posted to GDE Advocu",
    "codeRepository": "Link to associated code repository",
    "notifySponsors": "Notify sponsors of publication",
}


def default_value_for(field_type: str, required: bool) -> Any:
    if field_type == FIELD_TYPE_BOOLEAN:
        return False
    if field_type == FIELD_TYPE_NUMBER:
        return 0
    if field_type in (FIELD_TYPE_STRING, FIELD_TYPE_TEXT, FIELD_TYPE_DATE, FIELD_TYPE_SELECT):
        return "" if required else None
    return None


def _field(
    video_property: str,
    field_key: str,
    field_type: str,
    title: str,
    order: int,
    *,
    required: bool = False,
    options: Optional[List[str]] = None,
) -> FieldMapping:
    if field_type not in FIELD_TYPES:
        field_type = FIELD_TYPE_STRING
    return FieldMapping(
        video_property=video_property,
        field_key=field_key,
        field_type=field_type,
        title=title,
        required=required,
        order=order,
        options=list(options) if options else None,
        default_value=default_value_for(field_type, required),
    )


def get_video_aspect_mappings() -> list[AspectMapping]:
    """Return every aspect mapping in workflow order.

    Field order matches the order in which the menu forms ask for them.
    """

    return [
        AspectMapping(
            aspect_key=ASPECT_KEY_INITIAL_DETAILS,
            title=texts.PHASE_TITLE_INITIAL_DETAILS,
            description="Initial video details and project information",
            fields=[
                _field("ProjectName", "projectName", FIELD_TYPE_STRING, texts.FIELD_TITLE_PROJECT_NAME, 1),
                _field("ProjectURL", "projectURL", FIELD_TYPE_STRING, texts.FIELD_TITLE_PROJECT_URL, 2),
                _field("Sponsorship.Amount", "sponsorshipAmount", FIELD_TYPE_STRING, texts.FIELD_TITLE_SPONSORSHIP_AMOUNT, 3),
                _field("Sponsorship.Emails", "sponsorshipEmails", FIELD_TYPE_STRING, texts.FIELD_TITLE_SPONSORSHIP_EMAILS, 4),
                _field("Sponsorship.Blocked", "sponsorshipBlocked", FIELD_TYPE_STRING, texts.FIELD_TITLE_SPONSORSHIP_BLOCKED, 5),
                _field("Date", "publishDate", FIELD_TYPE_DATE, texts.FIELD_TITLE_PUBLISH_DATE, 6),
                _field("Delayed", "delayed", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_DELAYED, 7),
                _field("Gist", "gistPath", FIELD_TYPE_STRING, texts.FIELD_TITLE_GIST_PATH, 8),
            ],
        ),
        AspectMapping(
            aspect_key=ASPECT_KEY_WORK_PROGRESS,
            title=texts.PHASE_TITLE_WORK_PROGRESS,
            description="Work progress and content creation status",
            fields=[
                _field("Code", "codeDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_CODE_DONE, 1),
                _field("Head", "talkingHeadDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_TALKING_HEAD_DONE, 2),
                _field("Screen", "screenRecordingDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_SCREEN_RECORDING_DONE, 3),
                _field("RelatedVideos", "relatedVideos", FIELD_TYPE_TEXT, texts.FIELD_TITLE_RELATED_VIDEOS, 4),
                _field("Thumbnails", "thumbnailsDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_THUMBNAILS_DONE, 5),
                _field("Diagrams", "diagramsDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_DIAGRAMS_DONE, 6),
                _field("Screenshots", "screenshotsDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_SCREENSHOTS_DONE, 7),
                _field("Location", "filesLocation", FIELD_TYPE_STRING, texts.FIELD_TITLE_FILES_LOCATION, 8),
                _field("Tagline", "tagline", FIELD_TYPE_STRING, texts.FIELD_TITLE_TAGLINE, 9),
                _field("TaglineIdeas", "taglineIdeas", FIELD_TYPE_TEXT, texts.FIELD_TITLE_TAGLINE_IDEAS, 10),
                _field("OtherLogos", "otherLogos", FIELD_TYPE_STRING, texts.FIELD_TITLE_OTHER_LOGOS, 11),
            ],
        ),
        AspectMapping(
            aspect_key=ASPECT_KEY_DEFINITION,
            title=texts.PHASE_TITLE_DEFINITION,
            description="Video content definition and metadata",
            fields=[
                _field("Title", "title", FIELD_TYPE_STRING, texts.FIELD_TITLE_TITLE, 1, required=True),
                _field("Description", "description", FIELD_TYPE_TEXT, texts.FIELD_TITLE_DESCRIPTION, 2),
                _field("Highlight", "highlight", FIELD_TYPE_STRING, texts.FIELD_TITLE_HIGHLIGHT, 3),
                _field("Tags", "tags", FIELD_TYPE_STRING, texts.FIELD_TITLE_TAGS, 4),
                _field("DescriptionTags", "descriptionTags", FIELD_TYPE_TEXT, texts.FIELD_TITLE_DESCRIPTION_TAGS, 5),
                _field("Tweet", "tweet", FIELD_TYPE_STRING, texts.FIELD_TITLE_TWEET, 6),
                _field("Animations", "animationsScript", FIELD_TYPE_TEXT, texts.FIELD_TITLE_ANIMATIONS_SCRIPT, 7),
            ],
        ),
        AspectMapping(
            aspect_key=ASPECT_KEY_POST_PRODUCTION,
            title=texts.PHASE_TITLE_POST_PRODUCTION,
            description="Post-production editing and review tasks",
            fields=[
                _field("Thumbnail", "thumbnailPath", FIELD_TYPE_STRING, texts.FIELD_TITLE_THUMBNAIL_PATH, 1),
                _field("Members", "members", FIELD_TYPE_STRING, texts.FIELD_TITLE_MEMBERS, 2),
                _field("RequestEdit", "requestEdit", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_REQUEST_EDIT, 3),
                _field("Timecodes", "timecodes", FIELD_TYPE_TEXT, texts.FIELD_TITLE_TIMECODES, 4),
                _field("Movie", "movieDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_MOVIE_DONE, 5),
                _field("Slides", "slidesDone", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_SLIDES_DONE, 6),
            ],
        ),
        AspectMapping(
            aspect_key=ASPECT_KEY_PUBLISHING,
            title=texts.PHASE_TITLE_PUBLISHING_DETAILS,
            description="Publishing settings and video upload",
            fields=[
                _field("UploadVideo", "videoFilePath", FIELD_TYPE_STRING, texts.FIELD_TITLE_VIDEO_FILE_PATH, 1),
                _field("VideoId", "youTubeVideoId", FIELD_TYPE_STRING, texts.FIELD_TITLE_CURRENT_VIDEO_ID, 2),
                _field("HugoPath", "hugoPostPath", FIELD_TYPE_STRING, texts.FIELD_TITLE_CREATE_HUGO, 3),
            ],
        ),
        AspectMapping(
            aspect_key=ASPECT_KEY_POST_PUBLISH,
            title=texts.PHASE_TITLE_POST_PUBLISH,
            description="Post-publication tasks and social media",
            fields=[
                _field("DOTPosted", "dotPosted", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_DOT_POSTED, 1),
                _field("BlueSkyPosted", "blueSkyPosted", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_BLUESKY_POSTED, 2),
                _field("LinkedInPosted", "linkedInPosted", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_LINKEDIN_POSTED, 3),
                _field("SlackPosted", "slackPosted", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_SLACK_POSTED, 4),
                _field("YouTubeHighlight", "youTubeHighlight", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_YOUTUBE_HIGHLIGHT, 5),
                _field("YouTubeComment", "youTubeComment", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_YOUTUBE_COMMENT, 6),
                _field("YouTubeCommentReply", "youTubeCommentReply", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_YOUTUBE_COMMENT_REPLY, 7),
                _field("GDE", "gdePosted", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_GDE_POSTED, 8),
                _field("Repo", "codeRepository", FIELD_TYPE_STRING, texts.FIELD_TITLE_CODE_REPOSITORY, 9),
                _field("NotifiedSponsors", "notifySponsors", FIELD_TYPE_BOOLEAN, texts.FIELD_TITLE_NOTIFY_SPONSORS, 10),
            ],
        ),
    ]


def endpoint_for(aspect_key: str) -> str:
    return f"/api/videos/{{videoName}}/{aspect_key}"


def describe_field(field_key: str) -> str:
    return _FIELD_DESCRIPTIONS.get(field_key, "Field description")


def get_aspects_overview() -> list[AspectSummary]:
    return [
        AspectSummary(
            key=mapping.aspect_key,
            title=mapping.title,
            description=mapping.description,
            endpoint=endpoint_for(mapping.aspect_key),
            icon=_ICONS.get(mapping.aspect_key, ""),
            order=index,
            field_count=len(mapping.fields),
        )
        for index, mapping in enumerate(get_video_aspect_mappings(), start=1)
    ]


def _aspect_field(field: FieldMapping) -> AspectField:
    return AspectField(
        name=field.title,
        field_key=field.field_key,
        field_type=field.field_type,
        required=field.required,
        order=field.order,
        description=describe_field(field.field_key),
        options=field.options,
        default_value=field.default_value,
    )


def get_aspect_fields(aspect_key: str) -> AspectFields:
    """Return the fields of one aspect or raise :class:`AspectNotFoundError`."""

    for mapping in get_video_aspect_mappings():
        if mapping.aspect_key == aspect_key:
            return AspectFields(
                aspect_key=mapping.aspect_key,
                aspect_title=mapping.title,
                fields=[_aspect_field(field) for field in mapping.fields],
            )
    raise AspectNotFoundError(aspect_key)


__all__ = [
    "AspectField",
    "AspectFields",
    "AspectMapping",
    "AspectSummary",
    "FieldMapping",
    "default_value_for",
    "describe_field",
    "endpoint_for",
    "get_aspect_fields",
    "get_aspects_overview",
    "get_video_aspect_mappings",
]
